from kons.evaluation.evaluator import evaluate, eval_list
from kons.evaluation.apply import apply

__all__ = ["evaluate", "eval_list", "apply"]
