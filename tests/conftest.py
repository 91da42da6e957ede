import pytest

from kons.builtin import default_environment
from kons.interpreter import interpret
from kons.reader.parser import read


@pytest.fixture
def env():
    return default_environment()


@pytest.fixture
def run(env):
    """Evaluate source against the fixture environment, raising on parse errors."""
    def _run(source):
        return interpret(source, env, strict=True)
    return _run


@pytest.fixture
def form():
    """Parse a single form from source text."""
    def _form(source):
        forms = read(source)
        assert len(forms) == 1
        return forms[0]
    return _form
