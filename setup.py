# setup.py
from setuptools import setup, find_packages

setup(
    name="kons",
    version="0.1.0",
    description="A tree-walking cons-cell Lisp interpreter",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["kons=kons.__main__:main"],
    },
    zip_safe=False,
)
