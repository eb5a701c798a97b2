# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="minilisp",
    version="0.1.0",
    description="A minimal Lisp interpreter: reader, evaluator, environments and macros",
    packages=find_namespace_packages(include=["minilisp", "minilisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["minilisp = minilisp.repl:main"],
    },
    zip_safe=False,
)
