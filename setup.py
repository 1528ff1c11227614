# setup.py
from setuptools import setup, find_packages

setup(
    name="risp",
    version="0.1.0",
    description="A small expression-language interpreter with a tree-walking evaluator",
    packages=find_packages(include=["risp", "risp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
