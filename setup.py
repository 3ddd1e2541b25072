# setup.py
from setuptools import setup, find_packages

setup(
    name="skicalc",
    version="0.1.0",
    description="Symbolic reduction engine for the SKI combinator calculus",
    packages=find_packages(include=["skicalc", "skicalc.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
