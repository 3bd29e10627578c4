# setup.py - Package the treelog library
from setuptools import setup, find_packages

setup(
    name="treelog",
    version="0.1.0",
    description="Hierarchical, tree-shaped execution logs for composed computations",
    packages=find_packages(include=["treelog", "treelog.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
        "examples": ["numpy"],
    },
)
