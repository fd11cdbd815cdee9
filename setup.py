# setup.py
from setuptools import setup, find_packages

setup(
    name="funpy",
    version="0.1.0",
    description="Curried functions with placeholders and a lazy, namespaced function container",
    packages=find_packages(include=["funpy", "funpy.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
