#!/usr/bin/env python3
"""
KV-Playground Setup Script
==========================
Allows installation of the kv-playground package.

Usage:
    pip install -e .           # Development install
    pip install -e ".[test]"   # Development install with test tools
    pip install .              # Regular install
"""

from setuptools import setup, find_packages

setup(
    name="kv-playground",
    version="1.0.0",
    packages=find_packages(include=["kv_playground", "kv_playground.*"]),
    python_requires=">=3.10",
    install_requires=[
        "redis>=5.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "kv-playground=kv_playground.playground:main",
        ],
    },
)
