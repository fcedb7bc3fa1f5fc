"""Feedforward — pip-installable package."""

from setuptools import setup, find_packages

setup(
    name="feedforward",
    version="1.0.0",
    description="Minimal forward-only neural network evaluation built with NumPy",
    author="Luca Gandolfi",
    packages=find_packages(include=["feedforward", "feedforward.*"]),
    package_data={"feedforward": ["configs/*.yaml"]},
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.24.0",
        "loguru>=0.7.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": ["pytest>=7.4.0"],
    },
    entry_points={
        "console_scripts": [
            "feedforward-run=feedforward.cli:main",
        ],
    },
)
