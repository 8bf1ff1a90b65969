"""
Setup script for the quickconfig package.
"""

from setuptools import setup, find_packages

setup(
    name="quickconfig",
    version="0.1.0",
    description="Capability-based configuration loading from command-line arguments, YAML and JSON",
    author="quickconfig contributors",
    packages=find_packages(include=["quickconfig", "quickconfig.*"]),
    python_requires=">=3.8",
    install_requires=[
        # YAML parsing and serialization
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
