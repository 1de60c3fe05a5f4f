from setuptools import setup, find_packages

setup(
    name="quantica",
    version="0.1.0",
    packages=find_packages(include=["quantica", "quantica.*"]),
    install_requires=[
        "numpy>=1.21.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ],
    },
    author="Adam Koltuniuk",
    author_email="adam@koltuni.uk",
    description=(
        "Physical quantities with unit-aware arithmetic: conversion, reduction "
        "to base units and dimensional analysis over a textual definitions table."
    ),
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.10",
)
