#!/usr/bin/env python3
from os import path

from setuptools import find_packages, setup

this_directory = path.abspath(path.dirname(__file__))
with open(path.join(this_directory, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="fieldmap",
    description="Declarative description of how properties of one type map to properties of another",
    long_description=long_description,
    long_description_content_type="text/markdown",
    version="0.1.0",
    license="Apache2",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Operating System :: OS Independent",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
    ],
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "attrs": [
            "attrs>=21.3.0",
        ],
        "test": [
            "pytest>=7.0",
            "attrs>=21.3.0",
        ],
        "dev": [
            "tox",
            "invoke",
            "coverage",
        ],
    },
)
