#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="meowlang",
    version="0.1.0",
    description="Meow surface notation toolchain: transpiler, compiler and tape interpreter",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"meowlang": ["config.json5"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "json5",
    ],
    extras_require={
        "dev": ["pytest", "black", "mypy"],
    },
    entry_points={
        "console_scripts": [
            "meowlang=meowlang.cli:main",
        ],
    },
)
