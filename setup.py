#!/usr/bin/env python3
import setuptools

setuptools.setup(
    name="go-import-fixer",
    version="0.1.0",
    packages=["go_import_fixer"],
    python_requires=">=3.11",
    install_requires=[
        "click",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "goif = go_import_fixer.cli:main",
        ],
    },
    author="",
    description="Command-line tool to group and sort the import blocks of Go source files",
    license="MIT",
)
