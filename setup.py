# Copyright (C) 2022, generes contributors
# SPDX-License-Identifier: BSD-3-Clause

import os

from setuptools import setup

here = os.path.dirname(os.path.abspath(__file__))

version_ns = {}
with open(os.path.join(here, "generes", "_version.py")) as f:
    exec(f.read(), {}, version_ns)

__version__ = version_ns["__version__"]

setup(
    name="generes",
    version=__version__,
    url="https://github.com/rue-ryuzaki/cpp-generes",
    description="Tool to generate C++ headers with embedded binary resources.",
    packages=["generes"],
    entry_points={"console_scripts": ["generes = generes.generes:main"]},
    long_description=(
        "Embeds a list of binary files into one generated C++ header as a "
        "static map from alias to bytes."
    ),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={"test": ["pytest"]},
    zip_safe=False,
)
