# -*- coding: utf-8 -*-

# Copyright 2017, IBM.
#
# This source code is licensed under the Apache License, Version 2.0 found in
# the LICENSE.txt file in the root directory of this source tree.

"The qasmgen setup file."

import os

from setuptools import setup, find_packages

README_PATH = os.path.join(os.path.abspath(os.path.dirname(__file__)), "README.md")
with open(README_PATH) as readme_file:
    README = readme_file.read()

requirements = []

setup(
    name="qasmgen",
    version="0.1.0",
    description="Build quantum circuits and lower them to OpenQASM 2.0",
    long_description=README,
    long_description_content_type="text/markdown",
    license="Apache 2.0",
    classifiers=[
        "Environment :: Console",
        "License :: OSI Approved :: Apache Software License",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering",
    ],
    keywords="qasm openqasm quantum circuit",
    packages=find_packages(exclude=["test*"]),
    install_requires=requirements,
    include_package_data=True,
    python_requires=">=3.8",
    extras_require={
        "test": ["testtools", "ddt", "stestr", "pytest"],
        "lint": ["pylint", "pycodestyle"],
    },
)
