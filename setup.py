# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="sss-recover",
    version="0.1.0",
    description="Exact Shamir secret recovery from base-N encoded shares",
    author="Zilant Prime Core contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click<9.0,>=8.1",
        "cryptography>=38.0.4",
        "PyYAML<7.0,>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "sss-recover=sss_recover.cli:main",
        ],
    },
)
