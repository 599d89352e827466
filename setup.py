#!/usr/bin/env python3

# Copyright 2024 NVIDIA Corporation
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

from setuptools import find_packages, setup

setup(
    name="host-os",
    version="1.0.0",
    description="host-os - Identify the host OS, Python interpreter and "
    "deployment environment",
    license="Apache 2.0",
    classifiers=[
        "Intended Audience :: Developers",
        "Topic :: System :: Operating System",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    extras_require={
        "test": [
            "coverage",
            "mypy>=0.961",
            "pytest-cov",
            "pytest-mock",
            "pytest",
        ]
    },
    packages=find_packages(
        where=".",
        include=[
            "host_os",
            "host_os.*",
        ],
    ),
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "host-os = host_os.__main__:main",
        ],
    },
    install_requires=[
        "colorama>=0.4.6",
        "typing_extensions",
    ],
    zip_safe=False,
)
