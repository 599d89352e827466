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
"""Helper functions for adding colors to simple text UI output.

Color output is off by default. Applications opt in by setting ``ENABLED``
(the ``host-os`` report does so for ``--color`` or ``HOST_OS_COLOR=1``).

"""
from __future__ import annotations

import sys

import colorama

__all__ = (
    "bright",
    "cyan",
    "dim",
    "green",
    "magenta",
    "red",
    "white",
    "yellow",
)


# Color terminal output needs to be explicitly opt-in
ENABLED = False


def _style(code: str, text: str) -> str:
    if not ENABLED:
        return text
    return f"{code}{text}{colorama.Style.RESET_ALL}"


def bright(text: str) -> str:
    return _style(colorama.Style.BRIGHT, text)


def dim(text: str) -> str:
    return _style(colorama.Style.DIM, text)


def white(text: str) -> str:
    return _style(colorama.Fore.WHITE, text)


def cyan(text: str) -> str:
    return _style(colorama.Fore.CYAN, text)


def red(text: str) -> str:
    return _style(colorama.Fore.RED, text)


def magenta(text: str) -> str:
    return _style(colorama.Fore.MAGENTA, text)


def green(text: str) -> str:
    return _style(colorama.Fore.GREEN, text)


def yellow(text: str) -> str:
    return _style(colorama.Fore.YELLOW, text)


if sys.platform == "win32":
    colorama.just_fix_windows_console()
