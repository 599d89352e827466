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
"""Text formatting for the host report and for diagnostics.

"""
from __future__ import annotations

from typing import Any, Mapping

from .colors import bright, cyan, dim, green, magenta, red, white, yellow

__all__ = ("UI_WIDTH", "error", "kvtable", "rule", "section", "warn")


#: Width of the report rules
UI_WIDTH = 80


def error(text: str) -> str:
    return red(f"ERROR: {text}")


def warn(text: str) -> str:
    return magenta(f"WARNING: {text}")


def section(title: str) -> str:
    return bright(white(title))


def kvtable(items: Mapping[str, Any]) -> str:
    """Format a mapping as ``key : value`` lines with aligned delimiters.

    Parameters
    ----------
    items : Mapping[str, Any]
        The fields to show, in display order

    Returns
    -------
        str

    """
    width = max((len(name) for name in items), default=0)
    return "\n".join(
        f"{dim(green(name.ljust(width)))} : {yellow(str(val))}"
        for name, val in items.items()
    )


def rule(title: str | None = None) -> str:
    """Format a full width horizontal rule, with an optional title near the
    left end.

    """
    if title is None:
        return cyan("-" * UI_WIDTH)
    return cyan(f"--- {title} ".ljust(UI_WIDTH, "-"))
