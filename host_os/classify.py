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
"""Classify raw platform strings into an (id, type) pair.

Classification is ordered substring matching: the raw string is lowercased
and the first rule whose pattern occurs in it decides the result. Strings
that match no rule classify as ``("unknown", OSType.UNKNOWN)``.

"""
from __future__ import annotations

import platform
import sys

from .util.types import Classification, OSType, PlatformRule, RuleTable

__all__ = (
    "OS_RULES",
    "UNKNOWN",
    "classify",
    "host_platform",
)

UNKNOWN = Classification("unknown", OSType.UNKNOWN)

_U, _W = OSType.UNIX, OSType.WINDOWS

#: Known operating systems, in matching order
OS_RULES: RuleTable = (
    PlatformRule("linux", _U),
    PlatformRule("arch", _U, "linux"),
    PlatformRule("android", _U, "linux"),
    PlatformRule("darwin", _U, "macosx"),
    PlatformRule("mac", _U, "macosx"),
    PlatformRule("freebsd", _U),
    PlatformRule("netbsd", _U),
    PlatformRule("openbsd", _U),
    PlatformRule("dragonfly", _U),
    PlatformRule("aix", _U),
    PlatformRule("irix", _U),
    PlatformRule("hpux", _U),
    PlatformRule("solaris", _U, "sunos"),
    PlatformRule("sunos", _U, "sunos"),
    PlatformRule("windows", _W),
    PlatformRule("cygwin", _W),
    PlatformRule("mswin", _W),
    PlatformRule("mingw", _W),
    PlatformRule("bccwin", _W),
    PlatformRule("djgpp", _W),
    PlatformRule("wince", _W),
    PlatformRule("emc", _W),
    PlatformRule("vms", OSType.VMS),
    PlatformRule("os2", OSType.OS2),
)


def classify(raw: str, rules: RuleTable = OS_RULES) -> Classification:
    """Classify a raw platform string.

    Parameters
    ----------
    raw : str
        A platform description, e.g. ``"Darwin darwin"``

    rules : RuleTable, optional
        The rules to apply, in order (default: OS_RULES)

    Returns
    -------
        Classification

    """
    text = raw.lower()
    for rule in rules:
        if rule.pattern in text:
            return Classification(rule.id, rule.type)
    return UNKNOWN


def host_platform() -> str:
    """The raw platform string describing the running host.

    Combines ``platform.system()`` and ``sys.platform``, since neither one
    alone matches the rule table on every system (``win32`` names no rule,
    and ``platform.system()`` reports OS/2 as ``OS/2``).

    Returns
    -------
        str

    """
    return f"{platform.system()} {sys.platform}".lower()
