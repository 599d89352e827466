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
"""The identity of the host operating system.

A ``Host`` is created with the classification of the platform and the
identity of the interpreter. On creation the platform specific support
classes from ``host_os.support`` are mixed in, so that e.g.

.. code-block:: python

    >>> host.open_command
    'xdg-open'

works on Linux, while on FreeBSD (which has no standard "open" command)
the same access raises ``UnsupportedCapability`` and
``hasattr(host, "open_command")`` is False.

"""
from __future__ import annotations

import os
from functools import lru_cache
from typing import Any

from .classify import classify, host_platform
from .env import Env
from .identity import Identity
from .interpreter import Interpreter
from .support import (
    CAPABILITIES,
    Support,
    UnsupportedCapability,
    has_java_interop,
    support_mixins,
)
from .util.types import Identifier, OSType

__all__ = ("Host",)

_DISPLAY_NAMES = {
    "bccwin": "BCCWin",
    "cygwin": "Cygwin",
    "dragonfly": "Dragonfly",
    "freebsd": "FreeBSD",
    "linux": "Linux",
    "macosx": "MacOSX",
    "mingw": "MinGW",
    "mswin": "MSWin",
    "netbsd": "NetBSD",
    "openbsd": "OpenBSD",
    "sunos": "SunOS",
    "wince": "WinCE",
    "windows": "Windows",
}


class Host(Support, Identity):
    """The host operating system.

    Instantiating ``Host`` returns an instance of a subclass that mixes in
    the support classes selected for the given OS and interpreter.

    Parameters
    ----------
    id : str
        The OS identifier, e.g. "linux" or "macosx"

    type : OSType
        The OS family

    interpreter : Interpreter, optional
        The interpreter identity (default: the running interpreter)

    env : Env, optional
        The environment identity (default: the configured environment)

    posix : bool, optional
        Whether POSIX process primitives such as ``fork`` are available
        (default: whether ``os.fork`` exists)

    jvm : bool, optional
        Whether the interpreter runs on a JVM with Java interop (default:
        whether the interpreter is GraalPy and Java classes can be looked up)

    """

    def __new__(
        cls,
        id: Identifier,
        type: OSType,
        *,
        interpreter: Interpreter | None = None,
        env: Env | None = None,
        posix: bool | None = None,
        jvm: bool | None = None,
    ) -> Host:
        if cls is Host:
            type = OSType(type)
            interpreter = interpreter or _current_interpreter()
            posix = _has_fork() if posix is None else posix
            if jvm is None:
                jvm = interpreter.is_graalpy and has_java_interop()
            cls = _compose(support_mixins(id, type, posix, jvm))
        return super().__new__(cls)

    def __init__(
        self,
        id: Identifier,
        type: OSType,
        *,
        interpreter: Interpreter | None = None,
        env: Env | None = None,
        posix: bool | None = None,
        jvm: bool | None = None,
    ) -> None:
        super().__init__(id)
        self._type = OSType(type)
        self._interpreter = interpreter or _current_interpreter()
        self._env = env or Env.current()
        self._posix = _has_fork() if posix is None else posix

    @classmethod
    def current(
        cls,
        interpreter: Interpreter | None = None,
        env: Env | None = None,
    ) -> Host:
        """Identify the host this code is running on."""
        id, type = classify(host_platform())
        return cls(id, type, interpreter=interpreter, env=env)

    @property
    def type(self) -> OSType:
        return self._type

    @property
    def interpreter(self) -> Interpreter:
        return self._interpreter

    @property
    def env(self) -> Env:
        return self._env

    @property
    def is_unix(self) -> bool:
        return self._type is OSType.UNIX

    @property
    def is_windows(self) -> bool:
        return self._type is OSType.WINDOWS

    @property
    def is_vms(self) -> bool:
        return self._type is OSType.VMS

    @property
    def is_os2(self) -> bool:
        return self._type is OSType.OS2

    @property
    def is_macosx(self) -> bool:
        return self._id == "macosx"

    @property
    def is_linux(self) -> bool:
        """Whether the host is identified as a Linux derivative."""
        return self._id == "linux"

    @property
    def is_cygwin(self) -> bool:
        return self._id == "cygwin"

    @property
    def is_posix(self) -> bool:
        """Whether POSIX compatible process calls like ``fork`` exist."""
        return self._posix

    @property
    def capabilities(self) -> tuple[str, ...]:
        """The names of the optional capabilities this host provides."""
        return tuple(name for name in CAPABILITIES if self.supports(name))

    def supports(self, name: str) -> bool:
        """Whether this host provides the optional capability ``name``.

        Parameters
        ----------
        name : str
            One of "dev_null", "open_command", "rss_bytes" or
            "app_config_path"

        Returns
        -------
            bool

        """
        return name in CAPABILITIES and hasattr(type(self), name)

    def __getattr__(self, name: str) -> Any:
        if name in CAPABILITIES:
            raise UnsupportedCapability(name, self)
        return super().__getattr__(name)

    def __str__(self) -> str:
        return _DISPLAY_NAMES.get(self._id, self._id.upper())

    def __repr__(self) -> str:
        return f"Host({self._id!r}, {self._type.value!r})"


@lru_cache(maxsize=None)
def _compose(mixins: tuple[type, ...]) -> type[Host]:
    if not mixins:
        return Host
    return type("Host", (*mixins, Host), {"__module__": __name__})


@lru_cache(maxsize=None)
def _current_interpreter() -> Interpreter:
    return Interpreter.current()


def _has_fork() -> bool:
    return hasattr(os, "fork")
