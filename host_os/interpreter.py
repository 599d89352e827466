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
"""Identify the running Python interpreter.

Besides the boolean attributes documented here any other interpreter name
can be queried:

.. code-block:: python

    interpreter.is_micropython
    interpreter.is_("brython")

"""
from __future__ import annotations

import sys

from .identity import Identity
from .util.types import Identifier

__all__ = ("Interpreter", "identify_interpreter", "identify_jit")

#: The engine name reported by the reference implementation
REFERENCE_ENGINE = "cpython"


def identify_interpreter(
    platform: str | None, engine: str | None, description: str | None
) -> Identifier:
    """Determine an interpreter identifier.

    Parameters
    ----------
    platform : str or None
        The runtime platform string, e.g. ``sys.platform``

    engine : str or None
        The implementation name, e.g. ``sys.implementation.name``, or None
        if the runtime does not report one

    description : str or None
        The free-form version description, e.g. ``sys.version``

    Returns
    -------
        str

    """
    if platform == "parrot":
        return "pynie"
    if not engine:
        return REFERENCE_ENGINE
    if engine != REFERENCE_ENGINE:
        return engine
    if description and "stackless" in description.lower():
        return "stackless"
    return REFERENCE_ENGINE


def identify_jit() -> Identifier:
    """Determine which JIT compiler, if any, the interpreter runs with.

    Returns
    -------
        str : "pypyjit", "experimental" or "none"

    """
    if "pypyjit" in sys.builtin_module_names:
        return "pypyjit"
    jit = getattr(sys, "_jit", None)
    if jit is not None and jit.is_enabled():
        return "experimental"
    return "none"


class Interpreter(Identity):
    """The running Python interpreter.

    Parameters
    ----------
    id : str
        The interpreter identifier, e.g. "cpython" or "pypy"

    jit_type : str, optional
        The active JIT compiler (default: "none")

    """

    def __init__(self, id: Identifier, jit_type: Identifier = "none") -> None:
        super().__init__(id)
        self._jit_type = jit_type

    @classmethod
    def current(cls) -> Interpreter:
        """Identify the interpreter executing this code."""
        impl = getattr(sys, "implementation", None)
        id = identify_interpreter(
            sys.platform, getattr(impl, "name", None), sys.version
        )
        return cls(id, identify_jit())

    @property
    def jit_type(self) -> Identifier:
        return self._jit_type

    @property
    def is_cpython(self) -> bool:
        """Whether this is the C-based reference interpreter."""
        return self._id == "cpython"

    is_default = is_cpython

    @property
    def is_pypy(self) -> bool:
        return self._id == "pypy"

    @property
    def is_ironpython(self) -> bool:
        return self._id == "ironpython"

    @property
    def is_graalpy(self) -> bool:
        """Whether this is GraalPy, natively compiled or on a JVM."""
        return self._id == "graalpy"

    @property
    def is_stackless(self) -> bool:
        return self._id == "stackless"

    @property
    def is_pynie(self) -> bool:
        """Whether this is Pynie, running on the Parrot VM."""
        return self._id == "pynie"

    is_parrot = is_pynie

    def __repr__(self) -> str:
        return f"Interpreter({self._id!r}, jit_type={self._jit_type!r})"
