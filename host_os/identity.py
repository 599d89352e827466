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
"""A common query protocol for identified things (OS, interpreter, env).

Every identity has an ``id`` and answers ``is_(what)``. Boolean attributes
of the form ``is_<name>`` that are not defined explicitly are resolved
dynamically, so ``env.is_staging`` works without anyone declaring a
"staging" environment up front:

.. code-block:: python

    >>> env.is_("staging") == env.is_staging
    True

"""
from __future__ import annotations

from enum import Enum
from typing import Any

from .util.types import Identifier

__all__ = ("Identity", "as_identifier")

_PREFIX = "is_"


def as_identifier(what: Any) -> Identifier:
    """Convert an identifier candidate to its textual form.

    Enum members contribute their value, everything else its ``str()``.

    """
    if isinstance(what, Enum):
        return str(what.value)
    return str(what)


class Identity:
    """Base class for identified objects.

    Parameters
    ----------
    id : str
        The identifier, fixed for the lifetime of the object

    """

    def __init__(self, id: Identifier) -> None:
        self._id = id

    @property
    def id(self) -> Identifier:
        return self._id

    def is_(self, what: Any) -> bool:
        """Whether this object is identified as ``what``.

        Parameters
        ----------
        what : str or Enum
            The identifier to check

        Returns
        -------
            bool

        """
        return self._id == as_identifier(what)

    def __getattr__(self, name: str) -> bool:
        # only reached for attributes that are not found normally
        if name.startswith(_PREFIX) and len(name) > len(_PREFIX):
            return self.is_(name[len(_PREFIX) :])
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute {name!r}"
        )

    def __str__(self) -> str:
        return self._id

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._id!r})"
