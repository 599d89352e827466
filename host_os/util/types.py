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
"""Provide types that are shared by the identification code.

"""
from __future__ import annotations

from dataclasses import Field, dataclass
from enum import Enum
from typing import Any, Dict, NamedTuple, Protocol, Tuple

from typing_extensions import TypeAlias

from .ui import kvtable

__all__ = (
    "Classification",
    "DataclassMixin",
    "DataclassProtocol",
    "EnvDict",
    "Identifier",
    "OSType",
    "PlatformRule",
    "RuleTable",
)


#: Represent an open-ended identifier such as "linux" or "production"
Identifier: TypeAlias = str


#: Represent str->str environment variable mappings
EnvDict: TypeAlias = Dict[str, str]


class OSType(str, Enum):
    """The broad family an operating system belongs to."""

    UNIX = "unix"
    WINDOWS = "windows"
    VMS = "vms"
    OS2 = "os2"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PlatformRule:
    """Map a platform substring to an OS type and optional identifier."""

    #: Lowercase substring to look for in a raw platform string
    pattern: str

    #: OS family reported when the pattern matches
    type: OSType

    #: Identifier reported when the pattern matches, if not the pattern itself
    normalized_id: Identifier | None = None

    @property
    def id(self) -> Identifier:
        return self.normalized_id or self.pattern


#: An ordered sequence of rules, the first match wins
RuleTable: TypeAlias = Tuple[PlatformRule, ...]


class Classification(NamedTuple):
    """The outcome of classifying a raw platform string."""

    id: Identifier
    type: OSType


# This seems like it ought to be in stdlib
class DataclassProtocol(Protocol):
    """Afford better type checking for our dataclasses."""

    __dataclass_fields__: dict[str, Field[Any]]


class DataclassMixin(DataclassProtocol):
    """A mixin for automatically pretty-printing a dataclass."""

    def __str__(self) -> str:
        return kvtable(self.__dict__)
