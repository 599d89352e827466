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
"""Collect and format an overview of everything detected about the host.

"""
from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from textwrap import indent
from typing import Any, Callable

from .host import Host
from .support import UnsupportedCapability
from .util.types import DataclassMixin
from .util.ui import rule, section

__all__ = (
    "EnvInfo",
    "InterpreterInfo",
    "OSInfo",
    "UNSUPPORTED",
    "format_info",
)

#: Displayed in place of capabilities the host does not provide
UNSUPPORTED = "*unsupported*"


def _capability(get: Callable[[], Any]) -> Any:
    try:
        return get()
    except UnsupportedCapability:
        return UNSUPPORTED


@dataclass(frozen=True)
class OSInfo(DataclassMixin):
    """Collect the facts about the host operating system."""

    id: str
    type: str
    posix: bool
    suggested_thread_count: int
    temp_dir: str
    dev_null: str
    open_command: str
    rss_bytes: Any
    app_config_path: str

    @classmethod
    def from_host(cls, host: Host) -> OSInfo:
        return cls(
            id=host.id,
            type=host.type.value,
            posix=host.is_posix,
            suggested_thread_count=host.suggested_thread_count,
            temp_dir=host.temp_dir,
            dev_null=_capability(lambda: host.dev_null),
            open_command=_capability(lambda: host.open_command),
            rss_bytes=_capability(lambda: host.rss_bytes()),
            app_config_path=_capability(lambda: host.app_config_path("")),
        )


@dataclass(frozen=True)
class EnvInfo(DataclassMixin):
    id: str


@dataclass(frozen=True)
class InterpreterInfo(DataclassMixin):
    id: str
    jit: str


def format_info(host: Host) -> str:
    """Format an overview of the host, environment and interpreter.

    Parameters
    ----------
    host : Host
        The host to describe

    Returns
    -------
        str

    """
    out = StringIO()

    out.write(f"\n{rule(f'{host} Host Information')}\n")

    out.write(section("\nOS:\n"))
    out.write(indent(str(OSInfo.from_host(host)), prefix="  "))

    out.write(section("\n\nEnvironment:\n"))
    out.write(indent(str(EnvInfo(host.env.id)), prefix="  "))

    out.write(section("\n\nInterpreter:\n"))
    interpreter = InterpreterInfo(
        host.interpreter.id, host.interpreter.jit_type
    )
    out.write(indent(str(interpreter), prefix="  "))

    out.write(f"\n\n{rule()}\n")

    return out.getvalue()
