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
"""Information about the host operating system, the running Python
interpreter and the configured deployment environment.

The identities are determined once, on import:

.. code-block:: python

    from host_os import env, host, interpreter

    if host.is_windows:
        ...
    if env.is_staging:
        ...

"""
from __future__ import annotations

from .env import Env
from .host import Host
from .interpreter import Interpreter
from .support import UnsupportedCapability
from .util.types import OSType

__all__ = (
    "Env",
    "Host",
    "Interpreter",
    "OSType",
    "UnsupportedCapability",
    "env",
    "host",
    "interpreter",
)

__version__ = "1.0.0"

#: The running Python interpreter
interpreter = Interpreter.current()

#: The configured deployment environment
env = Env.current()

#: The host operating system
host = Host.current(interpreter, env)
