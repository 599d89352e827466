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
"""Identify the configured deployment environment.

The environment is read from the first non-empty variable among
``RAILS_ENV``, ``RACK_ENV``, ``ENVIRONMENT`` and ``ENV`` (configurable with
``HOST_OS_ENV_VARS``). When none is set, "production" is assumed.

"""
from __future__ import annotations

import os
import re
from typing import Mapping, Sequence

from .identity import Identity
from .settings import settings
from .util.types import Identifier

__all__ = ("DEFAULT_ENVIRONMENT", "Env", "identify_env", "normalize")

DEFAULT_ENVIRONMENT = "production"

_NON_WORD = re.compile(r"\W", re.ASCII)


def normalize(value: str) -> Identifier:
    """Lowercase ``value`` and replace non-word characters with "_"."""
    return _NON_WORD.sub("_", value.lower())


def identify_env(
    environ: Mapping[str, str] | None = None,
    names: Sequence[str] | None = None,
) -> Identifier:
    """Determine the deployment environment identifier.

    Parameters
    ----------
    environ : Mapping[str, str], optional
        Environment variables to inspect (default: os.environ)

    names : Sequence[str], optional
        Variable names to check in order (default: the ``environment_vars``
        setting)

    Returns
    -------
        str

    """
    environ = os.environ if environ is None else environ
    names = settings.environment_vars() if names is None else names

    for name in names:
        if found := environ.get(name):
            return normalize(found)

    return DEFAULT_ENVIRONMENT


class Env(Identity):
    """The configured deployment environment."""

    @classmethod
    def current(cls) -> Env:
        return cls(identify_env())

    @property
    def is_production(self) -> bool:
        """Whether the environment is "production", also when unset."""
        return self._id == "production"

    @property
    def is_test(self) -> bool:
        return self._id == "test"

    @property
    def is_development(self) -> bool:
        return self._id == "development"
