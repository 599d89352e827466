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
"""Settings that can be configured with environment variables.

A ``PrioritizedSetting`` looks for its value in these places, in order:

1. a value passed in the call, ``settings.thread_count(3)``
2. a value assigned in code, ``settings.color = True``. Command line flags
   are applied this way so that they override the environment.
3. the associated environment variable, ``TC=3 python -m host_os``
4. a default passed in the call, ``settings.thread_count(default=8)``
5. the default given where the setting is declared

If none of them provides a value, a RuntimeError is raised.

"""
from __future__ import annotations

import os
from typing import Any, Callable, Generic, Type, TypeVar, Union

from typing_extensions import TypeAlias

__all__ = (
    "convert_bool",
    "convert_int",
    "convert_str_seq",
    "PrioritizedSetting",
    "Settings",
)


class _Unset:
    pass


T = TypeVar("T")


Unset: TypeAlias = Union[T, Type[_Unset]]


def convert_int(value: int | str) -> int:
    """Return an integer value, ignoring surrounding whitespace."""
    if isinstance(value, int):
        return value
    return int(value.strip())


def convert_bool(value: bool | str) -> bool:
    """Convert "1" to True and "0" to False, booleans pass through.

    Raises:
        ValueError

    """
    if isinstance(value, bool):
        return value

    val = value.strip().lower()
    if val == "1":
        return True
    if val == "0":
        return False

    raise ValueError(f'Cannot convert {value!r} to bool, use "0" or "1"')


def convert_str_seq(
    value: list[str] | tuple[str, ...] | str
) -> tuple[str, ...]:
    """Split a comma-separated string into stripped, non-empty names.

    Lists and tuples are returned as tuples.

    Raises:
        ValueError

    """
    if isinstance(value, (list, tuple)):
        return tuple(value)

    if not isinstance(value, str):
        raise ValueError(f"Cannot convert {value!r} to list value")

    return tuple(item.strip() for item in value.split(",") if item.strip())


class PrioritizedSetting(Generic[T]):
    """A setting resolved by the precedence described in this module.

    Parameters
    ----------
    name : str
        The attribute name of the setting, used in error messages

    env_var : str or None
        An environment variable that can provide a value

    convert : Callable
        Converts raw values (strings from the environment or from code)
        into the setting type

    default : optional
        The value used when nothing else is configured

    """

    _user_value: Unset[str | T]

    def __init__(
        self,
        name: str,
        env_var: str | None = None,
        *,
        convert: Callable[[Any], T],
        default: Unset[T] = _Unset,
    ) -> None:
        self._name = name
        self._env_var = env_var
        self._convert = convert
        self._default = default
        self._user_value = _Unset

    def __call__(
        self, value: T | str | None = None, default: Unset[T] = _Unset
    ) -> T:
        """Return the setting value according to the standard precedence.

        Raises:
            RuntimeError, ValueError
        """
        if value is not None:
            return self._convert(value)

        if self._user_value is not _Unset:
            return self._convert(self._user_value)

        if self._env_var and self._env_var in os.environ:
            try:
                return self._convert(os.environ[self._env_var])
            except ValueError as e:
                raise ValueError(f"{self._env_var}: {e}") from e

        if default is not _Unset:
            return self._convert(default)

        if self._default is not _Unset:
            return self._convert(self._default)

        raise RuntimeError(
            f"No configured value found for setting {self._name!r}"
        )

    def __get__(
        self, instance: Any, owner: type[Any]
    ) -> PrioritizedSetting[T]:
        return self

    def __set__(self, instance: Any, value: str | T) -> None:
        # there is one settings object, the value lives on the descriptor
        self._user_value = value

    def unset_value(self) -> None:
        """Forget a value assigned in code."""
        self._user_value = _Unset


class Settings:
    """Base class for a collection of ``PrioritizedSetting`` declarations."""
