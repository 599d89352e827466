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
from __future__ import annotations

from .util.settings import (
    PrioritizedSetting,
    Settings,
    convert_bool,
    convert_int,
    convert_str_seq,
)

__all__ = ("settings",)


class HostOSSettings(Settings):
    #: Overrides the suggested number of threads. Values that are not
    #: positive integers are ignored and the processor count is used.
    thread_count: PrioritizedSetting[int] = PrioritizedSetting(
        "thread_count",
        "TC",
        convert=convert_int,
        default=0,
    )

    #: Comma-separated names of the variables that configure the
    #: deployment environment, in priority order. The first one with a
    #: non-empty value wins.
    environment_vars: PrioritizedSetting[
        tuple[str, ...]
    ] = PrioritizedSetting(
        "environment_vars",
        "HOST_OS_ENV_VARS",
        convert=convert_str_seq,
        default=("RAILS_ENV", "RACK_ENV", "ENVIRONMENT", "ENV"),
    )

    #: Use ANSI colors in the host report
    color: PrioritizedSetting[bool] = PrioritizedSetting(
        "color",
        "HOST_OS_COLOR",
        convert=convert_bool,
        default=False,
    )


settings = HostOSSettings()
