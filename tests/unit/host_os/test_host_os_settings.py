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

import pytest

import host_os.settings as m
from host_os.util.settings import PrioritizedSetting

_expected_settings = (
    "thread_count",
    "environment_vars",
    "color",
)


class TestSettings:
    def test_standard_settings(self) -> None:
        settings = [
            k
            for k, v in m.settings.__class__.__dict__.items()
            if isinstance(v, PrioritizedSetting)
        ]
        assert set(settings) == set(_expected_settings)

    @pytest.mark.parametrize(
        "name,env_var",
        [
            ("thread_count", "TC"),
            ("environment_vars", "HOST_OS_ENV_VARS"),
            ("color", "HOST_OS_COLOR"),
        ],
    )
    def test_env_vars(self, name: str, env_var: str) -> None:
        assert getattr(m.settings, name)._env_var == env_var


class TestDefaults:
    def test_thread_count(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TC", raising=False)
        assert m.settings.thread_count() == 0

    def test_environment_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("HOST_OS_ENV_VARS", raising=False)
        assert m.settings.environment_vars() == (
            "RAILS_ENV",
            "RACK_ENV",
            "ENVIRONMENT",
            "ENV",
        )

    def test_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("HOST_OS_COLOR", raising=False)
        assert m.settings.color() is False


class TestEnvironment:
    def test_thread_count(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TC", "3")
        assert m.settings.thread_count() == 3

    def test_environment_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOST_OS_ENV_VARS", "APP_ENV, STAGE")
        assert m.settings.environment_vars() == ("APP_ENV", "STAGE")

    def test_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOST_OS_COLOR", "1")
        assert m.settings.color() is True

    def test_color_bad(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOST_OS_COLOR", "yes")
        with pytest.raises(ValueError, match="^HOST_OS_COLOR: "):
            m.settings.color()
