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

import os

import pytest
from pytest_mock import MockerFixture

import host_os.host as m
from host_os.env import Env
from host_os.interpreter import Interpreter
from host_os.support import (
    CAPABILITIES,
    JVMSupport,
    UnsupportedCapability,
)
from host_os.util.types import OSType

U, W = OSType.UNIX, OSType.WINDOWS

CPYTHON = Interpreter("cpython")
GRAALPY = Interpreter("graalpy")
TEST_ENV = Env("test")


def make_host(
    id: str,
    type: OSType,
    posix: bool = False,
    jvm: bool = False,
) -> m.Host:
    return m.Host(
        id, type, interpreter=CPYTHON, env=TEST_ENV, posix=posix, jvm=jvm
    )


# every (platform, JVM) combination and exactly what it provides
testdata_capabilities = [
    ("linux", U, True, False, CAPABILITIES),
    ("macosx", U, True, False, CAPABILITIES),
    ("windows", W, False, False, CAPABILITIES),
    ("cygwin", W, True, False, CAPABILITIES),
    ("mingw", W, False, False, CAPABILITIES),
    (
        "freebsd",
        U,
        True,
        False,
        ("dev_null", "rss_bytes", "app_config_path"),
    ),
    ("sunos", U, True, False, ("dev_null", "rss_bytes", "app_config_path")),
    ("os2", OSType.OS2, False, False, ("dev_null",)),
    ("os2", OSType.OS2, False, True, ("dev_null", "rss_bytes")),
    ("vms", OSType.VMS, False, False, ()),
    ("vms", OSType.VMS, False, True, ("rss_bytes",)),
    ("unknown", OSType.UNKNOWN, False, False, ()),
    ("unknown", OSType.UNKNOWN, True, False, ("dev_null",)),
    ("unknown", OSType.UNKNOWN, False, True, ("rss_bytes",)),
]

testdata_constants = [
    ("linux", U, "/dev/null", "xdg-open", "XDG_CONFIG_HOME"),
    ("macosx", U, "/dev/null", "open", None),
    ("windows", W, "NUL", "start", "LOCALAPPDATA"),
    ("cygwin", W, "NUL", "start", "LOCALAPPDATA"),
]


class TestHost:
    @pytest.mark.parametrize(
        "id,type,posix,jvm,expected", testdata_capabilities
    )
    def test_capabilities(
        self,
        id: str,
        type: OSType,
        posix: bool,
        jvm: bool,
        expected: tuple[str, ...],
    ) -> None:
        host = make_host(id, type, posix, jvm)

        assert host.capabilities == expected
        for name in CAPABILITIES:
            assert host.supports(name) is (name in expected)
            assert hasattr(host, name) is (name in expected)

    @pytest.mark.parametrize(
        "id,type,posix,jvm,expected", testdata_capabilities
    )
    def test_unsupported_raises(
        self,
        id: str,
        type: OSType,
        posix: bool,
        jvm: bool,
        expected: tuple[str, ...],
    ) -> None:
        host = make_host(id, type, posix, jvm)

        for name in set(CAPABILITIES) - set(expected):
            with pytest.raises(UnsupportedCapability) as e:
                getattr(host, name)
            assert e.value.name == name
            assert e.value.host is host

    @pytest.mark.parametrize("id,type,dev_null,open,var", testdata_constants)
    def test_constants(
        self,
        id: str,
        type: OSType,
        dev_null: str,
        open: str,
        var: str | None,
    ) -> None:
        host = make_host(id, type, posix=True)

        assert host.dev_null == dev_null
        assert host.open_command == open

    def test_os2_dev_null(self) -> None:
        assert make_host("os2", OSType.OS2).dev_null == "nul"

    def test_unknown_posix_dev_null(self) -> None:
        host = make_host("unknown", OSType.UNKNOWN, posix=True)
        assert host.dev_null == "/dev/null"

    def test_rss_bytes_windows(self, mocker: MockerFixture) -> None:
        tasklist = mocker.patch(
            "host_os.support.WindowsSupport.rss_bytes", return_value=1
        )
        ps = mocker.patch(
            "host_os.support.PosixSupport.rss_bytes", return_value=2
        )

        assert make_host("cygwin", W, posix=True).rss_bytes() == 1
        assert tasklist.called
        assert not ps.called

    @pytest.mark.parametrize(
        "id,type,posix,native",
        (("linux", U, True, 2), ("windows", W, False, 1)),
    )
    def test_rss_bytes_jvm_first(
        self,
        mocker: MockerFixture,
        id: str,
        type: OSType,
        posix: bool,
        native: int,
    ) -> None:
        mocker.patch("host_os.support.JVMSupport.rss_bytes", return_value=3)
        mocker.patch("host_os.support.PosixSupport.rss_bytes", return_value=2)
        mocker.patch(
            "host_os.support.WindowsSupport.rss_bytes", return_value=1
        )

        assert make_host(id, type, posix, jvm=True).rss_bytes() == 3
        assert make_host(id, type, posix).rss_bytes() == native

    def test_jvm_default_graalpy(self, mocker: MockerFixture) -> None:
        interop = mocker.patch.object(
            m, "has_java_interop", return_value=True
        )
        host = m.Host("linux", U, interpreter=GRAALPY, env=TEST_ENV)

        assert isinstance(host, JVMSupport)
        interop.assert_called_once_with()

    def test_jvm_default_graalpy_native(self, mocker: MockerFixture) -> None:
        mocker.patch.object(m, "has_java_interop", return_value=False)
        host = m.Host("linux", U, interpreter=GRAALPY, env=TEST_ENV)

        assert not isinstance(host, JVMSupport)

    def test_jvm_default_other(self, mocker: MockerFixture) -> None:
        interop = mocker.patch.object(
            m, "has_java_interop", return_value=True
        )
        host = m.Host("linux", U, interpreter=CPYTHON, env=TEST_ENV)

        assert not isinstance(host, JVMSupport)
        assert not interop.called

    def test_app_config_path_linux(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("XDG_CONFIG_HOME", "/cfg")
        path = make_host("linux", U).app_config_path("myapp")
        assert path == os.path.abspath("/cfg/myapp")

    def test_app_config_path_macosx(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("HOME", "/Users/me")
        monkeypatch.setenv("USERPROFILE", "/Users/me")
        monkeypatch.setenv("XDG_CONFIG_HOME", "/cfg")
        path = make_host("macosx", U).app_config_path("myapp")
        assert path == os.path.abspath(
            "/Users/me/Library/Application Support/myapp"
        )

    def test_app_config_path_windows(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LOCALAPPDATA", "/local")
        monkeypatch.setenv("XDG_CONFIG_HOME", "/cfg")
        path = make_host("cygwin", W, posix=True).app_config_path("myapp")
        assert path == os.path.abspath("/local/myapp")

    def test_composed_class(self) -> None:
        host = make_host("linux", U)
        assert isinstance(host, m.Host)
        assert type(host) is not m.Host
        assert type(make_host("linux", U)) is type(host)

    def test_bare_class(self) -> None:
        host = make_host("vms", OSType.VMS)
        assert type(host) is m.Host

    def test_type_from_string(self) -> None:
        host = m.Host(
            "linux",
            "unix",  # type: ignore[arg-type]
            interpreter=CPYTHON,
            env=TEST_ENV,
        )
        assert host.type is U
        assert host.supports("open_command")

    def test_attributes(self) -> None:
        host = make_host("linux", U, posix=True)
        assert host.id == "linux"
        assert host.type is U
        assert host.interpreter is CPYTHON
        assert host.env is TEST_ENV
        assert host.is_posix

    def test_immutable(self) -> None:
        host = make_host("linux", U)
        with pytest.raises(AttributeError):
            host.id = "freebsd"  # type: ignore[misc]
        with pytest.raises(AttributeError):
            host.type = W  # type: ignore[misc]

    @pytest.mark.parametrize(
        "id,type,expected",
        [
            ("linux", U, {"is_unix", "is_linux"}),
            ("macosx", U, {"is_unix", "is_macosx"}),
            ("freebsd", U, {"is_unix"}),
            ("windows", W, {"is_windows"}),
            ("cygwin", W, {"is_windows", "is_cygwin"}),
            ("vms", OSType.VMS, {"is_vms"}),
            ("os2", OSType.OS2, {"is_os2"}),
            ("unknown", OSType.UNKNOWN, set()),
        ],
    )
    def test_predicates(
        self, id: str, type: OSType, expected: set[str]
    ) -> None:
        host = make_host(id, type)
        known = (
            "is_unix",
            "is_windows",
            "is_vms",
            "is_os2",
            "is_macosx",
            "is_linux",
            "is_cygwin",
        )
        for attr in known:
            assert getattr(host, attr) is (attr in expected)

    def test_is(self) -> None:
        host = make_host("windows", W)
        assert host.is_(host.id)
        assert host.is_("windows")
        assert host.is_(OSType.WINDOWS)
        assert not host.is_("linux")

    def test_is_compares_id_only(self) -> None:
        host = make_host("freebsd", U)
        assert host.is_("freebsd")
        assert not host.is_("unix")
        assert host.is_unix

    def test_dynamic_predicate(self) -> None:
        host = make_host("freebsd", U)
        assert host.is_freebsd
        assert not host.is_netbsd
        with pytest.raises(TypeError):
            host.is_freebsd()  # type: ignore[operator]

    def test_missing_attribute(self) -> None:
        host = make_host("linux", U)
        with pytest.raises(AttributeError) as e:
            host.foo  # type: ignore[attr-defined]
        assert not isinstance(e.value, UnsupportedCapability)

    @pytest.mark.parametrize(
        "id,expected",
        [
            ("macosx", "MacOSX"),
            ("freebsd", "FreeBSD"),
            ("dragonfly", "Dragonfly"),
            ("windows", "Windows"),
            ("aix", "AIX"),
            ("unknown", "UNKNOWN"),
        ],
    )
    def test_str(self, id: str, expected: str) -> None:
        assert str(make_host(id, U)) == expected

    def test_repr(self) -> None:
        assert repr(make_host("linux", U)) == "Host('linux', 'unix')"

    def test_unsupported_message(self) -> None:
        host = make_host("freebsd", U)
        with pytest.raises(
            UnsupportedCapability, match="open_command is not supported on"
        ):
            host.open_command

    def test_derived_facts(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TC", "3")
        host = make_host("vms", OSType.VMS)
        assert host.suggested_thread_count == 3
        assert os.path.isdir(host.temp_dir)

    def test_defaults(self, mocker: MockerFixture) -> None:
        mocker.patch.object(m, "_has_fork", return_value=True)
        host = m.Host("unknown", OSType.UNKNOWN)
        assert host.is_posix
        assert host.capabilities == ("dev_null",)
        assert isinstance(host.interpreter, Interpreter)
        assert isinstance(host.env, Env)


class TestCurrent:
    @pytest.mark.parametrize(
        "system,platform,id,type",
        [
            ("Linux", "linux", "linux", U),
            ("Darwin", "darwin", "macosx", U),
            ("Windows", "win32", "windows", W),
            ("FreeBSD", "freebsd14", "freebsd", U),
        ],
    )
    def test_classified(
        self,
        mocker: MockerFixture,
        system: str,
        platform: str,
        id: str,
        type: OSType,
    ) -> None:
        raw = f"{system} {platform}".lower()
        mocker.patch.object(m, "host_platform", return_value=raw)

        host = m.Host.current(CPYTHON, TEST_ENV)

        assert (host.id, host.type) == (id, type)
        assert host.interpreter is CPYTHON
        assert host.env is TEST_ENV

    def test_live(self) -> None:
        host = m.Host.current()
        assert host.is_(host.id)
        assert isinstance(host.type, OSType)
        assert host.suggested_thread_count > 0
        assert os.path.isdir(host.temp_dir)
