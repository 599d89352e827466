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
"""Platform dependent support attributes for the host identity.

Each ``*Support`` class below implements a subset of the optional host
capabilities (``dev_null``, ``open_command``, ``rss_bytes`` and
``app_config_path``) for one OS family or interpreter. Exactly the
applicable classes are mixed into the host object when it is created, see
``support_mixins``. Capabilities that do not apply are absent.

``Support`` is always mixed in and provides the facts every platform has:
a suggested thread count and a temporary directory.

"""
from __future__ import annotations

import csv
import multiprocessing
import os
import re
import stat
import sys
import tempfile
from functools import cached_property, lru_cache
from subprocess import DEVNULL, PIPE, run
from typing import Any, Callable, Mapping, Sequence

from .settings import settings
from .util.types import Identifier, OSType
from .util.ui import warn

__all__ = (
    "CAPABILITIES",
    "DEFAULT_THREAD_COUNT",
    "UnsupportedCapability",
    "find_suggested_thread_count",
    "find_temp_dir",
    "has_java_interop",
    "parse_ps_rss",
    "parse_tasklist_rss",
    "support_mixins",
)

#: Names of all optional host capabilities
CAPABILITIES = ("dev_null", "open_command", "rss_bytes", "app_config_path")

#: Thread count to suggest when the processor count is not available
DEFAULT_THREAD_COUNT = 4

#: Environment variables checked for a temporary directory, in order
TEMP_DIR_VARS = ("TMPDIR", "TMP", "TEMP")


class UnsupportedCapability(AttributeError):
    """Raised when accessing a capability the host does not provide.

    Parameters
    ----------
    name : str
        The capability that was accessed

    host : object
        The host that does not provide it

    """

    def __init__(self, name: str, host: Any) -> None:
        super().__init__(f"{name} is not supported on {host}")
        self.name = name
        self.host = host


def _run(cmd: Sequence[str]) -> str | None:
    """Run a command and return its output, or None if it failed."""
    try:
        proc = run(
            cmd,
            stdout=PIPE,
            stderr=DEVNULL,
            text=True,
            errors="replace",
        )
    except OSError:
        return None
    if proc.returncode != 0:
        return None
    return proc.stdout


def parse_ps_rss(output: str | None) -> int:
    """Extract the resident set size from ``ps -o rss=`` output.

    ``ps`` reports kilobytes. Header lines and blank lines are skipped.

    Parameters
    ----------
    output : str or None
        The command output

    Returns
    -------
        int : the size in bytes, or 0 if no size was found

    """
    for line in (output or "").splitlines():
        fields = line.split()
        if fields and fields[0].isdigit():
            return int(fields[0]) * 1024
    return 0


def parse_tasklist_rss(output: str | None) -> int:
    """Extract the memory usage from ``tasklist /FO CSV`` output.

    The memory column is the fifth one and looks like ``"12,345 K"``, with
    a locale dependent thousands separator. A header row may be present.

    Parameters
    ----------
    output : str or None
        The command output

    Returns
    -------
        int : the size in bytes, or 0 if no size was found

    """
    for row in csv.reader((output or "").splitlines()):
        if len(row) < 5:
            continue
        digits = re.sub(r"\D", "", row[4])
        if digits:
            return int(digits) * 1024
    return 0


class WindowsSupport:
    @property
    def dev_null(self) -> str:
        return "NUL"

    @property
    def open_command(self) -> str:
        return "start"

    def rss_bytes(self) -> int:
        """Memory used by the current process, in bytes."""
        cmd = ("tasklist", "/FI", f"PID eq {os.getpid()}", "/FO", "CSV", "/NH")
        return parse_tasklist_rss(_run(cmd))

    def _app_config_base(self) -> str:
        if base := os.environ.get("LOCALAPPDATA"):
            return base
        profile = os.environ.get("USERPROFILE", "")
        return f"{profile}/Local Settings/Application Data"


class OS2Support:
    @property
    def dev_null(self) -> str:
        return "nul"


class PosixNullDeviceSupport:
    @property
    def dev_null(self) -> str:
        return "/dev/null"


class PosixSupport(PosixNullDeviceSupport):
    def rss_bytes(self) -> int:
        """Resident memory of the current process, in bytes."""
        return parse_ps_rss(_run(("ps", "-o", "rss=", "-p", str(os.getpid()))))

    def _app_config_base(self) -> str:
        return os.environ.get("XDG_CONFIG_HOME") or "~/.config"


class MacOSSupport:
    @property
    def open_command(self) -> str:
        return "open"

    def _app_config_base(self) -> str:
        return "~/Library/Application Support"


class LinuxSupport:
    @property
    def open_command(self) -> str:
        return "xdg-open"


class JVMSupport:
    def rss_bytes(self) -> int:
        """Heap and non-heap memory used by the JVM, in bytes."""
        import java  # type: ignore[import-not-found]

        factory = java.type("java.lang.management.ManagementFactory")
        bean = factory.getMemoryMXBean()
        return (
            bean.getHeapMemoryUsage().getUsed()
            + bean.getNonHeapMemoryUsage().getUsed()
        )


@lru_cache(maxsize=None)
def has_java_interop() -> bool:
    """Whether Java classes can be looked up from Python.

    This is the case on GraalPy running on a JVM. The ``java`` module does
    not exist on other interpreters, and GraalPy's native build refuses
    host lookups.

    """
    try:
        import java  # type: ignore[import-not-found]

        java.type("java.lang.management.ManagementFactory")
    except (ImportError, NotImplementedError, KeyError):
        return False
    return True


class AppConfigPathSupport:
    _app_config_base: Callable[[], str]

    def app_config_path(self, app_name: str) -> str:
        """The directory where application specific data should be stored.

        Parameters
        ----------
        app_name : str
            The name of the application

        Returns
        -------
            str : an absolute path

        """
        base = os.path.expanduser(self._app_config_base())
        return os.path.abspath(os.path.join(base, app_name))


def support_mixins(
    os_id: Identifier,
    os_type: OSType,
    posix: bool = False,
    jvm: bool = False,
) -> tuple[type, ...]:
    """Select the support classes that apply to a host.

    The result is ordered by priority, earlier classes win where more than
    one provides the same capability. JVM memory sampling comes first, so
    it replaces the process tools on every OS.

    Parameters
    ----------
    os_id : str
        The OS identifier, e.g. "linux"

    os_type : OSType
        The OS family

    posix : bool, optional
        Whether the runtime offers POSIX process primitives (default: False)

    jvm : bool, optional
        Whether the interpreter runs on a JVM with Java interop, see
        ``has_java_interop`` (default: False)

    Returns
    -------
        tuple[type, ...]

    """
    windows = os_type is OSType.WINDOWS
    unix = os_type is OSType.UNIX

    candidates: tuple[tuple[bool, type], ...] = (
        (jvm, JVMSupport),
        (windows, WindowsSupport),
        (os_type is OSType.OS2, OS2Support),
        (os_id == "macosx", MacOSSupport),
        (os_id == "linux", LinuxSupport),
        (unix, PosixSupport),
        (posix and not unix, PosixNullDeviceSupport),
        (windows or unix, AppConfigPathSupport),
    )
    return tuple(mixin for applies, mixin in candidates if applies)


def _warn(text: str) -> None:
    print(warn(text), file=sys.stderr, flush=True)


def as_dir(name: str, dirname: str | None) -> str | None:
    """Validate a temporary directory candidate.

    Problems with an existing path are reported as warnings but do not
    reject it.

    Parameters
    ----------
    name : str
        Where the candidate came from, for display purposes

    dirname : str or None
        The candidate path

    Returns
    -------
        str or None : the absolute path, or None if it does not exist or
        cannot be resolved

    """
    if not dirname:
        return None

    try:
        # abspath fails for relative paths when the cwd was removed
        dirname = os.path.abspath(os.path.expanduser(dirname))
        st = os.stat(dirname)
    except OSError:
        return None

    if not stat.S_ISDIR(st.st_mode):
        _warn(f"{name} is not a valid directory - {dirname}")
    if not os.access(dirname, os.W_OK):
        _warn(f"{name} is not writable - {dirname}")
    if (
        os.name == "posix"
        and st.st_mode & stat.S_IWOTH
        and not st.st_mode & stat.S_ISVTX
    ):
        _warn(f"{name} is world-writable - {dirname}")

    return dirname


def _system_temp_dir(environ: Mapping[str, str]) -> str | None:
    if os.name == "nt":
        base = environ.get("LOCALAPPDATA")
        return os.path.join(base, "Temp") if base else None
    return "/var/tmp"


def find_temp_dir(
    environ: Mapping[str, str] | None = None,
    gettempdir: Callable[[], str] | None = tempfile.gettempdir,
) -> str:
    """Determine a usable temporary directory.

    The runtime's own temporary directory is preferred. Otherwise the
    ``TMPDIR``, ``TMP`` and ``TEMP`` variables, a system default, ``/tmp``
    and finally the current directory are tried, in that order. None
    of the failures along the way raise.

    Parameters
    ----------
    environ : Mapping[str, str], optional
        Environment variables to inspect (default: os.environ)

    gettempdir : Callable or None, optional
        The runtime temporary directory lookup, or None to skip it
        (default: tempfile.gettempdir)

    Returns
    -------
        str

    """
    environ = os.environ if environ is None else environ

    if gettempdir is not None:
        try:
            runtime_dir: str | None = gettempdir()
        except OSError:
            runtime_dir = None
        if found := as_dir("runtime temp dir", runtime_dir):
            return found

    candidates = [(name, environ.get(name)) for name in TEMP_DIR_VARS]
    candidates += [
        ("system temp dir", _system_temp_dir(environ)),
        ("/tmp", "/tmp"),
    ]
    for name, dirname in candidates:
        if found := as_dir(name, dirname):
            return found

    return as_dir(".", ".") or "."


def find_suggested_thread_count() -> int:
    """Determine a suggested number of threads.

    A positive ``TC`` setting wins, then the processor count.

    Returns
    -------
        int

    """
    try:
        count = settings.thread_count()
    except ValueError:
        count = 0
    if count > 0:
        return count

    try:
        return multiprocessing.cpu_count()
    except NotImplementedError:
        return DEFAULT_THREAD_COUNT


class Support:
    """Facts available on every host."""

    @cached_property
    def suggested_thread_count(self) -> int:
        """A suggested number of threads to use."""
        return find_suggested_thread_count()

    @cached_property
    def temp_dir(self) -> str:
        """The name of the temporary directory."""
        return find_temp_dir()
