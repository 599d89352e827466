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

import sys
from argparse import ArgumentParser

__all__ = ("main",)


def main(argv: list[str] | None = None) -> int:
    """Print an overview of the detected host, environment and interpreter.

    Parameters
    ----------
        argv : list[str], optional
            Command-line arguments (default: sys.argv[1:])

    Returns
    -------
        int, a process return code

    """
    from . import __version__, host
    from .info import format_info
    from .settings import settings
    from .util import colors
    from .util.ui import error

    parser = ArgumentParser(
        prog="host-os",
        description="Show what is known about the host OS, the deployment "
        "environment and the Python interpreter.",
    )
    parser.add_argument(
        "--color",
        action="store_true",
        default=None,
        help="Use ANSI colors (default: HOST_OS_COLOR)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    args = parser.parse_args(argv)

    if args.color:
        settings.color = True

    try:
        colors.ENABLED = settings.color()
    except ValueError as e:
        print(error(str(e)), file=sys.stderr)
        return 1

    print(format_info(host))
    return 0


if __name__ == "__main__":
    sys.exit(main())
