"""The desktop platform the widgets run on."""

from __future__ import annotations

import sys
from enum import Enum

__all__ = ["Platform"]


class Platform(Enum):
    WINDOWS = "windows"
    MAC = "mac"
    LINUX = "linux"

    @staticmethod
    def current() -> Platform:
        """Return the platform of the running interpreter."""
        name = sys.platform
        if name in ("win32", "cygwin"):
            return Platform.WINDOWS
        if name == "darwin":
            return Platform.MAC
        if name.startswith("linux"):
            return Platform.LINUX
        raise RuntimeError(f"unsupported platform: {name}")