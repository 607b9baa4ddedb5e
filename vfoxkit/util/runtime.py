"""Operating system and CPU architecture names in a fixed vocabulary."""

from __future__ import annotations

import platform
import sys

_ARCH_ALIASES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "x64": "amd64",
    "i386": "386",
    "i486": "386",
    "i586": "386",
    "i686": "386",
    "x86": "386",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv8l": "arm64",
    "armv6l": "arm",
    "armv7l": "arm",
    "armv7": "arm",
    "arm": "arm",
    "ppc64le": "ppc64le",
    "ppc64": "ppc64",
    "s390x": "s390x",
    "riscv64": "riscv64",
    "loongarch64": "loong64",
    "mips64": "mips64",
}

_OS_PREFIXES = (
    ("win", "windows"),
    ("cygwin", "windows"),
    ("msys", "windows"),
    ("darwin", "darwin"),
    ("linux", "linux"),
    ("freebsd", "freebsd"),
    ("openbsd", "openbsd"),
    ("netbsd", "netbsd"),
    ("sunos", "solaris"),
    ("aix", "aix"),
)


def get_os_type() -> str:
    """Return the operating system name, e.g. linux, darwin or windows."""
    name = sys.platform.lower()
    for prefix, os_type in _OS_PREFIXES:
        if name.startswith(prefix):
            return os_type
    return name


def get_arch_type() -> str:
    """Return the CPU architecture name, e.g. amd64, arm64 or 386."""
    machine = platform.machine().lower()
    return _ARCH_ALIASES.get(machine, machine)