"""Dotted numeric version comparison and sorting."""

from __future__ import annotations

import re
from functools import cmp_to_key
from typing import Iterable

RUNTIME_VERSION = "0.6.1"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MAX = 2**63 - 1
_INT64_MIN = -(2**63)


def _to_int(part: str) -> int:
    """Parse a decimal component; anything unparsable counts as 0."""
    if not _INT_PATTERN.fullmatch(part):
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, int(part)))


def compare_version(v1: str, v2: str) -> int:
    """Compare two dotted versions, returning 1, -1 or 0.

    Missing components are treated as 0, as are components that are not
    plain integers.
    """
    parts1 = v1.split(".")
    parts2 = v2.split(".")
    width = max(len(parts1), len(parts2))
    parts1 += ["0"] * (width - len(parts1))
    parts2 += ["0"] * (width - len(parts2))

    for left, right in zip(parts1, parts2):
        a, b = _to_int(left), _to_int(right)
        if a != b:
            return 1 if a > b else -1
    return 0


def sort_versions(versions: Iterable[str]) -> list[str]:
    """Return the versions ordered from newest to oldest."""
    return sorted(versions, key=cmp_to_key(lambda a, b: compare_version(b, a)))