"""A small text file mapping names to values, one "name value" pair per line."""

from __future__ import annotations

import os
from pathlib import Path

from vfoxkit.util.fileops import file_exists


class FileRecordError(OSError):
    """The record file could not be written."""


def _parse_lines(text: str) -> dict[str, str]:
    record: dict[str, str] = {}
    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        parts = line.split(" ")
        if len(parts) == 2:
            name, value = parts
            record[name] = value
    return record


class FileRecord:
    """A mapping of strings to strings backed by a file on disk.

    A record that started out empty and is still empty when saved leaves
    the file system untouched.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        record: dict[str, str] | None = None,
    ) -> None:
        self.path = Path(path)
        self.record: dict[str, str] = dict(record) if record else {}
        self._init_empty = not self.record

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> FileRecord:
        """Load a record from path; a missing file gives an empty record.

        Lines that do not hold exactly two fields separated by a single
        space are ignored.
        """
        record: dict[str, str] = {}
        if file_exists(path):
            record = _parse_lines(Path(path).read_text(encoding="utf-8"))
        return cls(path, record)

    def save(self) -> None:
        """Write every pair to the file as "name value" lines."""
        if self._init_empty and not self.record:
            return
        try:
            with open(self.path, "w", encoding="utf-8", newline="\n") as out:
                for name, value in self.record.items():
                    out.write(f"{name} {value}\n")
        except OSError as err:
            raise FileRecordError(
                f"failed to create file record {self.path}: {err}"
            ) from err

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r}, {self.record!r})"