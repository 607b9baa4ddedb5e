"""The .tool-versions file and sets of them read together."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterable, Iterator

from vfoxkit.toolset.file_record import FileRecord

FILENAME = ".tool-versions"


class ToolVersionsReadError(OSError):
    """A .tool-versions file exists but could not be read."""


class ToolVersion(FileRecord):
    """The .tool-versions file of one directory."""

    @classmethod
    def from_dir(cls, dir_path: str | os.PathLike[str]) -> ToolVersion:
        """Load the .tool-versions file in dir_path (empty if absent)."""
        path = Path(dir_path) / FILENAME
        try:
            loaded = FileRecord.from_path(path)
        except OSError as err:
            raise ToolVersionsReadError(
                f"failed to read tool versions file {path}: {err}"
            ) from err
        return cls(loaded.path, loaded.record)


class MultiToolVersions:
    """Several .tool-versions files, in order of precedence."""

    def __init__(self, tools: Iterable[ToolVersion] | None = None) -> None:
        self.tools: list[ToolVersion] = list(tools or ())

    @classmethod
    def from_paths(cls, paths: Iterable[str | os.PathLike[str]]) -> MultiToolVersions:
        """Load the .tool-versions file of each directory in paths."""
        return cls(ToolVersion.from_dir(path) for path in paths)

    def filter_tools(self, predicate: Callable[[str, str], bool]) -> dict[str, str]:
        """Return name -> version for accepted entries.

        For each name the first accepted version, in file order, wins.
        """
        tools: dict[str, str] = {}
        for tool in self.tools:
            for name, version in tool.record.items():
                if name not in tools and predicate(name, version):
                    tools[name] = version
        return tools

    def add(self, name: str, version: str) -> None:
        """Set name to version in every file."""
        for tool in self.tools:
            tool.record[name] = version

    def save(self) -> None:
        """Save every file, stopping at the first failure."""
        for tool in self.tools:
            tool.save()

    def __iter__(self) -> Iterator[ToolVersion]:
        return iter(self.tools)

    def __len__(self) -> int:
        return len(self.tools)