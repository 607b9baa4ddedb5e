"""File system helpers: existence, copying, moving, modes and links."""

from __future__ import annotations

import os
import stat
import subprocess
from pathlib import Path

from vfoxkit.util.runtime import get_os_type

_WINDOWS_EXECUTABLE_SUFFIXES = frozenset({".exe", ".bat", ".cmd", ".ps1"})


def file_exists(filename: str | os.PathLike[str]) -> bool:
    """Return True if the path can be stat'ed."""
    try:
        os.stat(filename)
    except (OSError, ValueError):
        return False
    return True


def copy_file(src: str | os.PathLike[str], dst: str | os.PathLike[str]) -> None:
    """Copy file contents from src to dst, truncating dst, and flush to disk."""
    with open(src, "rb") as source, open(dst, "wb") as target:
        while chunk := source.read(1024 * 1024):
            target.write(chunk)
        target.flush()
        os.fsync(target.fileno())


def move_files(src: str | os.PathLike[str], target_dir: str | os.PathLike[str]) -> None:
    """Move a file, or every entry of a directory, into target_dir."""
    source = Path(src)
    target = Path(target_dir)
    if source.is_dir():
        for entry in sorted(source.iterdir()):
            os.rename(entry, target / entry.name)
    else:
        os.stat(source)
        os.rename(source, target / source.name)


def change_mode_if_not(src: str | os.PathLike[str], mode: int) -> None:
    """Set the permission bits of src to mode unless they already match."""
    current = stat.S_IMODE(os.stat(src).st_mode)
    if current != mode:
        os.chmod(src, mode)


def is_executable(src: str | os.PathLike[str]) -> bool:
    """Return True if the file looks executable on this platform."""
    if get_os_type() == "windows":
        return Path(src).suffix.lower() in _WINDOWS_EXECUTABLE_SUFFIXES
    try:
        mode = os.stat(src).st_mode
    except OSError:
        return False
    return bool(mode & 0o111)


def mk_symlink(oldname: str | os.PathLike[str], newname: str | os.PathLike[str]) -> None:
    """Create newname pointing at oldname.

    On Windows a directory junction is tried first; a plain symbolic link
    is the fallback everywhere.
    """
    if get_os_type() == "windows":
        try:
            result = subprocess.run(
                ["cmd", "/c", "mklink", "/j", os.fspath(newname), os.fspath(oldname)],
                capture_output=True,
                check=False,
            )
        except OSError:
            pass
        else:
            if result.returncode == 0:
                return
    os.symlink(oldname, newname)