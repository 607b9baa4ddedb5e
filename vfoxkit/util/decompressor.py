"""Unpack tar (gzip, xz, bzip2) and zip archives, dropping a shared root folder."""

from __future__ import annotations

import abc
import os
import shutil
import stat
import tarfile
import zipfile
from typing import ClassVar

_DIR_MODE = 0o755
_MSDOS_READONLY = 0x01


def _join(dest: str | os.PathLike[str], name: str) -> str:
    return os.path.normpath(os.path.join(os.fspath(dest), name))


def _strip_first_component(name: str, *, enabled: bool = True) -> str:
    parts = name.split("/")
    if len(parts) > 1 and enabled:
        parts = parts[1:]
    return "/".join(parts)


def _write_new_symbolic_link(fpath: str, target: str) -> None:
    """Create a symlink at fpath pointing to target, replacing what is there."""
    os.makedirs(os.path.dirname(fpath) or ".", _DIR_MODE, exist_ok=True)
    if os.path.lexists(fpath):
        os.remove(fpath)
    os.symlink(target, fpath)


class Decompressor(abc.ABC):
    """An archive on disk that can be unpacked into a directory."""

    def __init__(self, src: str | os.PathLike[str]) -> None:
        self.src = os.fspath(src)

    @abc.abstractmethod
    def decompress(self, dest: str | os.PathLike[str]) -> None:
        """Extract the archive's contents into dest."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.src!r})"


class _TarDecompressor(Decompressor):
    """Tar archive; the first path component of every member is dropped."""

    _mode: ClassVar[str]

    def decompress(self, dest: str | os.PathLike[str]) -> None:
        symlinks: list[tuple[str, str]] = []
        with tarfile.open(self.src, self._mode) as archive:
            for member in archive:
                target = _join(dest, _strip_first_component(member.name))
                if member.isdir():
                    if not os.path.exists(target):
                        os.makedirs(target, _DIR_MODE, exist_ok=True)
                elif member.isreg():
                    os.makedirs(os.path.dirname(target) or ".", _DIR_MODE, exist_ok=True)
                    self._write_member(archive, member, target)
                elif member.issym():
                    symlinks.append((member.linkname, target))

        for link_target, link_path in symlinks:
            parent = os.path.dirname(link_path)
            if parent and not os.path.exists(parent):
                os.makedirs(parent, _DIR_MODE, exist_ok=True)
            os.symlink(link_target, link_path)

    @staticmethod
    def _write_member(archive: tarfile.TarFile, member: tarfile.TarInfo, target: str) -> None:
        source = archive.extractfile(member)
        fd = os.open(target, os.O_CREAT | os.O_RDWR, member.mode & 0o7777)
        with os.fdopen(fd, "wb") as out:
            if source is not None:
                with source:
                    shutil.copyfileobj(source, out)


class GzipTarDecompressor(_TarDecompressor):
    """Unpacks .tar.gz and .tgz archives."""

    _mode = "r:gz"


class XZTarDecompressor(_TarDecompressor):
    """Unpacks .tar.xz archives."""

    _mode = "r:xz"


class Bzip2TarDecompressor(_TarDecompressor):
    """Unpacks .tar.bz2 archives."""

    _mode = "r:bz2"


def find_root_folder_in_zip(zip_file_path: str | os.PathLike[str]) -> str:
    """Return the first path component shared by every entry, or "" if none.

    An archive that cannot be opened also yields "".
    """
    try:
        with zipfile.ZipFile(zip_file_path) as archive:
            names = archive.namelist()
    except (OSError, zipfile.BadZipFile):
        return ""

    first = ""
    for name in names:
        current = name.replace("\\", "/").split("/")[0]
        if first and first != current:
            return ""
        if not first:
            first = current
    return first


def _zip_unix_mode(info: zipfile.ZipInfo) -> int:
    return info.external_attr >> 16


def _zip_is_symlink(info: zipfile.ZipInfo) -> bool:
    return stat.S_ISLNK(_zip_unix_mode(info))


def _zip_file_mode(info: zipfile.ZipInfo) -> int:
    perm = _zip_unix_mode(info) & 0o777
    if perm:
        return perm
    return 0o444 if info.external_attr & _MSDOS_READONLY else 0o666


class ZipDecompressor(Decompressor):
    """Unpacks .zip archives, dropping the root folder if all entries share one."""

    def decompress(self, dest: str | os.PathLike[str]) -> None:
        root = find_root_folder_in_zip(self.src)
        with zipfile.ZipFile(self.src) as archive:
            for info in archive.infolist():
                self._process_entry(archive, info, dest, root)

    @staticmethod
    def _process_entry(
        archive: zipfile.ZipFile,
        info: zipfile.ZipInfo,
        dest: str | os.PathLike[str],
        root: str,
    ) -> None:
        normalized = info.filename.replace("\\", "/")
        fname = _strip_first_component(normalized, enabled=root != "")
        fpath = _join(dest, fname)

        if info.is_dir() or normalized.endswith("/") or fname.endswith("/"):
            os.makedirs(fpath, 0o777, exist_ok=True)
        elif _zip_is_symlink(info):
            link_target = archive.read(info).decode("utf-8").strip()
            _write_new_symbolic_link(fpath, link_target)
        else:
            os.makedirs(os.path.dirname(fpath) or ".", 0o777, exist_ok=True)
            fd = os.open(fpath, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _zip_file_mode(info))
            with os.fdopen(fd, "wb") as out, archive.open(info) as source:
                shutil.copyfileobj(source, out)


_SUFFIXES: tuple[tuple[tuple[str, ...], type[Decompressor]], ...] = (
    ((".tar.gz", ".tgz"), GzipTarDecompressor),
    ((".tar.xz",), XZTarDecompressor),
    ((".tar.bz2",), Bzip2TarDecompressor),
    ((".zip",), ZipDecompressor),
)


def new_decompressor(src: str | os.PathLike[str]) -> Decompressor | None:
    """Pick a decompressor from the file name, or None if the format is unknown."""
    filename = os.path.basename(os.fspath(src))
    for suffixes, kind in _SUFFIXES:
        if filename.endswith(suffixes):
            return kind(src)
    return None