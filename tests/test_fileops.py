import os
import stat
import subprocess
from unittest.mock import patch

import pytest

from vfoxkit.util.fileops import (
    change_mode_if_not,
    copy_file,
    file_exists,
    is_executable,
    mk_symlink,
    move_files,
)


def test_file_exists(tmp_path):
    present = tmp_path / "present.txt"
    present.write_text("hi")
    assert file_exists(present) is True
    assert file_exists(tmp_path) is True
    assert file_exists(tmp_path / "missing.txt") is False


def test_copy_file_round_trip(tmp_path):
    src = tmp_path / "src.bin"
    dst = tmp_path / "dst.bin"
    payload = bytes(range(256)) * 10
    src.write_bytes(payload)
    dst.write_bytes(b"old content that is longer" * 200)
    copy_file(src, dst)
    assert dst.read_bytes() == payload


def test_copy_file_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy_file(tmp_path / "nope", tmp_path / "dst")


def test_move_files_directory_contents(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "a.txt").write_text("aaaa")
    (src / "sub").mkdir()
    (src / "sub" / "b.txt").write_text("bbbb")
    target = tmp_path / "target"
    target.mkdir()

    move_files(src, target)

    assert (target / "a.txt").read_text() == "aaaa"
    assert (target / "sub" / "b.txt").read_text() == "bbbb"
    assert list(src.iterdir()) == []


def test_move_single_file(tmp_path):
    src = tmp_path / "single.txt"
    src.write_text("content")
    target = tmp_path / "target"
    target.mkdir()
    move_files(src, target)
    assert (target / "single.txt").read_text() == "content"
    assert not src.exists()


def test_move_files_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        move_files(tmp_path / "missing", tmp_path)


def test_change_mode_if_not(tmp_path):
    path = tmp_path / "f"
    path.write_text("x")
    os.chmod(path, 0o644)
    change_mode_if_not(path, 0o600)
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o600
    change_mode_if_not(path, 0o600)
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o600


def test_change_mode_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        change_mode_if_not(tmp_path / "missing", 0o644)


def test_is_executable_by_mode(tmp_path):
    path = tmp_path / "tool"
    path.write_text("#!/bin/sh\n")
    with patch("sys.platform", "linux"):
        os.chmod(path, 0o644)
        assert is_executable(path) is False
        os.chmod(path, 0o755)
        assert is_executable(path) is True
        assert is_executable(tmp_path / "missing") is False


@pytest.mark.parametrize(
    ("name", "expected"),
    [("tool.exe", True), ("tool.BAT", True), ("tool.cmd", True), ("tool.ps1", True), ("tool.txt", False)],
)
def test_is_executable_on_windows_uses_extension(name, expected):
    with patch("sys.platform", "win32"):
        assert is_executable(name) is expected


def test_mk_symlink(tmp_path):
    target = tmp_path / "real"
    target.mkdir()
    link = tmp_path / "link"
    with patch("sys.platform", "linux"):
        mk_symlink(target, link)
    assert os.path.islink(link)
    assert os.readlink(link) == str(target)


def test_mk_symlink_existing_link_raises(tmp_path):
    target = tmp_path / "real"
    target.mkdir()
    link = tmp_path / "link"
    with patch("sys.platform", "linux"):
        mk_symlink(target, link)
        with pytest.raises(FileExistsError):
            mk_symlink(target, link)


def test_mk_symlink_windows_uses_junction(tmp_path):
    target = str(tmp_path / "real")
    link = str(tmp_path / "link")
    done = subprocess.CompletedProcess(args=[], returncode=0)
    with patch("sys.platform", "win32"), patch("subprocess.run", return_value=done) as run:
        mk_symlink(target, link)
    args = run.call_args.args[0]
    assert args == ["cmd", "/c", "mklink", "/j", link, target]
    assert not os.path.lexists(link)