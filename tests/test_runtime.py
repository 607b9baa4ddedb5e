from unittest.mock import patch

import pytest

from vfoxkit.util.runtime import get_arch_type, get_os_type


@pytest.mark.parametrize("name", ["linux", "darwin"])
def test_os_names_pass_through(name):
    with patch("sys.platform", name):
        assert get_os_type() == name


def test_windows_platform_maps_to_windows():
    with patch("sys.platform", "win32"):
        assert get_os_type() == "windows"


def test_x86_64_maps_to_amd64():
    with patch("platform.machine", return_value="x86_64"):
        assert get_arch_type() == "amd64"


def test_aarch64_maps_to_arm64():
    with patch("platform.machine", return_value="aarch64"):
        assert get_arch_type() == "arm64"


def test_unknown_machine_is_lowercased():
    with patch("platform.machine", return_value="SPARC64"):
        assert get_arch_type() == "sparc64"


def test_aliases_agree():
    with patch("platform.machine", return_value="AMD64"):
        first = get_arch_type()
    with patch("platform.machine", return_value="x86_64"):
        second = get_arch_type()
    assert first == second == "amd64"