"""Tests for forbidden path and file name characters."""

import types

import pytest

from asciifold import platform_chars
from asciifold.platform_chars import (
    detect_platform,
    get_invalid_filename_chars,
    get_invalid_path_chars,
)


class TestInvalidChars:
    """Tests for the per-platform character sets."""

    def test_posix_path(self) -> None:
        assert get_invalid_path_chars("posix") == frozenset("\0")

    def test_posix_file_name(self) -> None:
        assert get_invalid_filename_chars("posix") == frozenset("\0/")

    def test_windows_path(self) -> None:
        chars = get_invalid_path_chars("windows")
        assert {'"', "<", ">", "|", "\0", "\t", "\x1f"} <= chars
        assert ":" not in chars
        assert "\\" not in chars

    def test_windows_file_name_extends_path(self) -> None:
        chars = get_invalid_filename_chars("windows")
        assert get_invalid_path_chars("windows") < chars
        assert {":", "*", "?", "\\", "/"} <= chars

    def test_platform_name_case_insensitive(self) -> None:
        assert get_invalid_path_chars("Windows") == get_invalid_path_chars("windows")

    def test_unknown_platform(self) -> None:
        with pytest.raises(ValueError, match="Unknown platform 'beos'"):
            get_invalid_filename_chars("beos")


class TestDetectPlatform:
    """Tests for detect_platform."""

    def test_windows(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(platform_chars, "os", types.SimpleNamespace(name="nt"))
        assert detect_platform() == "windows"
        assert get_invalid_path_chars() == get_invalid_path_chars("windows")

    def test_posix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(platform_chars, "os", types.SimpleNamespace(name="posix"))
        assert detect_platform() == "posix"
        assert get_invalid_filename_chars() == frozenset("\0/")
