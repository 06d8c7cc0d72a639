"""Tests for the output sanitization policies."""

import re

import pytest

from asciifold.const import ConversionPolicy
from asciifold.platform_chars import get_invalid_filename_chars, get_invalid_path_chars
from asciifold.transform import apply_policy, convert

SAMPLES = [
    "naïve_123!",
    "Déjà-vu",
    "<<file>>",
    "a:b*c?d",
    "dir\\name/x",
    "Þórr|Óðinn",
    "??x??",
    "\t\ttab\n",
    "Ærø&Co.",
    "①②③⑴⑵",
    "中文",
    "___",
    "",
]


class TestAlphanumeric:
    """Tests for the ALPHANUMERIC policy."""

    def test_folds_and_replaces(self) -> None:
        assert convert("naïve_123!", policy=ConversionPolicy.ALPHANUMERIC) == "naive_123"

    def test_runs_collapse(self) -> None:
        assert convert("Ærø & Co.", policy=ConversionPolicy.ALPHANUMERIC) == "Aero_Co"

    def test_leading_rejects_dropped(self) -> None:
        assert convert("__hello__", policy=ConversionPolicy.ALPHANUMERIC) == "hello"

    def test_only_unmappable(self) -> None:
        assert convert("中文!", policy=ConversionPolicy.ALPHANUMERIC) == ""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_output_charset(self, text: str) -> None:
        result = convert(text, policy=ConversionPolicy.ALPHANUMERIC)
        assert re.fullmatch(r"[0-9A-Za-z_]*", result)
        assert not result.startswith("_")
        assert not result.endswith("_")
        assert "__" not in result


class TestSafeFileName:
    """Tests for the SAFE_FILE_NAME policy."""

    def test_slash_replaced_on_posix(self) -> None:
        result = convert("café/bar", policy=ConversionPolicy.SAFE_FILE_NAME, platform="posix")
        assert result == "cafe bar"

    def test_windows_run_collapses(self) -> None:
        result = convert("a<>:b", policy=ConversionPolicy.SAFE_FILE_NAME, platform="windows")
        assert result == "a b"

    def test_windows_edges_trimmed(self) -> None:
        result = convert("??x??", policy=ConversionPolicy.SAFE_FILE_NAME, platform="windows")
        assert result == "x"

    @pytest.mark.parametrize("platform", ["windows", "posix"])
    @pytest.mark.parametrize("text", SAMPLES)
    def test_output_is_valid_file_name(self, text: str, platform: str) -> None:
        forbidden = get_invalid_filename_chars(platform)
        result = convert(text, policy=ConversionPolicy.SAFE_FILE_NAME, platform=platform)
        assert not forbidden & set(result)
        assert "  " not in result
        assert not result.startswith(" ")
        assert not result.endswith(" ")


class TestSafePath:
    """Tests for the SAFE_PATH policy."""

    def test_slash_kept_on_posix(self) -> None:
        result = convert("café/bar", policy=ConversionPolicy.SAFE_PATH, platform="posix")
        assert result == "cafe/bar"

    def test_pipe_replaced_on_windows(self) -> None:
        result = convert("Þórr|Óðinn", policy=ConversionPolicy.SAFE_PATH, platform="windows")
        assert result == "Thorr Odinn"

    def test_separators_kept_on_windows(self) -> None:
        result = convert("C:\\dir\\name", policy=ConversionPolicy.SAFE_PATH, platform="windows")
        assert result == "C:\\dir\\name"

    @pytest.mark.parametrize("platform", ["windows", "posix"])
    @pytest.mark.parametrize("text", SAMPLES)
    def test_output_is_valid_path(self, text: str, platform: str) -> None:
        forbidden = get_invalid_path_chars(platform)
        result = convert(text, policy=ConversionPolicy.SAFE_PATH, platform=platform)
        assert not forbidden & set(result)
        assert "  " not in result
        assert not result.startswith(" ")
        assert not result.endswith(" ")

    def test_unknown_platform(self) -> None:
        with pytest.raises(ValueError):
            convert("abc", policy=ConversionPolicy.SAFE_PATH, platform="amiga")


class TestApplyPolicy:
    """Tests for apply_policy on already converted text."""

    def test_full_only_trims(self) -> None:
        assert apply_policy(" a|b ") == "a|b"

    def test_alphanumeric_by_name(self) -> None:
        assert apply_policy("a-b-c", "alphanumeric") == "a_b_c"

    def test_file_name(self) -> None:
        assert apply_policy("x/y", ConversionPolicy.SAFE_FILE_NAME, platform="posix") == "x y"

    def test_policy_name_any_case(self) -> None:
        assert apply_policy("a-b", "Alphanumeric") == "a_b"
