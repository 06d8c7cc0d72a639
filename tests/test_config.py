"""Tests for converter configuration."""

import pytest
import voluptuous as vol

from asciifold.config import ConverterConfig, convert_with_config, load_config
from asciifold.const import ConversionPolicy


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self) -> None:
        assert load_config() == ConverterConfig()
        assert load_config({}).policy is ConversionPolicy.FULL

    def test_policy_name_case_insensitive(self) -> None:
        assert load_config({"policy": "Alphanumeric"}).policy is ConversionPolicy.ALPHANUMERIC
        assert load_config({"policy": " SAFE_PATH "}).policy is ConversionPolicy.SAFE_PATH

    def test_policy_member(self) -> None:
        config = load_config({"policy": ConversionPolicy.SAFE_FILE_NAME})
        assert config.policy is ConversionPolicy.SAFE_FILE_NAME

    def test_platform_lowercased(self) -> None:
        assert load_config({"platform": "WINDOWS"}).platform == "windows"

    def test_source_encoding(self) -> None:
        assert load_config({"source_encoding": "windows-1251"}).source_encoding == "windows-1251"

    @pytest.mark.parametrize(
        "data",
        [
            {"policy": "lossless"},
            {"policy": 3},
            {"platform": "beos"},
            {"source_encoding": "no-such-encoding"},
            {"source_encoding": ""},
            {"replacement": "-"},
        ],
    )
    def test_invalid(self, data: dict) -> None:
        with pytest.raises(vol.Invalid):
            load_config(data)


class TestConvertWithConfig:
    """Tests for convert_with_config."""

    def test_decodes_and_sanitizes(self) -> None:
        config = load_config(
            {
                "policy": "safe_file_name",
                "source_encoding": "windows-1251",
                "platform": "posix",
            }
        )
        assert convert_with_config("Привет/мир".encode("cp1251"), config) == "Privet mir"

    def test_default_config(self) -> None:
        assert convert_with_config("Déjà vu", ConverterConfig()) == "Deja vu"
