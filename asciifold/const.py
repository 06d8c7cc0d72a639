"""Constants for the asciifold transliteration library."""

from __future__ import annotations

from enum import Enum

# Codepoints below this value are ASCII
ASCII_LIMIT = 0x80

# Configuration keys
CONF_POLICY = "policy"
CONF_SOURCE_ENCODING = "source_encoding"
CONF_PLATFORM = "platform"

# Platform families for path and file name rules
PLATFORM_WINDOWS = "windows"
PLATFORM_POSIX = "posix"
PLATFORM_CHOICES: list[str] = [PLATFORM_WINDOWS, PLATFORM_POSIX]

# Characters written in place of runs of rejected characters
REPLACEMENT_SPACE = " "
REPLACEMENT_UNDERSCORE = "_"

# Source decoding
DEFAULT_SOURCE_ENCODING = "utf-8"
SOURCE_ERRORS = "replace"


class ConversionPolicy(str, Enum):
    """Output sanitization rule applied after transliteration."""

    FULL = "full"
    SAFE_PATH = "safe_path"
    SAFE_FILE_NAME = "safe_file_name"
    ALPHANUMERIC = "alphanumeric"

    @classmethod
    def _missing_(cls, value: object) -> ConversionPolicy | None:
        # Accept names in any case, e.g. "SAFE_PATH" or " Full "
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return None

    @property
    def replacement_char(self) -> str:
        """Character written in place of rejected characters."""
        if self is ConversionPolicy.ALPHANUMERIC:
            return REPLACEMENT_UNDERSCORE
        return REPLACEMENT_SPACE


POLICY_CHOICES: list[str] = [policy.value for policy in ConversionPolicy]
