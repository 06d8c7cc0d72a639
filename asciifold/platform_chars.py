"""Characters forbidden in filesystem paths and file names.

Windows rejects the quote, angle brackets, pipe and all control characters
in paths, and additionally the colon, asterisk, question mark and both
slashes in file names. POSIX systems only reject NUL, plus the slash inside
a file name.
"""

from __future__ import annotations

import os

from .const import PLATFORM_POSIX, PLATFORM_WINDOWS

_CONTROL_CHARS = frozenset(chr(code) for code in range(0x01, 0x20))

_INVALID_PATH_CHARS: dict[str, frozenset[str]] = {
    PLATFORM_WINDOWS: frozenset('"<>|\0') | _CONTROL_CHARS,
    PLATFORM_POSIX: frozenset("\0"),
}

_INVALID_FILENAME_CHARS: dict[str, frozenset[str]] = {
    PLATFORM_WINDOWS: _INVALID_PATH_CHARS[PLATFORM_WINDOWS] | frozenset(":*?\\/"),
    PLATFORM_POSIX: frozenset("\0/"),
}


def detect_platform() -> str:
    """Return the platform family of the running interpreter."""
    return PLATFORM_WINDOWS if os.name == "nt" else PLATFORM_POSIX


def _resolve_platform(platform: str | None) -> str:
    if platform is None:
        return detect_platform()
    key = platform.strip().lower()
    if key not in _INVALID_PATH_CHARS:
        raise ValueError(f"Unknown platform '{platform}'")
    return key


def get_invalid_path_chars(platform: str | None = None) -> frozenset[str]:
    """Get characters that may not appear in a path.

    Args:
        platform: "windows" or "posix", or None for the running platform.

    Returns:
        Set of forbidden characters.
    """
    return _INVALID_PATH_CHARS[_resolve_platform(platform)]


def get_invalid_filename_chars(platform: str | None = None) -> frozenset[str]:
    """Get characters that may not appear in a file name.

    Args:
        platform: "windows" or "posix", or None for the running platform.

    Returns:
        Set of forbidden characters.
    """
    return _INVALID_FILENAME_CHARS[_resolve_platform(platform)]
