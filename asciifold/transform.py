"""String-level transliteration pipeline.

Conversion happens in three steps:

1. Every character of the decoded input is converted on its own through the
   mapping table (see :func:`asciifold.mapping.convert_char`).
2. The results are joined in order. A multi-letter result is held back for
   one character so its casing can follow the text after it: "TH" followed
   by a lowercase letter is written as "Th".
3. The sanitization policy filters the joined string. Runs of rejected
   characters collapse into one replacement character, and a replacement
   character at either end of the result is trimmed.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from .const import ConversionPolicy
from .encoding import decode_source
from .fallback import FallbackDecomposer
from .mapping.table import convert_char
from .platform_chars import get_invalid_filename_chars, get_invalid_path_chars


def _starts_lowercase(output: str) -> bool:
    return bool(output) and "a" <= output[0] <= "z"


def _is_alphanumeric(char: str) -> bool:
    return "0" <= char <= "9" or "A" <= char <= "Z" or "a" <= char <= "z"


@dataclass
class TransformState:
    """Per-call accumulator for one forward pass over the input."""

    replacement: str
    parts: list[str] = field(default_factory=list)
    pending: str | None = None

    def _release(self, following: str) -> None:
        pending = self.pending
        if pending is None:
            return
        if len(pending) > 1 and _starts_lowercase(following):
            pending = pending[0] + pending[1:].lower()
        self.parts.append(pending)

    def push(self, output: str) -> None:
        """Release the pending output and hold back ``output``."""
        self._release(output)
        self.pending = output

    def flush(self) -> str:
        """Release the last pending output and return the joined result.

        The last output is its own follower, so a multi-letter output that
        starts lowercase has its tail lowercased as well.
        """
        if self.pending is not None:
            self._release(self.pending)
            self.pending = None
        return "".join(self.parts)


def _validator_for(
    policy: ConversionPolicy, platform: str | None
) -> Callable[[str], bool] | None:
    if policy is ConversionPolicy.ALPHANUMERIC:
        return _is_alphanumeric
    if policy is ConversionPolicy.SAFE_PATH:
        forbidden = get_invalid_path_chars(platform)
    elif policy is ConversionPolicy.SAFE_FILE_NAME:
        forbidden = get_invalid_filename_chars(platform)
    else:
        return None
    return lambda char: char not in forbidden


def _sanitize(
    raw: str,
    policy: ConversionPolicy,
    replacement: str,
    platform: str | None,
) -> str:
    is_valid = _validator_for(policy, platform)
    if is_valid is None:
        result = raw
    else:
        chars: list[str] = []
        for char in raw:
            if is_valid(char):
                chars.append(char)
            elif chars and chars[-1] != replacement:
                chars.append(replacement)
        result = "".join(chars)

    if result.endswith(replacement):
        result = result[:-1]
    if result.startswith(replacement):
        result = result[1:]
    return result


def apply_policy(
    raw: str,
    policy: ConversionPolicy | str = ConversionPolicy.FULL,
    *,
    platform: str | None = None,
) -> str:
    """Apply a sanitization policy to already transliterated text.

    Args:
        raw: ASCII text.
        policy: Policy or its string value.
        platform: "windows" or "posix" for the path policies, or None for
            the running platform.

    Returns:
        Filtered and trimmed text.
    """
    policy = ConversionPolicy(policy)
    return _sanitize(raw, policy, policy.replacement_char, platform)


def convert(
    text: str | bytes,
    source_encoding: str | None = None,
    policy: ConversionPolicy | str = ConversionPolicy.FULL,
    *,
    platform: str | None = None,
    decomposer: FallbackDecomposer | None = None,
) -> str:
    """Convert text to its ASCII rendering.

    Args:
        text: Text to convert, as str or bytes.
        source_encoding: Encoding of ``text``; None when it is already a
            decoded string (bytes then default to UTF-8).
        policy: Sanitization policy or its string value.
        platform: Platform whose path rules the path policies follow.
        decomposer: Fallback to use for characters missing from the table.

    Returns:
        ASCII string.

    Raises:
        ValueError: If ``policy`` or ``platform`` is unknown.
    """
    policy = ConversionPolicy(policy)
    decoded = decode_source(text, source_encoding)

    state = TransformState(replacement=policy.replacement_char)
    for char in decoded:
        state.push(convert_char(char, decomposer))

    return _sanitize(state.flush(), policy, state.replacement, platform)
