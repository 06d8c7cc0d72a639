"""Converter configuration and its validation schema."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import voluptuous as vol

from .const import (
    CONF_PLATFORM,
    CONF_POLICY,
    CONF_SOURCE_ENCODING,
    PLATFORM_CHOICES,
    ConversionPolicy,
)
from .encoding import is_known_encoding
from .transform import convert


def _policy(value: Any) -> ConversionPolicy:
    """Validate a policy given as enum member or case-insensitive name."""
    if isinstance(value, ConversionPolicy):
        return value
    if not isinstance(value, str):
        raise vol.Invalid("policy must be a string")
    try:
        return ConversionPolicy(value)
    except ValueError as err:
        raise vol.Invalid(f"unknown policy '{value}'") from err


def _encoding(value: Any) -> str:
    """Validate that an encoding name resolves to a text codec."""
    if not isinstance(value, str) or not value.strip():
        raise vol.Invalid("source encoding must be a non-empty string")
    if not is_known_encoding(value):
        raise vol.Invalid(f"unknown source encoding '{value}'")
    return value.strip()


CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_POLICY, default=ConversionPolicy.FULL.value): _policy,
        vol.Optional(CONF_SOURCE_ENCODING, default=None): vol.Any(None, _encoding),
        vol.Optional(CONF_PLATFORM, default=None): vol.Any(
            None, vol.All(str, vol.Lower, vol.In(PLATFORM_CHOICES))
        ),
    }
)


@dataclass
class ConverterConfig:
    """Options applied to every conversion made with this configuration."""

    policy: ConversionPolicy = ConversionPolicy.FULL
    source_encoding: str | None = None
    platform: str | None = None


def load_config(data: Mapping[str, Any] | None = None) -> ConverterConfig:
    """Validate a plain mapping and build a configuration from it.

    Raises:
        voluptuous.Invalid: If a key is unknown or a value is not accepted.
    """
    validated = CONFIG_SCHEMA(dict(data or {}))
    return ConverterConfig(
        policy=validated[CONF_POLICY],
        source_encoding=validated[CONF_SOURCE_ENCODING],
        platform=validated[CONF_PLATFORM],
    )


def convert_with_config(text: str | bytes, config: ConverterConfig) -> str:
    """Convert text using the options of ``config``."""
    return convert(
        text,
        config.source_encoding,
        config.policy,
        platform=config.platform,
    )
