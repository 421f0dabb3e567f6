from __future__ import annotations

from toolchain_versions.config import DEFAULT_SETTINGS, NamingSettings, load_settings
from toolchain_versions.decimals import compare_decimal, decrement_decimal
from toolchain_versions.errors import InvalidVersionError
from toolchain_versions.names import (
    compare_names,
    format_name,
    is_valid_name,
    language_version,
    max_name,
    parse_name,
    sort_names,
    strip_name,
)
from toolchain_versions.version import (
    INVALID,
    ParsedVersion,
    compare,
    compare_parsed,
    is_lang,
    is_valid,
    lang,
    max_version,
    parse,
    sort_key,
)

__all__ = [
    "__version__",
    # Raw versions
    "ParsedVersion",
    "INVALID",
    "parse",
    "compare",
    "compare_parsed",
    "is_valid",
    "is_lang",
    "lang",
    "max_version",
    "sort_key",
    # Toolchain names
    "strip_name",
    "parse_name",
    "compare_names",
    "is_valid_name",
    "language_version",
    "max_name",
    "format_name",
    "sort_names",
    # Decimals
    "compare_decimal",
    "decrement_decimal",
    # Errors
    "InvalidVersionError",
    # Config
    "NamingSettings",
    "DEFAULT_SETTINGS",
    "load_settings",
]

__version__ = "0.1.0"
