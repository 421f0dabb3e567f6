from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import cmp_to_key

from toolchain_versions.config import DEFAULT_SETTINGS, NamingSettings
from toolchain_versions.errors import InvalidVersionError
from toolchain_versions.version import ParsedVersion, compare, is_valid, lang, parse

logger = logging.getLogger(__name__)


def strip_name(name: str, *, settings: NamingSettings | None = None) -> str:
    """
    Convert a toolchain name like "go1.21-bigcorp" to the raw version "1.21".

    Returns "" (a known invalid version) when the name lacks the prefix.
    """

    s = settings or DEFAULT_SETTINGS
    name = name.split(s.suffix_separator, 1)[0]
    if not name.startswith(s.prefix):
        return ""
    return name[len(s.prefix) :]


def parse_name(name: str, *, settings: NamingSettings | None = None) -> ParsedVersion:
    v = parse(strip_name(name, settings=settings))
    if not v.is_valid:
        logger.debug("rejected toolchain name %r", name)
        raise InvalidVersionError(name)
    return v


def compare_names(x: str, y: str, *, settings: NamingSettings | None = None) -> int:
    """
    Compare toolchain names x and y, returning -1, 0 or +1.

    Names must carry the prefix: "go1.21", not "1.21". Invalid names, including
    the empty string, compare less than valid ones and equal to each other.
    For example:

        compare_names("go1.21rc1", "go1.21") == 1
        compare_names("go1.21rc1", "go1.21.0") == -1
        compare_names("go1.19rc1", "go1.19") == -1
        compare_names("go1.9.2rc2", "go1.9") == 1
    """

    return compare(strip_name(x, settings=settings), strip_name(y, settings=settings))


def is_valid_name(name: str, *, settings: NamingSettings | None = None) -> bool:
    return is_valid(strip_name(name, settings=settings))


def max_name(x: str, y: str, *, settings: NamingSettings | None = None) -> str:
    if compare_names(x, y, settings=settings) < 0:
        return y
    return x


def language_version(name: str, *, settings: NamingSettings | None = None) -> str:
    """
    Language version for a toolchain name, or "" when the name is invalid.

        language_version("go1.21rc2") == "go1.21"
        language_version("go1.21.2") == "go1.21"
        language_version("go1") == "go1"
        language_version("1.21") == ""
    """

    s = settings or DEFAULT_SETTINGS
    v = lang(strip_name(name, settings=s))
    if v == "":
        return ""
    n = len(s.prefix)
    if name[n:].startswith(v):
        return name[: n + len(v)]
    return s.prefix + v


def format_name(version: ParsedVersion, *, settings: NamingSettings | None = None) -> str:
    if not version.is_valid:
        return ""
    s = settings or DEFAULT_SETTINGS
    return s.prefix + str(version)


def sort_names(names: Iterable[str], *, settings: NamingSettings | None = None) -> list[str]:
    key = cmp_to_key(lambda x, y: compare_names(x, y, settings=settings))
    return sorted(names, key=key)
