from __future__ import annotations

import pytest
from pydantic import ValidationError

from toolchain_versions.config import (
    DEFAULT_SETTINGS,
    PREFIX_ENV,
    SUFFIX_SEPARATOR_ENV,
    NamingSettings,
    load_settings,
)


def test_default_settings() -> None:
    assert DEFAULT_SETTINGS.prefix == "go"
    assert DEFAULT_SETTINGS.suffix_separator == "-"


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"prefix": ""}, "prefix must be a non-empty string"),
        ({"prefix": "go1"}, "prefix must not contain digits"),
        ({"suffix_separator": ""}, "single character"),
        ({"suffix_separator": "--"}, "single character"),
        ({"suffix_separator": "."}, "must not be '.' or a digit"),
        ({"suffix_separator": "7"}, "must not be '.' or a digit"),
        ({"prefix": "go-", "suffix_separator": "-"}, "prefix must not contain suffix_separator"),
        ({"prefix": "my-go"}, "prefix must not contain suffix_separator"),
    ],
)
def test_settings_validation(kwargs: dict[str, str], message: str) -> None:
    with pytest.raises(ValidationError, match=message):
        NamingSettings(**kwargs)


def test_settings_are_frozen() -> None:
    with pytest.raises(ValidationError):
        DEFAULT_SETTINGS.prefix = "tc"  # type: ignore[misc]


def test_load_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(PREFIX_ENV, "tc")
    monkeypatch.setenv(SUFFIX_SEPARATOR_ENV, "+")
    settings = load_settings()
    assert settings == NamingSettings(prefix="tc", suffix_separator="+")


def test_load_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(PREFIX_ENV, "")
    monkeypatch.setenv(SUFFIX_SEPARATOR_ENV, "")
    assert load_settings() == DEFAULT_SETTINGS
