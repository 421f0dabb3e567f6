from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

logger = logging.getLogger(__name__)

PREFIX_ENV = "TOOLCHAIN_VERSIONS_PREFIX"
SUFFIX_SEPARATOR_ENV = "TOOLCHAIN_VERSIONS_SUFFIX_SEPARATOR"


def repo_root() -> Path:
    # Project root is the directory that contains the `toolchain_versions/` package.
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    # Prefer a project-local `.env`; fall back to searching from CWD.
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


class NamingSettings(BaseModel):
    """How toolchain names wrap a raw version: "<prefix><version>[<separator><suffix>]"."""

    model_config = ConfigDict(frozen=True)

    prefix: str = "go"
    suffix_separator: str = "-"

    @field_validator("prefix")
    @classmethod
    def _valid_prefix(cls, v: str) -> str:
        if not v:
            raise ValueError("prefix must be a non-empty string")
        if any("0" <= ch <= "9" for ch in v):
            raise ValueError("prefix must not contain digits")
        return v

    @field_validator("suffix_separator")
    @classmethod
    def _valid_separator(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("suffix_separator must be a single character")
        if v == "." or "0" <= v <= "9":
            raise ValueError("suffix_separator must not be '.' or a digit")
        return v

    @model_validator(mode="after")
    def _separator_outside_prefix(self) -> "NamingSettings":
        # Names are cut at the separator before the prefix is checked.
        if self.suffix_separator in self.prefix:
            raise ValueError("prefix must not contain suffix_separator")
        return self


DEFAULT_SETTINGS = NamingSettings()


def load_settings() -> NamingSettings:
    load_env()
    overrides: dict[str, str] = {}
    prefix = os.getenv(PREFIX_ENV)
    if prefix:
        overrides["prefix"] = prefix.strip()
    separator = os.getenv(SUFFIX_SEPARATOR_ENV)
    if separator:
        overrides["suffix_separator"] = separator
    if overrides:
        logger.debug("naming overrides from environment: %s", overrides)
    return NamingSettings(**overrides)
