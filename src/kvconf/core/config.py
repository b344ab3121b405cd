"""Loader configuration using pydantic-settings with a KVCONF_ env prefix."""

from __future__ import annotations

import codecs

from pydantic import field_validator
from pydantic_settings import BaseSettings


class LoaderSettings(BaseSettings):
    """Settings shared by the parser and the populator."""

    model_config = {"env_prefix": "KVCONF_"}

    encoding: str = "utf-8-sig"  # plain UTF-8, leading byte-order mark dropped
    atomic: bool = True  # stage all conversions, assign only on full success

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc
        return value
