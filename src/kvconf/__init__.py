"""Typed loader for flat ``key = value`` config files."""

from __future__ import annotations

from kvconf.api import get_config, populate_config_struct, read_config_with_required_keys, read_raw_config
from kvconf.core.config import LoaderSettings
from kvconf.core.exceptions import (
    ConfigIOError,
    InvalidPathError,
    KvConfError,
    MissingKeyError,
    TypeConversionError,
    UnsupportedTypeError,
)
from kvconf.models.fields import FieldDescriptor, FieldType, Int64, Text, UInt64

__all__ = [
    "ConfigIOError",
    "FieldDescriptor",
    "FieldType",
    "Int64",
    "InvalidPathError",
    "KvConfError",
    "LoaderSettings",
    "MissingKeyError",
    "Text",
    "TypeConversionError",
    "UInt64",
    "UnsupportedTypeError",
    "get_config",
    "populate_config_struct",
    "read_config_with_required_keys",
    "read_raw_config",
]
