"""kvconf exception hierarchy."""

from __future__ import annotations


class KvConfError(Exception):
    """Base exception for all kvconf errors."""


class InvalidPathError(KvConfError):
    """An empty or blank config path was supplied."""

    def __init__(self, path: object = "") -> None:
        self.path = path
        super().__init__("invalid path")


class ConfigIOError(KvConfError):
    """The config file could not be opened or read."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"Failed to read config {path!r}: {message}")


class MissingKeyError(KvConfError):
    """A required key or declared field has no entry in the config."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"missing key in config [{key}]")


class TypeConversionError(KvConfError):
    """A raw value could not be converted to its field's declared type."""

    def __init__(self, field: str, field_type: str, value: str, message: str) -> None:
        self.field = field
        self.field_type = field_type
        self.value = value
        super().__init__(f"Field {field} ({field_type}): cannot convert {value!r}: {message}")


class UnsupportedTypeError(KvConfError):
    """A declared field's type is outside signed/unsigned/text."""

    def __init__(self, field: str, field_type: str) -> None:
        self.field = field
        self.field_type = field_type
        super().__init__(f"Field {field} has unsupported type {field_type}")
