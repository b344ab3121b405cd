"""Tests for the kvconf exception hierarchy."""

from __future__ import annotations

import pytest

from kvconf.core.exceptions import (
    ConfigIOError,
    InvalidPathError,
    KvConfError,
    MissingKeyError,
    TypeConversionError,
    UnsupportedTypeError,
)


@pytest.mark.parametrize("exc", [
    InvalidPathError(""),
    ConfigIOError("a.conf", "boom"),
    MissingKeyError("k"),
    TypeConversionError("f", "signed", "x", "invalid syntax"),
    UnsupportedTypeError("f", "float"),
])
def test_all_errors_derive_from_base(exc):
    assert isinstance(exc, KvConfError)


def test_messages_name_the_offender():
    assert str(InvalidPathError("")) == "invalid path"
    assert str(MissingKeyError("port")) == "missing key in config [port]"
    assert "Count" in str(TypeConversionError("Count", "unsigned", "abc", "invalid syntax"))
    assert "float" in str(UnsupportedTypeError("Ratio", "float"))
