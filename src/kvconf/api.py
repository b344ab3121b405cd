"""Public entry points composing the line parser and the field populator."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from kvconf.core.config import LoaderSettings
from kvconf.core.exceptions import MissingKeyError
from kvconf.core.types import ConfigPath, RawConfig
from kvconf.parser import parse_file
from kvconf.populate import populate


def read_raw_config(path: ConfigPath, settings: LoaderSettings | None = None) -> RawConfig:
    """Read a config file into a key -> value mapping without any type conversion."""
    return parse_file(path, settings)


def read_config_with_required_keys(
    path: ConfigPath, required_keys: Sequence[str], settings: LoaderSettings | None = None
) -> RawConfig:
    """Read a config file and verify each of ``required_keys`` is present.

    Raises:
        MissingKeyError: Naming the first required key that is absent.
    """
    config = parse_file(path, settings)
    for key in required_keys:
        if key not in config:
            raise MissingKeyError(key)
    return config


def populate_config_struct(path: ConfigPath, target: Any, settings: LoaderSettings | None = None) -> None:
    """Read a config file and populate every field of ``target`` from it."""
    if settings is None:
        settings = LoaderSettings()
    populate(target, parse_file(path, settings), settings)


def _is_key_list(value: Any) -> bool:
    return (
        isinstance(value, Sequence)
        and not isinstance(value, str)
        and all(isinstance(item, str) for item in value)
    )


def get_config(path: ConfigPath, target_or_keys: Any, settings: LoaderSettings | None = None) -> RawConfig | None:
    """Dispatch on the second argument.

    A sequence of key names returns the verified RawConfig; any other value is
    treated as a target record, populated in place, and ``None`` is returned.
    """
    if _is_key_list(target_or_keys):
        return read_config_with_required_keys(path, target_or_keys, settings)
    populate_config_struct(path, target_or_keys, settings)
    return None
