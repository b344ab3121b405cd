"""Field populator: converts RawConfig entries into a target record's typed fields.

A target is either an explicit sequence of ``FieldDescriptor`` or a record whose
fields can be enumerated: a pydantic model instance or a dataclass instance.
Field names match config keys exactly (case-sensitive) and every field is
required.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from functools import partial
from typing import Annotated, Any, get_args, get_origin, get_type_hints

from pydantic import BaseModel, ValidationError

from kvconf.core.config import LoaderSettings
from kvconf.core.exceptions import MissingKeyError, TypeConversionError, UnsupportedTypeError
from kvconf.core.types import RawConfig
from kvconf.models.fields import FieldDescriptor, FieldType

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"[0-9]+")


def parse_signed(value: str) -> int:
    """Parse base-10 text as a signed 64-bit integer."""
    if not _SIGNED_RE.fullmatch(value):
        raise ValueError("invalid syntax")
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        raise ValueError("value out of range")
    return number


def parse_unsigned(value: str) -> int:
    """Parse base-10 text as an unsigned 64-bit integer. Signs are rejected."""
    if not _UNSIGNED_RE.fullmatch(value):
        raise ValueError("invalid syntax")
    number = int(value)
    if number > UINT64_MAX:
        raise ValueError("value out of range")
    return number


_CONVERTERS = {
    FieldType.SIGNED: parse_signed,
    FieldType.UNSIGNED: parse_unsigned,
}


def type_tag(hint: Any) -> FieldType | str:
    """Map a field annotation to its FieldType, or to a descriptive tag if unsupported."""
    if get_origin(hint) is Annotated:
        base, *metadata = get_args(hint)
        for item in metadata:
            if isinstance(item, FieldType):
                return item
        hint = base
    if hint is int:
        return FieldType.SIGNED
    if hint is str:
        return FieldType.TEXT
    return hint.__name__ if isinstance(hint, type) else repr(hint)


def describe_fields(target: Any) -> list[FieldDescriptor]:
    """Return the ordered field descriptors for ``target``.

    Raises:
        TypeError: If the fields of ``target`` cannot be enumerated.
    """
    if isinstance(target, (list, tuple)):
        if not all(isinstance(item, FieldDescriptor) for item in target):
            raise TypeError("Descriptor sequences may only contain FieldDescriptor items")
        return list(target)

    if isinstance(target, BaseModel):
        # pydantic moves Annotated metadata out of the annotation
        hints = {
            name: Annotated[(info.annotation, *info.metadata)] if info.metadata else info.annotation
            for name, info in type(target).model_fields.items()
        }
    elif dataclasses.is_dataclass(target) and not isinstance(target, type):
        resolved = get_type_hints(type(target), include_extras=True)
        hints = {f.name: resolved[f.name] for f in dataclasses.fields(target)}
    else:
        raise TypeError(f"Cannot enumerate fields of {type(target).__name__}")

    return [
        FieldDescriptor(name=name, field_type=type_tag(hint), setter=partial(setattr, target, name))
        for name, hint in hints.items()
    ]


def convert_field(descriptor: FieldDescriptor, value: str) -> Any:
    """Convert one raw value according to the descriptor's type tag."""
    try:
        kind = FieldType(descriptor.field_type)
    except ValueError:
        raise UnsupportedTypeError(descriptor.name, str(descriptor.field_type)) from None

    if kind is FieldType.TEXT:
        return value
    try:
        return _CONVERTERS[kind](value)
    except ValueError as exc:
        raise TypeConversionError(descriptor.name, kind.value, value, str(exc)) from exc


def populate(target: Any, raw: RawConfig, settings: LoaderSettings | None = None) -> None:
    """Assign every declared field of ``target`` from ``raw``.

    Fields are processed in declaration order and the first failure is raised.
    With ``settings.atomic`` (the default) nothing is assigned unless every
    field converts; otherwise fields before the failing one keep their new
    values.

    Raises:
        MissingKeyError: A field has no entry in ``raw``.
        TypeConversionError: A numeric value does not parse or is out of range, or
            the target rejects the converted value.
        UnsupportedTypeError: A field's type is not signed, unsigned or text.
    """
    if settings is None:
        settings = LoaderSettings()

    descriptors = describe_fields(target)
    staged: list[tuple[FieldDescriptor, Any]] = []
    for descriptor in descriptors:
        if descriptor.name not in raw:
            raise MissingKeyError(descriptor.name)
        value = convert_field(descriptor, raw[descriptor.name])
        if settings.atomic:
            staged.append((descriptor, value))
        else:
            _assign(descriptor, value, raw)

    if staged and isinstance(target, BaseModel):
        staged = _validate_staged(target, staged, raw)
    for descriptor, value in staged:
        _assign(descriptor, value, raw)
    logger.debug("Populated %d fields", len(descriptors))


def _assign(descriptor: FieldDescriptor, value: Any, raw: RawConfig) -> None:
    try:
        descriptor.setter(value)
    except (ValueError, TypeError) as exc:
        raise TypeConversionError(
            descriptor.name, str(descriptor.field_type), raw[descriptor.name], str(exc)
        ) from exc


def _validate_staged(
    target: BaseModel, staged: list[tuple[FieldDescriptor, Any]], raw: RawConfig
) -> list[tuple[FieldDescriptor, Any]]:
    """Run the model's own validation over the staged values before any is assigned."""
    values = {descriptor.name: value for descriptor, value in staged}
    try:
        validated = type(target).model_validate({**target.model_dump(), **values})
    except ValidationError as exc:
        loc = exc.errors()[0]["loc"]
        by_name = {descriptor.name: descriptor for descriptor, _ in staged}
        failed = by_name.get(loc[0] if loc else None, staged[0][0])
        raise TypeConversionError(failed.name, str(failed.field_type), raw[failed.name], str(exc)) from exc
    return [(descriptor, getattr(validated, descriptor.name)) for descriptor, _ in staged]
