"""Field descriptor models used to populate target records."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated

from pydantic import BaseModel

from kvconf.core.types import Setter


class FieldType(StrEnum):
    SIGNED = "signed"
    UNSIGNED = "unsigned"
    TEXT = "text"


# Annotations that pin a record field to a specific kind.
Int64 = Annotated[int, FieldType.SIGNED]
UInt64 = Annotated[int, FieldType.UNSIGNED]
Text = Annotated[str, FieldType.TEXT]


class FieldDescriptor(BaseModel):
    """One target field: its config key, its type tag, and how to assign it.

    ``field_type`` is normally a ``FieldType``; any other tag is accepted here
    and reported as unsupported when the field is populated.
    """

    name: str
    field_type: FieldType | str
    setter: Setter
