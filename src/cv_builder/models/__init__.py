"""Data models and type definitions"""

from cv_builder.models.fields import (
    FieldBuffer,
    FieldEntry,
    FieldKind,
    FieldSpec,
    InvalidSchemaError,
    validate_schema,
)
from cv_builder.models.record import Record, new_record_id

__all__ = [
    "FieldBuffer",
    "FieldEntry",
    "FieldKind",
    "FieldSpec",
    "InvalidSchemaError",
    "Record",
    "new_record_id",
    "validate_schema",
]
