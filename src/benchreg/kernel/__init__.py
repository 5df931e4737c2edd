"""benchreg.kernel: record specs, the schema registry, validation."""

from .record_spec import (
    EnumType,
    FieldSpec,
    OptionalType,
    PrimitiveType,
    RecordSpec,
)
from .registry import RegistryEntry, SchemaRegistry
from .validator import (
    ValidatedRecord,
    ValidationFailure,
    ValidationIssue,
    ValidationOutcome,
    validate_record,
)
from .versions import VersionResolver, latest_version

__all__ = [
    "EnumType",
    "FieldSpec",
    "OptionalType",
    "PrimitiveType",
    "RecordSpec",
    "RegistryEntry",
    "SchemaRegistry",
    "ValidatedRecord",
    "ValidationFailure",
    "ValidationIssue",
    "ValidationOutcome",
    "validate_record",
    "VersionResolver",
    "latest_version",
]
