"""Record validation against a RecordSpec.

Rules, applied to every declared field in declaration order:

1. Required and absent -> MISSING_FIELD
2. Present -> value must already have the declared type. No coercion:
   "120" is not a number, True is not a number.
3. Enum -> value must be a string and an exact member of the allowed set,
   otherwise INVALID_ENUM_VALUE naming the allowed set
4. Optional and absent -> fine; present -> checked as the inner type.
   None counts as present.
5. Undeclared keys are ignored and dropped (unknown_fields="ignore"), or
   each one is reported as UNKNOWN_FIELD (unknown_fields="reject").

Every issue is collected before returning; a record is never rejected on
its first problem alone.
"""

import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from benchreg.codes import ValidationCode
from .record_spec import EnumType, OptionalType, PrimitiveType, RecordSpec


UnknownFieldsMode = Literal["ignore", "reject"]
UNKNOWN_FIELDS_MODES = ("ignore", "reject")


class ValidationIssue(BaseModel):
    """A single violated field."""
    field: str
    code: ValidationCode
    message: str
    expected: Optional[str] = None  # Declared type, e.g. "number"
    actual: Optional[str] = None  # Observed value type, e.g. "string"
    allowed: Optional[Tuple[str, ...]] = None  # For INVALID_ENUM_VALUE


class ValidatedRecord(BaseModel):
    """A record whose declared fields all passed validation.

    values holds exactly the declared fields present in the input, in
    declaration order. It is a read-only view; use as_dict() for a copy.
    """
    registry_name: Optional[str] = None
    version_key: Optional[str] = None
    values: Mapping[str, Any]

    model_config = ConfigDict(frozen=True)

    @field_validator("values", mode="after")
    @classmethod
    def freeze_values(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(v))

    @field_serializer("values")
    def serialize_values(self, v: Mapping[str, Any]) -> Dict[str, Any]:
        return dict(v)

    def __getitem__(self, name: str) -> Any:
        return self.values[name]

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)

    def as_dict(self) -> Dict[str, Any]:
        return dict(self.values)


class ValidationFailure(BaseModel):
    """All issues found in one record, in declaration order."""
    registry_name: Optional[str] = None
    version_key: Optional[str] = None
    issues: List[ValidationIssue] = Field(default_factory=list)

    @property
    def fields(self) -> List[str]:
        return [issue.field for issue in self.issues]

    def issues_for(self, field: str) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.field == field]

    def summary(self) -> str:
        return "; ".join(f"{issue.field}: {issue.message}" for issue in self.issues)


class ValidationOutcome(BaseModel):
    """Either a ValidatedRecord or a ValidationFailure, never both."""
    record: Optional[ValidatedRecord] = None
    failure: Optional[ValidationFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def describe_value_type(value: Any) -> str:
    """Name a raw value's type in the vocabulary of the schemas."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return type(value).__name__


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a number here; NaN is not a number either
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def _check_value(name: str, field_type, value: Any) -> Optional[ValidationIssue]:
    """Check one present value. Returns None when it passes."""
    if isinstance(field_type, OptionalType):
        return _check_value(name, field_type.inner, value)

    if isinstance(field_type, EnumType):
        if not isinstance(value, str):
            return ValidationIssue(
                field=name,
                code=ValidationCode.TYPE_MISMATCH,
                message=f"expected string enum value, got {describe_value_type(value)}",
                expected=field_type.describe(),
                actual=describe_value_type(value),
            )
        if value not in field_type.allowed:
            return ValidationIssue(
                field=name,
                code=ValidationCode.INVALID_ENUM_VALUE,
                message=f"'{value}' is not one of {list(field_type.allowed)}",
                expected=field_type.describe(),
                actual=describe_value_type(value),
                allowed=field_type.allowed,
            )
        return None

    if isinstance(field_type, PrimitiveType):
        if field_type.primitive == "string":
            matches = isinstance(value, str)
        else:
            matches = _is_number(value)
        if not matches:
            return ValidationIssue(
                field=name,
                code=ValidationCode.TYPE_MISMATCH,
                message=f"expected {field_type.primitive}, got {describe_value_type(value)}",
                expected=field_type.primitive,
                actual=describe_value_type(value),
            )
        return None

    raise TypeError(f"Unsupported field type for '{name}': {type(field_type).__name__}")


def collect_issues(
    spec: RecordSpec,
    raw: Mapping,
    unknown_fields: UnknownFieldsMode = "ignore",
) -> List[ValidationIssue]:
    """Return every issue of raw against spec (empty list when valid)."""
    if unknown_fields not in UNKNOWN_FIELDS_MODES:
        raise ValueError(f"unknown_fields must be one of {UNKNOWN_FIELDS_MODES}, got '{unknown_fields}'")
    if not isinstance(raw, Mapping):
        raise TypeError(f"Raw record must be a mapping, got {type(raw).__name__}")

    issues: List[ValidationIssue] = []
    for field in spec.field_specs:
        if field.name not in raw:
            if field.required:
                issues.append(ValidationIssue(
                    field=field.name,
                    code=ValidationCode.MISSING_FIELD,
                    message="required field is missing",
                    expected=field.type.describe(),
                ))
            continue
        issue = _check_value(field.name, field.type, raw[field.name])
        if issue is not None:
            issues.append(issue)

    if unknown_fields == "reject":
        declared = set(spec.field_names)
        for key in sorted((k for k in raw.keys() if k not in declared), key=str):
            issues.append(ValidationIssue(
                field=str(key),
                code=ValidationCode.UNKNOWN_FIELD,
                message="field is not declared for this version",
                actual=describe_value_type(raw[key]),
            ))
    return issues


def validate_record(
    spec: RecordSpec,
    raw: Mapping,
    unknown_fields: UnknownFieldsMode = "ignore",
) -> ValidationOutcome:
    """Validate one raw record against spec.

    Args:
        spec: Declared record shape
        raw: Field name -> already-deserialized value
        unknown_fields: "ignore" drops undeclared keys, "reject" reports them

    Returns:
        ValidationOutcome with either the typed record or the full failure

    Raises:
        TypeError: If raw is not a mapping
        ValueError: If unknown_fields is not a supported mode
    """
    issues = collect_issues(spec, raw, unknown_fields)
    if issues:
        return ValidationOutcome(failure=ValidationFailure(
            registry_name=spec.registry_name,
            version_key=spec.version_key,
            issues=issues,
        ))
    values = {name: raw[name] for name in spec.field_names if name in raw}
    return ValidationOutcome(record=ValidatedRecord(
        registry_name=spec.registry_name,
        version_key=spec.version_key,
        values=values,
    ))
