"""Pydantic models describing the accepted shape of one report version.

A RecordSpec is an ordered tuple of FieldSpecs. Each field carries a type
from a small closed set:

- PrimitiveType: "string" or "number"
- EnumType: a string restricted to an explicit allowed set
- OptionalType: wraps another type; the field may be absent

All models are frozen. A RecordSpec built at startup is shared by every
validation call and must never change afterwards.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from benchreg._internal.canonical_json import sha256_fingerprint


JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


class PrimitiveType(BaseModel):
    """A plain scalar type."""
    kind: Literal["primitive"] = "primitive"
    primitive: Literal["string", "number"]

    model_config = ConfigDict(frozen=True, extra="forbid")

    def describe(self) -> str:
        return self.primitive

    def json_schema(self) -> Dict[str, Any]:
        return {"type": self.primitive}


class EnumType(BaseModel):
    """A string restricted to a fixed set of values (exact, case-sensitive)."""
    kind: Literal["enum"] = "enum"
    allowed: Tuple[str, ...] = Field(..., description="Allowed values in declaration order")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator('allowed')
    @classmethod
    def validate_allowed(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Reject empty and duplicated allowed sets."""
        if not v:
            raise ValueError("Enum must allow at least one value")
        seen = set()
        duplicates = set()
        for value in v:
            if value in seen:
                duplicates.add(value)
            seen.add(value)
        if duplicates:
            raise ValueError(f"Duplicate enum values not allowed: {sorted(duplicates)}")
        return v

    def describe(self) -> str:
        return "enum{" + ",".join(self.allowed) + "}"

    def json_schema(self) -> Dict[str, Any]:
        return {"type": "string", "enum": list(self.allowed)}


class OptionalType(BaseModel):
    """The wrapped type, but the field may be left out of the record."""
    kind: Literal["optional"] = "optional"
    inner: "FieldType"

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator('inner')
    @classmethod
    def validate_inner(cls, v):
        if isinstance(v, OptionalType):
            raise ValueError("Optional fields cannot wrap another optional type")
        return v

    def describe(self) -> str:
        return f"optional {self.inner.describe()}"

    def json_schema(self) -> Dict[str, Any]:
        return self.inner.json_schema()


FieldType = Annotated[
    Union[PrimitiveType, EnumType, OptionalType],
    Field(discriminator="kind"),
]

OptionalType.model_rebuild()


class FieldSpec(BaseModel):
    """A named, typed field of a record."""
    name: str
    type: FieldType

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v:
            raise ValueError("Field name must be a non-empty string")
        return v

    @property
    def required(self) -> bool:
        return not isinstance(self.type, OptionalType)


class RecordSpec(BaseModel):
    """The declared shape of records for one (registry, version) pair.

    registry_name and version_key identify the spec once it is registered.
    Two specs may have the same shape (same fingerprint) yet remain
    separate entries; see same_shape().
    """
    field_specs: Tuple[FieldSpec, ...]
    registry_name: Optional[str] = None
    version_key: Optional[str] = None
    description: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator('field_specs')
    @classmethod
    def validate_unique_names(cls, v: Tuple[FieldSpec, ...]) -> Tuple[FieldSpec, ...]:
        """Field names must be unique within a record."""
        seen = set()
        duplicates = set()
        for spec in v:
            if spec.name in seen:
                duplicates.add(spec.name)
            seen.add(spec.name)
        if duplicates:
            raise ValueError(f"Duplicate field names not allowed: {sorted(duplicates)}")
        return v

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.field_specs)

    @property
    def required_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.field_specs if f.required)

    @property
    def fingerprint(self) -> str:
        """Hash of the field list only; identity fields do not contribute."""
        shape = [f.model_dump() for f in self.field_specs]
        return sha256_fingerprint(shape)

    def get_field(self, name: str) -> Optional[FieldSpec]:
        for f in self.field_specs:
            if f.name == name:
                return f
        return None

    def same_shape(self, other: "RecordSpec") -> bool:
        """True if both specs declare the same fields in the same order."""
        return self.field_specs == other.field_specs

    def identified(self, registry_name: str, version_key: str) -> "RecordSpec":
        """Return a copy carrying the given identity (self is unchanged)."""
        if self.registry_name == registry_name and self.version_key == version_key:
            return self
        return self.model_copy(update={"registry_name": registry_name, "version_key": version_key})

    def to_json_schema(self, allow_additional: bool = True) -> Dict[str, Any]:
        """Export the shape as a JSON Schema object for external tooling."""
        if self.registry_name and self.version_key:
            title = f"{self.registry_name}@{self.version_key}"
        else:
            title = "RecordSpec"
        schema: Dict[str, Any] = {
            "$schema": JSON_SCHEMA_DIALECT,
            "title": title,
            "type": "object",
            "properties": {f.name: f.type.json_schema() for f in self.field_specs},
            "required": list(self.required_names),
            "additionalProperties": allow_additional,
        }
        if self.description:
            schema["description"] = self.description
        return schema


# Declaration helpers used by benchreg.schemas

STRING = PrimitiveType(primitive="string")
NUMBER = PrimitiveType(primitive="number")


def enum_of(*allowed: str) -> EnumType:
    return EnumType(allowed=allowed)


def optional(inner: Union[PrimitiveType, EnumType]) -> OptionalType:
    return OptionalType(inner=inner)


def field_spec(name: str, type_: Union[PrimitiveType, EnumType, OptionalType]) -> FieldSpec:
    return FieldSpec(name=name, type=type_)


def record(*fields: FieldSpec, description: Optional[str] = None) -> RecordSpec:
    """Build an unidentified RecordSpec from fields in declaration order."""
    return RecordSpec(field_specs=fields, description=description)


def string_record(names: List[str], description: Optional[str] = None) -> RecordSpec:
    """Build a RecordSpec whose fields are all required strings."""
    return record(*(field_spec(name, STRING) for name in names), description=description)
