"""Public API for benchreg.

High-level functions over the built-in (or a caller-supplied) registry.
Rendering code should use these instead of reaching into benchreg.kernel.
"""

from functools import lru_cache
from typing import FrozenSet, Iterable, Mapping, Optional, Sequence

from benchreg.kernel.record_spec import RecordSpec
from benchreg.kernel.registry import SchemaRegistry
from benchreg.kernel.table import TableReport, validate_table
from benchreg.kernel.validator import UnknownFieldsMode, ValidationOutcome, validate_record
from benchreg.kernel.versions import latest_version as _latest_version
from benchreg.schemas import build_default_registry


@lru_cache(maxsize=None)
def default_registry() -> SchemaRegistry:
    """Get the frozen registry of built-in schemas (built once per process)."""
    return build_default_registry()


def _resolve(registry: Optional[SchemaRegistry]) -> SchemaRegistry:
    return registry if registry is not None else default_registry()


def lookup(registry_name: str, version_key: str, registry: Optional[SchemaRegistry] = None) -> RecordSpec:
    """Get the RecordSpec for (registry_name, version_key).

    Raises:
        UnknownVersionError: If the pair is not registered
    """
    return _resolve(registry).lookup(registry_name, version_key)


def list_versions(registry_name: str, registry: Optional[SchemaRegistry] = None) -> FrozenSet[str]:
    """Get the version keys registered for registry_name."""
    return _resolve(registry).list_versions(registry_name)


def validate(
    registry_name: str,
    version_key: str,
    raw: Mapping,
    registry: Optional[SchemaRegistry] = None,
    unknown_fields: UnknownFieldsMode = "ignore",
) -> ValidationOutcome:
    """Validate one raw record against the schema of (registry_name, version_key).

    Bad record content never raises; it is returned as a ValidationFailure.

    Raises:
        UnknownVersionError: If the pair is not registered
    """
    spec = lookup(registry_name, version_key, registry)
    return validate_record(spec, raw, unknown_fields)


def validate_rows(
    registry_name: str,
    version_key: str,
    rows: Iterable[Mapping],
    registry: Optional[SchemaRegistry] = None,
    unknown_fields: UnknownFieldsMode = "ignore",
) -> TableReport:
    """Validate every row of a table; bad rows are collected, not fatal.

    Raises:
        UnknownVersionError: If the pair is not registered
    """
    spec = lookup(registry_name, version_key, registry)
    return validate_table(spec, rows, unknown_fields)


def latest_version(
    registry_name: str,
    ordered: Sequence[str],
    registry: Optional[SchemaRegistry] = None,
) -> Optional[str]:
    """Get the newest version of ordered that registry_name actually has."""
    return _latest_version(ordered, list_versions(registry_name, registry))
