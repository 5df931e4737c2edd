"""benchreg: versioned schema registry and validation for benchmark reports."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("benchreg")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from benchreg.api import default_registry, lookup, list_versions, validate, validate_rows
from benchreg.codes import ValidationCode
from benchreg.errors import (
    BenchregError,
    ConfigError,
    DuplicateVersionError,
    RegistryFrozenError,
    UnknownRegistryError,
    UnknownVersionError,
)
from benchreg.kernel.record_spec import RecordSpec
from benchreg.kernel.registry import SINGLE_VERSION_KEY, SchemaRegistry
from benchreg.kernel.table import TableReport
from benchreg.kernel.validator import ValidatedRecord, ValidationFailure, ValidationOutcome

__all__ = [
    "__version__",
    "default_registry",
    "lookup",
    "list_versions",
    "validate",
    "validate_rows",
    "ValidationCode",
    "BenchregError",
    "ConfigError",
    "DuplicateVersionError",
    "RegistryFrozenError",
    "UnknownRegistryError",
    "UnknownVersionError",
    "RecordSpec",
    "SINGLE_VERSION_KEY",
    "SchemaRegistry",
    "TableReport",
    "ValidatedRecord",
    "ValidationFailure",
    "ValidationOutcome",
]
