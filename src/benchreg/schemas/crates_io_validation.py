"""crates.io validation status rows (single, unversioned schema)."""

from typing import Dict

from benchreg.kernel.registry import SINGLE_VERSION_KEY
from benchreg.kernel.record_spec import STRING, RecordSpec, enum_of, field_spec, optional, record


REGISTRY_NAME = "crates-io-validation"

STATUS_VALUES = ("Success", "BuildFail", "RunFail", "Skipped")

SCHEMAS: Dict[str, RecordSpec] = {
    SINGLE_VERSION_KEY: record(
        field_spec("name", STRING),
        field_spec("version", STRING),
        field_spec("status", enum_of(*STATUS_VALUES)),
        field_spec("custom_profile", STRING),
        field_spec("build_errors", optional(STRING)),
        description="Build/run status of crates.io crates inside the guest",
    ),
}
