"""Datasheet table rows (single, unversioned schema)."""

from typing import Dict

from benchreg.kernel.registry import SINGLE_VERSION_KEY
from benchreg.kernel.record_spec import NUMBER, STRING, RecordSpec, field_spec, record


REGISTRY_NAME = "datasheet"

SCHEMAS: Dict[str, RecordSpec] = {
    SINGLE_VERSION_KEY: record(
        field_spec("cycles", NUMBER),
        field_spec("duration", NUMBER),
        field_spec("hashfn", STRING),
        field_spec("name", STRING),
        field_spec("ram", NUMBER),
        field_spec("seal", NUMBER),
        field_spec("throughput", NUMBER),
        field_spec("total_cycles", NUMBER),
        field_spec("user_cycles", NUMBER),
        description="Prover datasheet measurements",
    ),
}
