"""Applications benchmark table rows, one schema per release."""

from typing import Dict

from benchreg.kernel.record_spec import RecordSpec, string_record


REGISTRY_NAME = "applications-benchmarks"


# main and release-1.0 currently share a shape but are declared separately:
# either may change without touching the other.
SCHEMAS: Dict[str, RecordSpec] = {
    "main": string_record(
        [
            "name",
            "size",
            "speed",
            "total_duration",
            "total_cycles",
            "user_cycles",
            "proof_bytes",
        ],
        description="Applications benchmarks on the main branch",
    ),
    "release-0.21": string_record(
        [
            "job_name",
            "job_size",
            "exec_duration",
            "proof_duration",
            "total_duration",
            "verify_duration",
            "insn_cycles",
            "prove_cycles",
            "proof_bytes",
        ],
        description="Applications benchmarks for release 0.21",
    ),
    "release-1.0": string_record(
        [
            "name",
            "size",
            "speed",
            "total_duration",
            "total_cycles",
            "user_cycles",
            "proof_bytes",
        ],
        description="Applications benchmarks for release 1.0",
    ),
}
