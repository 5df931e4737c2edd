"""Pytest configuration for tests.

No sys.path hacks - tests import from the installed benchreg package.
"""

import pytest

from benchreg.kernel.record_spec import NUMBER, STRING, enum_of, field_spec, optional, record


def pytest_addoption(parser):
    """Add gated perf test option."""
    parser.addoption(
        "--run-perf",
        action="store_true",
        default=False,
        help="Run performance sentinel benchmarks (gated)."
    )


def pytest_collection_modifyitems(config, items):
    """Skip perf-marked tests unless --run-perf is set."""
    if config.getoption("--run-perf"):
        return
    skip_perf = pytest.mark.skip(reason="perf tests gated; pass --run-perf")
    for item in items:
        if "perf" in item.keywords:
            item.add_marker(skip_perf)


@pytest.fixture
def mixed_spec():
    """A spec exercising every field type."""
    return record(
        field_spec("name", STRING),
        field_spec("cycles", NUMBER),
        field_spec("status", enum_of("Success", "BuildFail")),
        field_spec("note", optional(STRING)),
    )


@pytest.fixture
def sha256_row():
    """A complete applications-benchmarks row for main / release-1.0."""
    return {
        "name": "sha256",
        "size": "1MB",
        "speed": "120",
        "total_duration": "1.2s",
        "total_cycles": "3000",
        "user_cycles": "2000",
        "proof_bytes": "512",
    }


@pytest.fixture
def datasheet_row():
    return {
        "cycles": 1048576,
        "duration": 3.5,
        "hashfn": "poseidon2",
        "name": "rv32im",
        "ram": 8589934592,
        "seal": 223744,
        "throughput": 299593.1,
        "total_cycles": 1048576,
        "user_cycles": 1000000,
    }


@pytest.fixture
def crate_row():
    return {
        "name": "serde",
        "version": "1.0.203",
        "status": "Success",
        "custom_profile": "default",
    }
