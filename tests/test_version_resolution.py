"""Tests for latest-version resolution."""

from benchreg.kernel.registry import SchemaRegistry
from benchreg.kernel.record_spec import string_record
from benchreg.kernel.versions import VersionResolver, latest_version


def test_latest_is_first_ordered():
    assert latest_version(["release-1.0", "release-0.21"]) == "release-1.0"


def test_latest_of_empty_is_none():
    assert latest_version([]) is None
    assert VersionResolver(ordered=()).latest() is None


def test_latest_skips_unavailable():
    ordered = ["release-2.0", "release-1.0", "release-0.21"]
    assert latest_version(ordered, {"release-0.21", "release-1.0"}) == "release-1.0"


def test_latest_none_when_nothing_available():
    assert latest_version(["release-2.0"], {"main"}) is None
    assert latest_version(["release-2.0"], []) is None


def test_resolver_for_registry():
    registry = SchemaRegistry()
    registry.register("bench", "main", string_record(["a"]))
    registry.register("bench", "release-0.21", string_record(["a"]))
    resolver = VersionResolver.for_registry(registry, "bench", ["release-1.0", "release-0.21", "main"])
    assert resolver.available == frozenset({"main", "release-0.21"})
    assert resolver.latest() == "release-0.21"


def test_resolver_is_pure():
    """Test that resolving twice gives the same answer and keeps inputs intact."""
    ordered = ["b", "a"]
    resolver = VersionResolver(ordered=tuple(ordered), available=frozenset({"a"}))
    assert resolver.latest() == resolver.latest() == "a"
    assert ordered == ["b", "a"]
