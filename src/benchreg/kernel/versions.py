"""Pick the latest version key from an externally supplied ordering.

The ordering (newest first) comes from the caller, e.g. the page that
redirects "/" to the latest report. Nothing here touches validation.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, Sequence, Tuple


def latest_version(ordered: Sequence[str], available: Optional[Iterable[str]] = None) -> Optional[str]:
    """Return the first version of ordered that is also available.

    Args:
        ordered: Known versions, newest first
        available: Versions that actually exist (e.g. a registry's
            list_versions()). None means every ordered version counts.

    Returns:
        The latest version key, or None if there is no candidate
    """
    if available is None:
        return ordered[0] if ordered else None
    available_set = frozenset(available)
    for version in ordered:
        if version in available_set:
            return version
    return None


@dataclass(frozen=True)
class VersionResolver:
    """Ordered version list plus an optional availability filter."""
    ordered: Tuple[str, ...]
    available: Optional[FrozenSet[str]] = None

    def latest(self) -> Optional[str]:
        return latest_version(self.ordered, self.available)

    @classmethod
    def for_registry(cls, registry, registry_name: str, ordered: Sequence[str]) -> "VersionResolver":
        """Restrict ordered to the versions registry holds for registry_name."""
        return cls(ordered=tuple(ordered), available=registry.list_versions(registry_name))
