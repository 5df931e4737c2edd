"""Schema registry: (registry_name, version_key) -> RecordSpec.

Several report kinds live side by side in one SchemaRegistry. Each kind has
its own independent version set. Entries are added once at startup and
looked up by exact key afterwards; an unknown version is always an error
and never falls back to a neighbouring version.
"""

import logging
from typing import Dict, FrozenSet, Iterator, List, Tuple

from pydantic import BaseModel, ConfigDict

from benchreg.errors import (
    DuplicateVersionError,
    RegistryFrozenError,
    UnknownRegistryError,
    UnknownVersionError,
)
from .record_spec import RecordSpec


logger = logging.getLogger(__name__)

# Version key used by report kinds that have no per-release split
SINGLE_VERSION_KEY = "current"


class RegistryEntry(BaseModel):
    """One registered (version_key, RecordSpec) pair of a named registry."""
    registry_name: str
    version_key: str
    spec: RecordSpec

    model_config = ConfigDict(frozen=True)


class SchemaRegistry:
    """Holds the RecordSpecs of every report kind, keyed by version.

    Populate with register(), then call freeze(). Reads after freezing
    need no locking since nothing mutates the underlying mappings.
    """

    def __init__(self):
        self._registries: Dict[str, Dict[str, RecordSpec]] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "SchemaRegistry":
        """Reject any further registration. Returns self for chaining."""
        self._frozen = True
        return self

    def register(self, registry_name: str, version_key: str, spec: RecordSpec) -> RecordSpec:
        """Add a spec under (registry_name, version_key).

        The stored spec always carries the registration key as its identity,
        so registering one declaration under two keys yields two separate
        entries.

        Returns:
            The stored (identified) RecordSpec

        Raises:
            RegistryFrozenError: If freeze() was already called
            DuplicateVersionError: If the pair is already registered
            TypeError: If spec is not a RecordSpec
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register '{registry_name}' version '{version_key}': registry is frozen"
            )
        if not registry_name or not version_key:
            raise ValueError("registry_name and version_key must be non-empty strings")
        if not isinstance(spec, RecordSpec):
            raise TypeError(f"spec must be a RecordSpec, got {type(spec).__name__}")
        if version_key in self._registries.get(registry_name, {}):
            raise DuplicateVersionError(registry_name, version_key)

        stored = spec.identified(registry_name, version_key)
        self._registries.setdefault(registry_name, {})[version_key] = stored
        logger.debug(
            "Registered %s@%s (%d fields, %s)",
            registry_name, version_key, len(stored.field_specs), stored.fingerprint
        )
        return stored

    def lookup(self, registry_name: str, version_key: str) -> RecordSpec:
        """Get the spec registered for (registry_name, version_key).

        Raises:
            UnknownRegistryError: If registry_name was never registered
            UnknownVersionError: If the version key is absent
        """
        versions = self._get_versions(registry_name, version_key)
        try:
            return versions[version_key]
        except KeyError:
            raise UnknownVersionError(registry_name, version_key, versions.keys()) from None

    def list_versions(self, registry_name: str) -> FrozenSet[str]:
        """Get every version key registered for registry_name."""
        return frozenset(self._get_versions(registry_name))

    def list_registries(self) -> List[str]:
        """Get sorted registry names."""
        return sorted(self._registries)

    def entries(self) -> Iterator[RegistryEntry]:
        """Iterate over all entries, ordered by registry then version key."""
        for registry_name in sorted(self._registries):
            versions = self._registries[registry_name]
            for version_key in sorted(versions):
                yield RegistryEntry(
                    registry_name=registry_name,
                    version_key=version_key,
                    spec=versions[version_key],
                )

    def __contains__(self, key: Tuple[str, str]) -> bool:
        registry_name, version_key = key
        return version_key in self._registries.get(registry_name, {})

    def __len__(self) -> int:
        return sum(len(v) for v in self._registries.values())

    def _get_versions(self, registry_name: str, version_key: str = None) -> Dict[str, RecordSpec]:
        try:
            return self._registries[registry_name]
        except KeyError:
            raise UnknownRegistryError(registry_name, version_key, self._registries.keys()) from None
