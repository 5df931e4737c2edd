"""Exception types raised by benchreg.

Per-field validation problems are never raised; they are collected into a
ValidationFailure (see benchreg.kernel.validator). The exceptions here cover
registry misuse and bad configuration only.
"""


class BenchregError(Exception):
    """Base class for all benchreg errors."""
    pass


class DuplicateVersionError(BenchregError):
    """A (registry_name, version_key) pair was registered twice."""

    def __init__(self, registry_name: str, version_key: str):
        self.registry_name = registry_name
        self.version_key = version_key
        super().__init__(
            f"Schema for registry '{registry_name}' version '{version_key}' is already registered. "
            f"Schema definitions must be declared exactly once."
        )


class UnknownVersionError(BenchregError, LookupError):
    """No schema is registered for the requested version key."""

    def __init__(self, registry_name: str, version_key: str, known_versions=(), message: str = None):
        self.registry_name = registry_name
        self.version_key = version_key
        self.known_versions = tuple(sorted(known_versions))
        if message is None:
            known = ", ".join(self.known_versions) or "none"
            message = f"Unknown version '{version_key}' for registry '{registry_name}' (known versions: {known})"
        super().__init__(message)


class UnknownRegistryError(UnknownVersionError):
    """The registry name itself is not known."""

    def __init__(self, registry_name: str, version_key: str = None, known_registries=()):
        self.known_registries = tuple(sorted(known_registries))
        known = ", ".join(self.known_registries) or "none"
        super().__init__(
            registry_name,
            version_key,
            message=f"Unknown registry '{registry_name}' (known registries: {known})",
        )


class RegistryFrozenError(BenchregError):
    """A registration was attempted after the registry was frozen."""
    pass


class ConfigError(BenchregError, ValueError):
    """Environment configuration could not be parsed."""
    pass
