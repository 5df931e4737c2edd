"""Built-in report schemas.

Each module declares REGISTRY_NAME and a SCHEMAS mapping of
version_key -> RecordSpec. register_builtin_schemas() loads all of them.
"""

from benchreg.kernel.registry import SINGLE_VERSION_KEY, SchemaRegistry

from . import applications_benchmarks, crates_io_validation, datasheet


BUILTIN_MODULES = (
    applications_benchmarks,
    datasheet,
    crates_io_validation,
)


def register_builtin_schemas(registry: SchemaRegistry) -> SchemaRegistry:
    """Register every built-in schema into registry and return it."""
    for module in BUILTIN_MODULES:
        for version_key, spec in module.SCHEMAS.items():
            registry.register(module.REGISTRY_NAME, version_key, spec)
    return registry


def build_default_registry() -> SchemaRegistry:
    """Create a new frozen registry holding only the built-in schemas."""
    return register_builtin_schemas(SchemaRegistry()).freeze()


__all__ = [
    "SINGLE_VERSION_KEY",
    "register_builtin_schemas",
    "build_default_registry",
]
