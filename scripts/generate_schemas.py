"""Export a JSON Schema file for every built-in registry entry into schemas/."""

import json
import sys
from pathlib import Path

from benchreg.api import default_registry


def generate_schemas(schemas_dir: Path) -> list:
    """Write <registry>@<version>.schema.json files and return their paths."""
    schemas_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for entry in default_registry().entries():
        schema = entry.spec.to_json_schema()
        schema_path = schemas_dir / f"{entry.registry_name}@{entry.version_key}.schema.json"
        with open(schema_path, 'w', encoding='utf-8') as f:
            json.dump(schema, f, indent=2, ensure_ascii=False)
            f.write("\n")
        print(f"Generated: {schema_path}")
        written.append(schema_path)
    return written


if __name__ == "__main__":
    out_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__).parent.parent / "schemas"
    generate_schemas(out_dir)
    print("\nSchema generation complete!")
