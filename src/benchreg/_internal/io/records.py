"""Load raw report rows from JSON or CSV files (CLI only).

Values are returned exactly as the format deserializes them: JSON keeps its
numbers, CSV yields strings only. Typing is left to the validator.
"""

import csv
import io
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


SUPPORTED_FORMATS = ("json", "csv")


def detect_format(path: Path) -> str:
    """Guess the format from the file suffix (defaults to json)."""
    return "csv" if path.suffix.lower() == ".csv" else "json"


def parse_json_rows(text: str) -> List[Dict[str, Any]]:
    """Parse a JSON array of objects, a {"rows": [...]} object or a single object."""
    payload = json.loads(text)
    if isinstance(payload, dict):
        rows = payload["rows"] if isinstance(payload.get("rows"), list) else [payload]
    elif isinstance(payload, list):
        rows = payload
    else:
        raise ValueError(f"Expected a JSON object or array, got {type(payload).__name__}")

    for index, row in enumerate(rows):
        if not isinstance(row, dict):
            raise ValueError(f"Row {index} is not a JSON object (got {type(row).__name__})")
    return rows


def parse_csv_rows(text: str) -> List[Dict[str, Any]]:
    """Parse CSV with a header row. Empty cells are treated as absent.

    Quoted cells may span lines.
    """
    reader = csv.DictReader(io.StringIO(text, newline=""))
    rows = []
    for row in reader:
        rows.append({k: v for k, v in row.items() if k is not None and v not in (None, "")})
    return rows


def load_rows(path: Union[str, Path], fmt: Optional[str] = None) -> List[Dict[str, Any]]:
    """Read and parse rows from path.

    Raises:
        OSError: If path cannot be read (missing, a directory, no permission)
        ValueError: If the content cannot be parsed as rows
    """
    path = Path(path)
    fmt = fmt or detect_format(path)
    if fmt not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported format '{fmt}' (expected one of {SUPPORTED_FORMATS})")
    text = path.read_text(encoding="utf-8-sig")  # tolerate a leading BOM
    if fmt == "csv":
        return parse_csv_rows(text)
    return parse_json_rows(text)
