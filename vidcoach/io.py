"""
vidcoach.io - Transcript and report file handling.

Transcripts arrive as speech-to-text JSON; reports leave as JSON written
through a temp file so an interrupted run never leaves a half-written report.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Any


def read_json(path: Path) -> Any:
    """Parse a UTF-8 JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file is not valid JSON
    """
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def write_json(path: Path, data: Any, indent: int = 2) -> None:
    """Write `data` as JSON, replacing `path` only once the dump succeeded.

    Args:
        path: Destination file; parent directories are created
        data: JSON-serializable value
        indent: Pretty-print indentation
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="w", encoding="utf-8", dir=path.parent, suffix=".tmp", delete=False
    ) as tmp:
        tmp_path = Path(tmp.name)
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=indent, ensure_ascii=False)
        tmp_path.replace(path)
    finally:
        tmp_path.unlink(missing_ok=True)


def write_reports(path: Path, reports: list[dict[str, Any]]) -> None:
    """Write analysis reports: a single object for one report, a list otherwise."""
    if not reports:
        raise ValueError("No reports to write")
    write_json(path, reports[0] if len(reports) == 1 else reports)
