"""
Dashboard file helpers.

Async UTF-8 JSON file access and resolution of command line file arguments.
OSError and json.JSONDecodeError propagate to the caller unchanged.
"""

import json
from pathlib import Path
from typing import Any

import aiofiles

DASHBOARD_SUFFIXES = (".js", ".json")


async def read_json_file(path: str | Path) -> Any:
    """Read and parse a UTF-8 JSON file."""
    async with aiofiles.open(path, "r", encoding="utf-8") as f:
        text = await f.read()
    return json.loads(text)


async def write_json_file(path: str | Path, data: Any) -> None:
    """Write data as 2-space indented UTF-8 JSON, replacing any existing file."""
    text = json.dumps(data, indent=2, ensure_ascii=False)
    async with aiofiles.open(path, "w", encoding="utf-8") as f:
        await f.write(text)


def resolve_dashboard_path(file: str | Path, cwd: Path | None = None) -> Path:
    """
    Resolve a dashboard file argument.

    Relative paths are taken against the working directory, and `.json`
    is appended unless the name already ends in `.js` or `.json`.
    """
    path = Path(file)
    if not path.is_absolute():
        path = (cwd or Path.cwd()) / path
    if not str(path).endswith(DASHBOARD_SUFFIXES):
        path = path.with_name(path.name + ".json")
    return path
