"""
Fast JSON IO helpers built on orjson.
- read_json(Path)  -> Any | None (None when the file is missing)
- write_json(Path, data) -> writes bytes to a temp file, then swaps it in place

Notes:
- orjson reads/writes bytes, so files are opened in binary mode.
- write_json never leaves a half-written target: readers see the old file or the new one.
- The written file gets the usual umask-based mode (0644 with umask 022), not mkstemp's 0600.
"""
import os
import tempfile
from pathlib import Path
from typing import Any

import orjson as json


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def read_json(path: Path) -> Any:
    """Read a JSON file (None if it does not exist)."""
    if not path.exists():
        return None
    with path.open("rb") as f:
        return json.loads(f.read())


def write_json(path: Path, data: Any) -> None:
    """Write a JSON file atomically (parent directory created if missing)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(json.dumps(data, option=json.OPT_INDENT_2))
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_name, _default_file_mode())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
