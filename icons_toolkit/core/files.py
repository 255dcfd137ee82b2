"""Atomic file writes and JSON helpers shared by every stage."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Union

PathLike = Union[str, Path]


def write_atomic(path: PathLike, data: str, mode: int = 0o600) -> None:
    """Write text to ``path`` through a temp file in the same directory + rename.

    A crash mid-write leaves either the old file or the new one, never a
    truncated file.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def dump_json(data: Any, readable: bool = True) -> str:
    """Serialize like the published artifacts: compact, or 2-space + trailing newline."""
    if readable:
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def write_json(path: PathLike, data: Any, readable: bool = True) -> None:
    write_atomic(path, dump_json(data, readable=readable))


def read_json(path: PathLike) -> Any:
    with Path(path).open("r", encoding="utf-8") as f:
        return json.load(f)
