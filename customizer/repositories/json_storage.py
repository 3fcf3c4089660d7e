"""
JSON persistence for character documents.

Documents are small, so every access reads or rewrites the whole file. Writes
go through a temporary sibling file and os.replace, which keeps the previous
document intact if the process dies mid-write.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator
import json
import os
import tempfile
import threading

# One lock per document path touched by this process. Entries are never evicted;
# a desktop session only ever handles a handful of characters.
_locks: Dict[str, threading.Lock] = {}
_locks_guard = threading.Lock()


def load(path: Path) -> dict:
    """Parse a JSON object from path. Missing files raise FileNotFoundError."""
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a JSON object")
    return data


def dumps(doc: dict) -> str:
    # Compact form, the layout the game client writes and reads.
    return json.dumps(doc, ensure_ascii=False, separators=(",", ":"), allow_nan=False)


def _umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


_UMASK = _umask()


def _file_mode(path: Path) -> int:
    """Mode the document should keep: the current one, or the umask default for new files."""
    try:
        return path.stat().st_mode & 0o7777
    except FileNotFoundError:
        return 0o666 & ~_UMASK


def save(path: Path, doc: dict) -> None:
    payload = dumps(doc)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.stem}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        # mkstemp creates 0600 files
        os.chmod(tmp_name, _file_mode(path))
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


@contextmanager
def locked(path: Path) -> Iterator[None]:
    """Serialize read-modify-write cycles on one document within this process."""
    key = os.path.abspath(path)
    with _locks_guard:
        lock = _locks.setdefault(key, threading.Lock())
    with lock:
        yield
