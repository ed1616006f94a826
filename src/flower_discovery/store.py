"""Key/blob persistence with atomic writes.

``PersistentStore`` is the narrow interface the collection depends on:
``get(key) -> bytes | None``, ``set(key, data)`` and ``delete(key)``. Two
implementations:

  - ``FileStore``:   one file per key under a base directory. Writes go to a
                     temp file in the same directory and are moved into place
                     with ``os.replace``, so readers never see a half-written
                     snapshot.
  - ``MemoryStore``: dict-backed, for tests and embedding.

``FileStore`` also offers JSON helpers that wrap the payload in a metadata
envelope with an optional ``valid_until`` so jobs (e.g. auto-backup) can
check whether their last result is still fresh.
"""

from __future__ import annotations

import json
import os
import re
import tempfile
import threading
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Protocol

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._/-]*$")


def write_atomic(path: Path, data: bytes) -> None:
    """Replace ``path`` with ``data`` via a temp file in the same directory.

    No key checks: callers pass a concrete path (e.g. a user-chosen gift file).
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


class PersistentStore(Protocol):
    def get(self, key: str) -> bytes | None: ...

    def set(self, key: str, data: bytes) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStore:
    """In-memory PersistentStore."""

    def __init__(self) -> None:
        self._data: dict[str, bytes] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> bytes | None:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, data: bytes) -> None:
        with self._lock:
            self._data[key] = bytes(data)

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def keys(self) -> list[str]:
        with self._lock:
            return sorted(self._data)


class FileStore:
    """Stores each key as a file under ``base_dir``."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir

    def get(self, key: str) -> bytes | None:
        full = self._resolve(key)
        if not full.exists():
            return None
        return full.read_bytes()

    def set(self, key: str, data: bytes) -> None:
        """Atomically replace the value stored under ``key``."""
        write_atomic(self._resolve(key), data)

    def delete(self, key: str) -> None:
        """Remove ``key``; missing keys are ignored."""
        self._resolve(key).unlink(missing_ok=True)

    def read_json(self, key: str) -> Any | None:
        """Read the ``data`` payload of a metadata-enveloped JSON value."""
        envelope = self.read_raw(key)
        if envelope is None:
            return None
        return envelope.get("data", envelope)

    def read_raw(self, key: str) -> dict[str, Any] | None:
        """Read the full envelope (meta + data)."""
        raw = self.get(key)
        if raw is None:
            return None
        result: dict[str, Any] = json.loads(raw)
        return result

    def write_json(
        self,
        key: str,
        data: Any,
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Write ``data`` wrapped in a metadata envelope.

        Args:
            key: Relative key (e.g. ``derived/widget.json``).
            data: Payload to store under the ``data`` key.
            source: Producer identifier (e.g. ``"collection"``).
            valid_until: Expiry timestamp. None means never fresh.
            **params: Extra metadata fields.

        Returns:
            Absolute path of the written file.
        """
        meta: dict[str, Any] = {
            "source": source,
            "written_at": datetime.now(UTC).isoformat(),
        }
        if valid_until is not None:
            meta["valid_until"] = valid_until.isoformat()
        if params:
            meta.update(params)

        self.set(key, json.dumps({"meta": meta, "data": data}, indent=2).encode())
        return self._resolve(key)

    def is_fresh(self, key: str) -> bool:
        """True if the envelope exists and its ``valid_until`` is in the future."""
        envelope = self.read_raw(key)
        if envelope is None:
            return False
        valid_until = envelope.get("meta", {}).get("valid_until")
        if valid_until is None:
            return False

        expiry = datetime.fromisoformat(valid_until)
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=UTC)
        return datetime.now(UTC) < expiry

    def _resolve(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            msg = f"Invalid store key: {key!r}"
            raise ValueError(msg)
        full = self.base / key
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Key escapes store base directory: {key}"
            raise ValueError(msg) from None
        return full
