"""JSON-file key-value store.

The whole store is one JSON object on disk. Reads go through an
in-memory copy loaded once; every ``put`` rewrites the file atomically
via a temporary file and ``os.replace`` so a crash never leaves a
half-written store behind.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from workout_store.exceptions import StoreReadError, StoreWriteError

logger = logging.getLogger(__name__)

_MISSING = object()


class JsonFileStore:
    """Persisted string-keyed store of JSON-serialisable values."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()
        self._data: dict[str, Any] | None = None

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value for *key*, or *default* if absent."""
        value = self._load().get(key, _MISSING)
        return default if value is _MISSING else value

    def __contains__(self, key: str) -> bool:
        return key in self._load()

    def _load(self) -> dict[str, Any]:
        if self._data is None:
            try:
                self._data = self._read_file()
            except StoreReadError as exc:
                logger.warning("Ignoring unreadable store at %s: %s", self.path, exc)
                self._data = {}
        return self._data

    def _read_file(self) -> dict[str, Any]:
        """Read and decode the store file. A missing file is an empty store."""
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise StoreReadError(f"Cannot read store: {exc}", self.path) from exc
        if not isinstance(data, dict):
            raise StoreReadError(
                f"Expected a JSON object, got {type(data).__name__}", self.path,
            )
        logger.info("Loaded store from %s (%d keys)", self.path, len(data))
        return data

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def put(self, key: str, value: Any) -> None:
        """Set *key* and write the store to disk.

        The in-memory copy is updated first, so it stays authoritative
        even when the write raises StoreWriteError.
        """
        self._load()[key] = value
        self._write_file()

    def clear(self) -> None:
        """Drop every key and write the empty store."""
        self._data = {}
        self._write_file()

    def _write_file(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=".store-", suffix=".json", dir=self.path.parent,
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(self._data, f, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except (OSError, TypeError, ValueError) as exc:
            raise StoreWriteError(f"Cannot write store: {exc}", self.path) from exc
        logger.debug("Wrote store to %s", self.path)
