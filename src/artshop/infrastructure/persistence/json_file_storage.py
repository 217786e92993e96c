"""JSON-file-backed implementation of KeyValueStorage.

The desktop counterpart of the browser's localStorage: one JSON object
mapping keys to string values.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from artshop.domain.repository.key_value_storage import KeyValueStorage

logger = logging.getLogger(__name__)


class JsonFileStorage(KeyValueStorage):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- KeyValueStorage interface --------------------------------------------

    def get(self, key: str) -> str | None:
        value = self._load_raw().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        records = self._load_raw()
        records[key] = value
        self._persist_raw(records)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, str]:
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning("Storage file %s is not valid UTF-8 JSON, ignoring it: %s", self._file_path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s does not hold a JSON object, ignoring it", self._file_path)
            return {}
        return data

    def _persist_raw(self, records: dict[str, str]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
