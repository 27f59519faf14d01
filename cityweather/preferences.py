"""Persistence of the last successfully fetched location.

A single JSON object on disk stands in for the key-value preference store of
the mobile app; only the ``lastLocation`` key is used.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union


logger = logging.getLogger(__name__)

LAST_LOCATION_KEY = "lastLocation"


class LocationPreferences:
    """Load and save the last location under ``LAST_LOCATION_KEY``."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self, default: str) -> str:
        value = self._read().get(LAST_LOCATION_KEY)
        if isinstance(value, str) and value:
            return value
        return default

    def save(self, location: str) -> None:
        data = self._read()
        data[LAST_LOCATION_KEY] = location
        self._write(data)

    def clear(self) -> None:
        data = self._read()
        if data.pop(LAST_LOCATION_KEY, None) is not None:
            self._write(data)

    def _write(self, data: Dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(data), encoding="utf-8")
        os.replace(tmp_path, self.path)

    def _read(self) -> Dict[str, object]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        try:
            data: Optional[object] = json.loads(raw)
        except ValueError:
            logger.warning("Ignoring unreadable preferences file %s", self.path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring preferences file %s: not a JSON object", self.path)
            return {}
        return data


__all__ = ["LocationPreferences", "LAST_LOCATION_KEY"]
