"""Whole-document JSON persistence for one record collection.

The backing file holds a single pretty-printed JSON array. ``load`` is
forgiving: a missing or unreadable file is a cold start and yields an
empty list. ``save`` always rewrites the entire array.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class JsonFile:

    def __init__(self, file_path: Path, atomic: bool = True) -> None:
        self._file_path = Path(file_path)
        self._atomic = atomic

    @property
    def path(self) -> Path:
        return self._file_path

    def load(self) -> list[dict[str, Any]]:
        """Return the stored records, or ``[]`` if the file cannot be used."""
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.info("No data file at %s; starting empty", self._file_path)
            return []
        except (OSError, ValueError) as exc:
            logger.warning(
                "Could not read %s (%s); starting empty", self._file_path, exc
            )
            return []

        if not isinstance(raw, list):
            logger.warning(
                "Expected a JSON array in %s, got %s; starting empty",
                self._file_path,
                type(raw).__name__,
            )
            return []
        return raw

    def save(self, records: list[dict[str, Any]]) -> None:
        """Overwrite the backing file with *records*.

        Raises OSError if the file cannot be written.
        """
        text = json.dumps(records, indent=2, ensure_ascii=False) + "\n"
        self._file_path.parent.mkdir(parents=True, exist_ok=True)

        if not self._atomic:
            self._file_path.write_text(text, encoding="utf-8")
            return

        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=f".{self._file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
