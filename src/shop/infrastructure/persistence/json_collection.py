"""Shared plumbing for the JSON-file-backed stores.

Each store keeps its records in an insertion-ordered ``dict`` keyed by
ID and rewrites the whole backing file after every mutation. A single
lock per store serializes the read-modify-write-persist sequence.
"""

from __future__ import annotations

import copy
import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from shop.domain.exceptions import NotFoundError, PersistenceError
from shop.infrastructure.persistence.json_file import JsonFile

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonCollection(ABC, Generic[T]):

    entity_name = "Record"

    def __init__(self, backing_file: JsonFile) -> None:
        self._file = backing_file
        self._lock = threading.RLock()
        self._records: dict[int, T] = {}
        self._next_id = 1
        self._reload()

    # --- Lifecycle ------------------------------------------------------------

    def _reload(self) -> None:
        raw = self._file.load()
        try:
            records = [self._to_domain(item) for item in raw]
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning(
                "Malformed %s data in %s (%s); starting empty",
                self.entity_name.lower(),
                self._file.path,
                exc,
            )
            records = []

        self._records = {}
        duplicates: list[int] = []
        for record in records:
            record_id = record.id  # type: ignore[attr-defined]
            if record_id in self._records:
                duplicates.append(record_id)
                continue
            self._records[record_id] = record
        if duplicates:
            logger.warning(
                "Duplicate %s IDs %s in %s; keeping the first record for each",
                self.entity_name.lower(),
                sorted(set(duplicates)),
                self._file.path,
            )

        self._next_id = max(self._records) + 1 if self._records else 1

    @staticmethod
    @abstractmethod
    def _to_raw(record: T) -> dict[str, Any]:
        """Serialize one record to its JSON object."""

    @staticmethod
    @abstractmethod
    def _to_domain(raw: dict[str, Any]) -> T:
        """Build one record from its JSON object."""

    @property
    def next_id(self) -> int:
        return self._next_id

    # --- Record access --------------------------------------------------------

    def _find(self, record_id: int) -> T:
        record = self._records.get(record_id)
        if record is None:
            raise NotFoundError(f"{self.entity_name} with ID {record_id} not found.")
        return record

    def _values(self) -> list[T]:
        return list(self._records.values())

    @staticmethod
    def _copy(record: T) -> T:
        return copy.deepcopy(record)

    # --- Write-through --------------------------------------------------------

    @contextmanager
    def _mutation(self) -> Iterator[None]:
        """Run a mutation under the lock, then flush the whole collection.

        If the mutation raises or the flush fails, the collection and the
        ID counter are put back as they were. A failed flush surfaces as
        PersistenceError.
        """
        with self._lock:
            snapshot = copy.deepcopy(self._records)
            next_id = self._next_id
            try:
                yield
                self._file.save([self._to_raw(r) for r in self._records.values()])
            except OSError as exc:
                self._records = snapshot
                self._next_id = next_id
                logger.error("Failed to write %s: %s", self._file.path, exc)
                raise PersistenceError(
                    f"Could not persist {self.entity_name.lower()}s to {self._file.path}"
                ) from exc
            except BaseException:
                self._records = snapshot
                self._next_id = next_id
                raise

    def _allocate_id(self) -> int:
        record_id = self._next_id
        self._next_id += 1
        return record_id
