"""
Generic in-memory record store.

A ``ResourceStore`` keeps an ordered list of records of one entity
kind.  Each record is a plain ``dict`` carrying an integer ``id``
assigned by the store; every other key is payload supplied by the
caller.  The store owns its records: reads return copies and the only
way to change a record is through :meth:`ResourceStore.update` or
:meth:`ResourceStore.delete`.

Two id strategies are supported:

* ``"counter"`` – a monotonically increasing counter.  Ids are never
  reused, even after deletions.
* ``"length"`` – the next id is ``len(records) + 1``, the legacy
  behaviour of the service.  After a deletion a new record may
  receive the id of a previously deleted one.  If that id is still held
  by a live record the store moves on to the next free id so that ids
  stay unique.

All operations are guarded by a single lock so the store can be used
from a thread pool.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Mapping, Optional

from crud_api.app.core.errors import RecordNotFound

ID_STRATEGIES = ("counter", "length")

Record = Dict[str, Any]


class ResourceStore:
    """Ordered, id-keyed collection of records for one entity kind."""

    entity_name: str = "Resource"

    def __init__(self, entity_name: Optional[str] = None, id_strategy: str = "counter") -> None:
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(
                f"Unknown id strategy {id_strategy!r}; expected one of {', '.join(ID_STRATEGIES)}"
            )
        if entity_name:
            self.entity_name = entity_name
        self.id_strategy = id_strategy
        self._records: List[Record] = []
        self._last_id = 0
        self._lock = threading.RLock()
        self._logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def list(self) -> List[Record]:
        """Return copies of all records in insertion order."""
        with self._lock:
            return [dict(record) for record in self._records]

    def count(self) -> int:
        return len(self)

    def get(self, record_id: Optional[int]) -> Record:
        """Return a copy of the record with ``record_id``.

        Raises
        ------
        RecordNotFound
            If no record carries the given id.
        """
        with self._lock:
            return dict(self._find(record_id))

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create(self, payload: Mapping[str, Any]) -> Record:
        """Append a new record built from ``payload`` and return a copy.

        Any ``id`` key in the payload is ignored; identity is always
        assigned by the store.
        """
        with self._lock:
            record: Record = {"id": self._next_id()}
            record.update((key, value) for key, value in payload.items() if key != "id")
            self._records.append(record)
            self._logger.info("Created %s %s", self.entity_name, record["id"])
            return dict(record)

    def update(self, record_id: Optional[int], payload: Mapping[str, Any]) -> Record:
        """Shallow-merge ``payload`` into an existing record.

        Existing fields are overwritten and new fields added.  The
        ``id`` field is never changed.  Returns a copy of the updated
        record.
        """
        with self._lock:
            record = self._find(record_id)
            record.update((key, value) for key, value in payload.items() if key != "id")
            self._logger.info("Updated %s %s", self.entity_name, record["id"])
            return dict(record)

    def delete(self, record_id: Optional[int]) -> None:
        """Remove the record with ``record_id``, keeping the others in order."""
        with self._lock:
            for index, record in enumerate(self._records):
                if record["id"] == record_id:
                    del self._records[index]
                    self._logger.info("Deleted %s %s", self.entity_name, record_id)
                    return
            raise RecordNotFound(self.entity_name, record_id)

    def clear(self) -> None:
        """Drop every record and restart id assignment."""
        with self._lock:
            self._records.clear()
            self._last_id = 0

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _find(self, record_id: Optional[int]) -> Record:
        for record in self._records:
            if record["id"] == record_id:
                return record
        raise RecordNotFound(self.entity_name, record_id)

    def _next_id(self) -> int:
        if self.id_strategy == "counter":
            self._last_id += 1
            return self._last_id
        # Legacy length-based ids; skip ids still held by live records.
        taken = {record["id"] for record in self._records}
        candidate = len(self._records) + 1
        while candidate in taken:
            candidate += 1
        return candidate
