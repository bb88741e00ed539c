"""
In-memory repository.

Records live in plain dicts keyed by id with a per-collection counter.
Uniqueness rules are checked and the insert performed under one lock, so
two concurrent duplicate creates cannot both succeed. Like SQL, a rule
involving a None value never clashes.
"""

import threading
from itertools import count
from typing import Any, Dict, List

from internhub.repositories.base import (
    Collection, CollectionSpec, DuplicateRecordError, Repository, matches, plain,
)


class MemoryCollection(Collection):

    def __init__(self, spec: CollectionSpec):
        super().__init__(spec)
        self._rows: Dict[int, Any] = {}
        self._ids = count(1)
        self._lock = threading.Lock()

    def _clashes(self, values: Dict[str, Any], rule) -> bool:
        wanted = tuple(values.get(name) for name in rule)
        if any(value is None for value in wanted):
            return False
        return any(
            tuple(getattr(row, name) for name in rule) == wanted
            for row in self._rows.values()
        )

    def get(self, record_id: int):
        row = self._rows.get(record_id)
        return row.model_copy(deep=True) if row is not None else None

    def find(self, **filters: Any) -> List:
        wanted = plain(filters)
        with self._lock:
            rows = [self._rows[key] for key in sorted(self._rows)]
        return [row.model_copy(deep=True) for row in rows if matches(row, wanted)]

    def create(self, data: Dict[str, Any]):
        values = self._stamp(data)
        with self._lock:
            for rule in self.spec.unique:
                if self._clashes(values, rule):
                    raise DuplicateRecordError(self.name, rule)
            record_id = next(self._ids)
            row = self.spec.record_type.model_validate({**values, "id": record_id})
            self._rows[record_id] = row
        return row.model_copy(deep=True)

    def update(self, record_id: int, changes: Dict[str, Any]):
        with self._lock:
            current = self._rows.get(record_id)
            if current is None:
                return None
            values = {**dict(current), **plain(changes), "id": record_id}
            row = self.spec.record_type.model_validate(values)
            self._rows[record_id] = row
        return row.model_copy(deep=True)

    def delete(self, record_id: int) -> bool:
        with self._lock:
            return self._rows.pop(record_id, None) is not None


class MemoryRepository(Repository):
    """Process-local storage; everything is lost on restart."""

    def _build_collection(self, spec: CollectionSpec) -> Collection:
        return MemoryCollection(spec)
