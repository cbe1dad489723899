"""
In-memory implementation of RecordStoreInterface.

Used when records are already loaded (tests, embedding in another service).
"""

from typing import Any, Dict, Iterable, List, Union

from domain.models import MaterialExitRecord
from .interface import RecordStoreInterface


class InMemoryRecordStore(RecordStoreInterface):
    """Record store holding a fixed snapshot of exits."""

    def __init__(self, records: Iterable[Union[MaterialExitRecord, Dict[str, Any]]] = ()):
        self._records = [
            r if isinstance(r, MaterialExitRecord) else MaterialExitRecord.from_dict(r)
            for r in records
        ]

    def get_all(self) -> List[MaterialExitRecord]:
        # Copy so callers cannot reorder the stored snapshot
        return list(self._records)
