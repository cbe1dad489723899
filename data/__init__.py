"""
Data layer for Reportes de Salidas.

This module provides access to material exit records through the
RecordStoreInterface abstraction.
Use create_record_store() factory function to get a store instance.
"""

from pathlib import Path
from typing import Any, Iterable, Literal, Optional, Union

from .interface import RecordStoreInterface
from .json_store import JsonRecordStore
from .memory_store import InMemoryRecordStore


def create_record_store(
    backend: Literal["json", "memory"] = "json",
    path: Optional[Union[str, Path]] = None,
    records: Optional[Iterable[Any]] = None,
) -> RecordStoreInterface:
    """
    Factory function to create record store instance.

    Args:
        backend: Store backend to use ("json" or "memory")
        path: Path to JSON file (for "json")
        records: Records or exit dicts (for "memory")

    Returns:
        RecordStoreInterface implementation

    Example:
        >>> store = create_record_store("json", "./salidas.json")
        >>> exits = store.get_all()
    """
    if backend == "json":
        if path is None:
            raise ValueError("A path is required for the json record store")
        return JsonRecordStore(path)
    elif backend == "memory":
        return InMemoryRecordStore(records or [])
    else:
        raise ValueError(f"Unknown record store backend: {backend}")


__all__ = [
    "RecordStoreInterface",
    "JsonRecordStore",
    "InMemoryRecordStore",
    "create_record_store",
]
