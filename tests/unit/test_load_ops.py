"""
Unit tests for Load Operations.

Tests cover retrieval from a record store and created_at ordering.
"""

import pytest
from unittest.mock import Mock

from data import InMemoryRecordStore
from data.interface import RecordStoreInterface
from domain.exceptions import RecordStoreError
from domain.models import MaterialExitRecord
from operations.load_ops import load_exits, sort_exits_by_created_at


def _exit(record_id, created_at):
    return MaterialExitRecord(id=record_id, exit_date="2024-01-01", created_at=created_at)


def test_sort_exits_newest_first():
    """Test exits are ordered by created_at descending."""
    exits = [
        _exit(1, "2024-01-01T08:00:00Z"),
        _exit(2, "2024-01-03T08:00:00Z"),
        _exit(3, "2024-01-02T08:00:00Z"),
    ]

    assert [r.id for r in sort_exits_by_created_at(exits)] == [2, 3, 1]


def test_sort_exits_undated_last_in_input_order():
    """Test exits without created_at go last, keeping their order."""
    exits = [
        _exit("x", None),
        _exit(1, "2024-01-01T08:00:00"),
        _exit("y", "garbage"),
        _exit(2, "2024-01-02T08:00:00"),
    ]

    assert [r.id for r in sort_exits_by_created_at(exits)] == [2, 1, "x", "y"]


def test_sort_exits_is_stable_for_equal_timestamps():
    """Test exits with the same created_at keep input order."""
    exits = [_exit(i, "2024-01-01T08:00:00") for i in range(4)]
    assert [r.id for r in sort_exits_by_created_at(exits)] == [0, 1, 2, 3]


def test_sort_exits_does_not_modify_input():
    """Test the input list keeps its order."""
    exits = [_exit(1, "2024-01-01"), _exit(2, "2024-01-02")]
    sort_exits_by_created_at(exits)
    assert [r.id for r in exits] == [1, 2]


def test_load_exits_sorts_store_records():
    """Test load_exits reads the store and sorts."""
    store = InMemoryRecordStore([
        {"id": 1, "exitDate": "2024-01-01", "createdAt": "2024-01-01T10:00:00Z"},
        {"id": 2, "exitDate": "2024-01-02", "createdAt": "2024-01-02T10:00:00Z"},
    ])

    assert [r.id for r in load_exits(store)] == [2, 1]


def test_load_exits_propagates_retrieval_failure():
    """Test store errors reach the caller."""
    store = Mock(spec=RecordStoreInterface)
    store.get_all.side_effect = RecordStoreError("No hay datos disponibles")

    with pytest.raises(RecordStoreError):
        load_exits(store)
