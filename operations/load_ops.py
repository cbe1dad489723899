"""
Load Operations for Reportes de Salidas.

Retrieve material exits from a record store and order them for display.
"""

import logging
from typing import List

from data.interface import RecordStoreInterface
from domain.models import MaterialExitRecord
from domain.rules import parse_created_at

logger = logging.getLogger(__name__)


def load_exits(store: RecordStoreInterface) -> List[MaterialExitRecord]:
    """
    Load every exit from a store, newest first.

    Args:
        store: Record store to read from

    Returns:
        List of MaterialExitRecord sorted by created_at (newest first)

    Raises:
        RecordStoreError: If the store cannot deliver records

    Example:
        >>> exits = load_exits(create_record_store("json", "salidas.json"))
    """
    records = store.get_all()
    logger.info(f"Retrieved {len(records)} material exits")
    return sort_exits_by_created_at(records)


def sort_exits_by_created_at(records: List[MaterialExitRecord]) -> List[MaterialExitRecord]:
    """
    Sort exits by creation timestamp, newest first.

    Records without a parseable created_at keep their relative order
    and go after all dated records.

    Args:
        records: Exits in any order

    Returns:
        New sorted list (input is not modified)
    """
    dated = []
    undated = []
    for record in records:
        created_at = parse_created_at(record.created_at)
        if created_at is None:
            undated.append(record)
        else:
            dated.append((created_at, record))

    if undated:
        logger.debug(f"{len(undated)} exits without created_at sorted last")

    # sort() is stable, also with reverse=True
    dated.sort(key=lambda item: item[0], reverse=True)
    return [record for _, record in dated] + undated
