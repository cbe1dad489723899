"""
Record Store Interface - Abstract Base Class for material exit retrieval.

This module defines the contract for every source of material exit records.
The report pipeline only reads from a store; it never writes back.
"""

from abc import ABC, abstractmethod
from typing import List

from domain.models import MaterialExitRecord


class RecordStoreInterface(ABC):
    """
    Abstract base class for material exit sources.

    Implementations return the full, unfiltered collection. Ordering is
    not guaranteed; callers sort with operations.load_ops.
    """

    @abstractmethod
    def get_all(self) -> List[MaterialExitRecord]:
        """
        Get every material exit record.

        Returns:
            List of MaterialExitRecord

        Raises:
            RecordStoreError: If the records cannot be retrieved
        """
        pass

    def count(self) -> int:
        """Number of records available in the store."""
        return len(self.get_all())
