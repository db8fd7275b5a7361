"""
Completion Repository Interface (Port).

This module defines the abstract interface for the workout history
collection. A completion record is appended every time a routine is
finalized.
"""
from typing import List, Optional, Protocol

from domain.models import CompletionRecord


class CompletionRepository(Protocol):
    """
    Abstract interface for workout completion history.
    """

    def insert(self, record: CompletionRecord) -> Optional[CompletionRecord]:
        """
        Append a completion record to the history collection.

        Args:
            record: Record to store (its id is client-generated)

        Returns:
            The stored record, or None on failure
        """
        ...

    def list_for_owner(
        self,
        owner: str,
        *,
        limit: int = 50,
        offset: int = 0,
    ) -> List[CompletionRecord]:
        """
        Get completion history for a user, newest first.

        Args:
            owner: Owner identifier
            limit: Maximum records to return
            offset: Records to skip for pagination

        Returns:
            List of completion records (empty on failure)
        """
        ...
