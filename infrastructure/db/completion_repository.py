"""
Supabase Completion Repository Implementation.

This module implements the CompletionRepository protocol using Supabase as the backend.
History rows live in the `status_treino` table.
"""
import logging
from typing import List, Optional

from pydantic import ValidationError
from supabase import Client

from domain.models import CompletionRecord

logger = logging.getLogger(__name__)

COMPLETIONS_TABLE = "status_treino"

MAX_PAGE_SIZE = 100


def format_duration(seconds: int) -> str:
    """Format duration in seconds to MM:SS or HH:MM:SS."""
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


class SupabaseCompletionRepository:
    """
    Supabase implementation of CompletionRepository protocol.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def insert(self, record: CompletionRecord) -> Optional[CompletionRecord]:
        """Append a completion record to the history table."""
        try:
            result = self._client.table(COMPLETIONS_TABLE).insert(record.to_row()).execute()
            if not result.data:
                logger.error(f"Completion insert returned no data for {record.id}")
                return None
            logger.info(
                f"Completion {record.id} saved for {record.user_email} "
                f"({format_duration(record.duration_seconds)})"
            )
            stored = CompletionRecord.model_validate(result.data[0])
            return stored.model_copy(update={"workout_id": record.workout_id})
        except Exception as e:
            logger.error(f"Failed to save completion {record.id}: {e}")
            return None

    def list_for_owner(
        self,
        owner: str,
        *,
        limit: int = 50,
        offset: int = 0,
    ) -> List[CompletionRecord]:
        """Get completion history for a user, newest first."""
        limit = max(1, min(limit, MAX_PAGE_SIZE))
        try:
            result = (
                self._client.table(COMPLETIONS_TABLE)
                .select("*")
                .eq("user_email", owner)
                .order("finished_at", desc=True)
                .range(offset, offset + limit - 1)
                .execute()
            )
            records = []
            for row in result.data or []:
                try:
                    records.append(CompletionRecord.model_validate(row))
                except ValidationError as e:
                    logger.warning(f"Skipping malformed completion row {row.get('id')}: {e}")
            return records
        except Exception as e:
            logger.error(f"Failed to get completions for {owner}: {e}")
            return []
