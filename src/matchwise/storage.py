"""Persistence boundary for match records.

The scoring core knows nothing about storage. Callers persist results
through a :class:`MatchRepository`; :class:`InMemoryMatchRepository` is the
reference implementation used by the CLI and tests.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Protocol, runtime_checkable

from matchwise.models.match import MatchRecord, MatchStatus

logger = logging.getLogger(__name__)


@runtime_checkable
class MatchRepository(Protocol):
    """Storage for match records keyed by (applicant_id, job_id)."""

    def upsert(self, record: MatchRecord) -> MatchRecord:
        """Create or update a match, returning the stored record."""
        ...

    def get(self, applicant_id: str, job_id: str) -> MatchRecord | None:
        """Retrieve a match by its key."""
        ...

    def list_for_job(self, job_id: str) -> list[MatchRecord]:
        """All matches for one job."""
        ...

    def list_for_applicant(self, applicant_id: str) -> list[MatchRecord]:
        """All matches for one applicant."""
        ...

    def update_status(
        self,
        applicant_id: str,
        job_id: str,
        status: MatchStatus,
        interview_scheduled_at: datetime | None = None,
    ) -> MatchRecord:
        """Change the status of an existing match."""
        ...


class InMemoryMatchRepository:
    """Thread-safe dict-backed repository.

    On conflict the scores and summary are replaced while the status and
    interview time are kept, so re-running matching never resets a
    scheduled interview.
    """

    def __init__(self) -> None:
        self._records: dict[tuple[str, str], MatchRecord] = {}
        self._lock = threading.Lock()

    def upsert(self, record: MatchRecord) -> MatchRecord:
        with self._lock:
            existing = self._records.get(record.key)
            if existing is not None:
                record = record.model_copy(
                    update={
                        "status": existing.status,
                        "interview_scheduled_at": existing.interview_scheduled_at,
                    }
                )
            self._records[record.key] = record
        logger.debug(f"Stored match {record.key} (overall={record.overall_score})")
        return record

    def get(self, applicant_id: str, job_id: str) -> MatchRecord | None:
        with self._lock:
            return self._records.get((applicant_id, job_id))

    def list_for_job(self, job_id: str) -> list[MatchRecord]:
        with self._lock:
            return [r for r in self._records.values() if r.job_id == job_id]

    def list_for_applicant(self, applicant_id: str) -> list[MatchRecord]:
        with self._lock:
            return [r for r in self._records.values() if r.applicant_id == applicant_id]

    def update_status(
        self,
        applicant_id: str,
        job_id: str,
        status: MatchStatus,
        interview_scheduled_at: datetime | None = None,
    ) -> MatchRecord:
        with self._lock:
            existing = self._records.get((applicant_id, job_id))
            if existing is None:
                raise LookupError(f"Match not found: applicant={applicant_id} job={job_id}")
            updated = existing.model_copy(
                update={"status": status, "interview_scheduled_at": interview_scheduled_at}
            )
            self._records[updated.key] = updated
            return updated

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
