"""
Submission repositories.

Submitted plans live in an append-only list. Storage is swappable: a JSON
blob file (the local-storage equivalent), process memory, or a Supabase
table. Validation code never touches storage directly.
"""

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import structlog
from pydantic import ValidationError as PydanticValidationError

from config.database import get_supabase_client
from config.settings import get_settings
from exceptions import SubmissionStorageError
from models.plan import Submission

logger = structlog.get_logger(__name__)


class SubmissionRepository(ABC):
    """
    Port for the submission log.

    Records are only ever appended; nothing is edited or deleted.
    """

    @abstractmethod
    def append(self, submission: Submission) -> None:
        """
        Append one submission.

        Raises:
            SubmissionStorageError: If the record cannot be stored
        """
        pass

    @abstractmethod
    def list_all(self) -> list[Submission]:
        """
        Return every submission in append order.

        Raises:
            SubmissionStorageError: If stored records cannot be read
        """
        pass


class InMemorySubmissionRepository(SubmissionRepository):
    """Keeps submissions for the life of the process."""

    def __init__(self):
        self._records: list[Submission] = []

    def append(self, submission: Submission) -> None:
        self._records.append(submission.model_copy(deep=True))
        logger.info("submission_appended", submission_id=submission.id, backend="memory")

    def list_all(self) -> list[Submission]:
        return [record.model_copy(deep=True) for record in self._records]


class JsonFileSubmissionRepository(SubmissionRepository):
    """
    One JSON array of submission records in a single file.

    A missing or empty file reads as an empty list. Appending reads the
    whole array, adds the record and rewrites the file.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read_records(self) -> list[dict]:
        if not self.path.exists():
            return []

        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error("submission_blob_read_failed", path=str(self.path), error=str(e))
            raise SubmissionStorageError("read", str(e), str(self.path)) from e

        if not content.strip():
            return []

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error("submission_blob_corrupted", path=str(self.path), error=str(e))
            raise SubmissionStorageError("read", f"Invalid JSON: {e}", str(self.path)) from e

        if not isinstance(data, list):
            logger.error("submission_blob_not_a_list", path=str(self.path))
            raise SubmissionStorageError(
                "read", "Submission blob must hold a JSON array", str(self.path)
            )

        return data

    def _write_records(self, records: list[dict]) -> None:
        temp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(json.dumps(records, indent=2), encoding="utf-8")
            os.replace(temp_path, self.path)
        except OSError as e:
            logger.error("submission_blob_write_failed", path=str(self.path), error=str(e))
            raise SubmissionStorageError("write", str(e), str(self.path)) from e

    def append(self, submission: Submission) -> None:
        records = self._read_records()
        records.append(submission.to_record())
        self._write_records(records)

        logger.info(
            "submission_appended",
            submission_id=submission.id,
            backend="file",
            total=len(records),
        )

    def list_all(self) -> list[Submission]:
        records = self._read_records()
        try:
            submissions = [Submission.model_validate(record) for record in records]
        except PydanticValidationError as e:
            logger.error("submission_record_invalid", path=str(self.path), error=str(e))
            raise SubmissionStorageError("read", f"Invalid submission record: {e}", str(self.path)) from e

        logger.debug("submissions_listed", backend="file", count=len(submissions))
        return submissions


class SupabaseSubmissionRepository(SubmissionRepository):
    """
    One row per submission in a Supabase table.

    Columns: id, submitted_at and payload (the camelCase record as JSON).
    """

    def __init__(self, client=None, table: Optional[str] = None):
        self.db = client if client is not None else get_supabase_client()
        self.table = table or get_settings().submissions_table

    def append(self, submission: Submission) -> None:
        record = submission.to_record()
        row = {
            "id": submission.id,
            "submitted_at": record["submittedAt"],
            "payload": record,
        }

        try:
            self.db.table(self.table).insert(row).execute()
        except Exception as e:
            logger.error(
                "submission_insert_failed",
                submission_id=submission.id,
                error=str(e),
            )
            raise SubmissionStorageError("insert", str(e), self.table) from e

        logger.info("submission_appended", submission_id=submission.id, backend="supabase")

    def list_all(self) -> list[Submission]:
        try:
            result = (
                self.db.table(self.table)
                .select("*")
                .order("submitted_at")
                .execute()
            )
            submissions = [Submission.model_validate(row["payload"]) for row in result.data]
        except Exception as e:
            logger.error("list_submissions_failed", error=str(e))
            raise SubmissionStorageError("select", str(e), self.table) from e

        logger.debug("submissions_listed", backend="supabase", count=len(submissions))
        return submissions


def build_submission_repository() -> SubmissionRepository:
    """Create the repository selected by SUBMISSIONS_BACKEND."""
    settings = get_settings()

    if settings.submissions_backend == "memory":
        return InMemorySubmissionRepository()
    if settings.submissions_backend == "supabase":
        return SupabaseSubmissionRepository(table=settings.submissions_table)

    path = Path(settings.submissions_dir) / f"{settings.submissions_blob_name}.json"
    return JsonFileSubmissionRepository(path)


# Singleton instance
_submission_repository: Optional[SubmissionRepository] = None


def get_submission_repository() -> SubmissionRepository:
    """Get or create the configured SubmissionRepository."""
    global _submission_repository
    if _submission_repository is None:
        _submission_repository = build_submission_repository()
    return _submission_repository
