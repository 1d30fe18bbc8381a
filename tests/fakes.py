"""In-memory collaborators for exercising the real pipeline steps."""

import itertools
from datetime import datetime, timedelta, timezone

from letter_worker.database.models import LetterRecord, LetterStatus
from letter_worker.processor.exceptions import (
    AmbiguousPatientError,
    LetterNotFoundError,
    PatientNotFoundError,
    PersistenceError,
    StorageReadError,
)
from letter_worker.storage.base import BaseDocumentStorage
from letter_worker.summarization.base import BaseSummarizer
from letter_worker.summarization.exceptions import GenerationError

_EPOCH = datetime(2026, 1, 1, tzinfo=timezone.utc)


class InMemoryLetterStore:
    """Mirrors LetterRepository write semantics over a dict keyed by s3_key."""

    def __init__(self) -> None:
        self.letters: dict[str, LetterRecord] = {}
        self.fail_on: set[str] = set()
        self.processing_marked_at: dict[str, datetime] = {}
        self._ticks = itertools.count(1)

    def _now(self) -> datetime:
        return _EPOCH + timedelta(milliseconds=next(self._ticks))

    def add_pending(self, s3_key: str, file_name: str = "letter.pdf") -> LetterRecord:
        now = self._now()
        record = LetterRecord(
            id=f"letter-{len(self.letters) + 1}",
            s3_key=s3_key,
            file_name=file_name,
            status=LetterStatus.PENDING,
            created_at=now,
            updated_at=now,
        )
        self.letters[s3_key] = record
        return record

    def _get(self, method: str, s3_key: str) -> LetterRecord:
        if method in self.fail_on:
            raise PersistenceError(f"{method} failed for {s3_key}")
        record = self.letters.get(s3_key)
        if record is None:
            raise LetterNotFoundError(f"Letter {s3_key} not found")
        return record

    def mark_processing(self, s3_key: str) -> None:
        record = self._get("mark_processing", s3_key)
        record.status = LetterStatus.PROCESSING
        record.error = None
        record.updated_at = self._now()
        self.processing_marked_at[s3_key] = record.updated_at

    def mark_complete(self, s3_key: str, summary: str, patient_id: str) -> None:
        record = self._get("mark_complete", s3_key)
        record.status = LetterStatus.COMPLETE
        record.summary = summary
        record.patient_id = patient_id
        record.error = None
        record.updated_at = self._now()

    def mark_error(self, s3_key: str, error: str | None = None) -> None:
        record = self._get("mark_error", s3_key)
        record.status = LetterStatus.ERROR
        record.error = error
        record.updated_at = self._now()

    def find_by_s3_key(self, s3_key: str) -> LetterRecord | None:
        return self.letters.get(s3_key)


class InMemoryPatientRegistry:
    def __init__(self, patients: dict[str, str] | None = None) -> None:
        self.patients: list[tuple[str, str]] = list((patients or {}).items())

    def resolve(self, nhs_number: str) -> str:
        matches = [pid for number, pid in self.patients if number == nhs_number]
        if not matches:
            raise PatientNotFoundError(f"Patient not found for NHS number {nhs_number}")
        if len(matches) > 1:
            raise AmbiguousPatientError(f"Ambiguous NHS number {nhs_number}")
        return matches[0]


class InMemoryStorage(BaseDocumentStorage):
    def __init__(self) -> None:
        self.objects: dict[tuple[str, str], bytes] = {}

    def put(self, bucket: str, key: str, data: bytes) -> None:
        self.objects[(bucket, key)] = data

    def read(self, bucket: str, key: str) -> bytes:
        try:
            return self.objects[(bucket, key)]
        except KeyError as exc:
            raise StorageReadError(f"No such object s3://{bucket}/{key}") from exc


class EchoSummarizer(BaseSummarizer):
    """Deterministic summarizer; raises GenerationError when ``fail`` is set."""

    def __init__(self) -> None:
        self.fail = False
        self.calls: list[str] = []

    def summarize(self, text: str) -> str:
        self.calls.append(text)
        if self.fail:
            raise GenerationError("Unexpected response format from AI provider: tool_use")
        return f"Summary of {len(text)} characters.\nNo urgent concerns."
