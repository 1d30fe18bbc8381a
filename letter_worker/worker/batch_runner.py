import time
from typing import Any

from letter_worker.events import InvalidEventError, event_records, parse_record
from letter_worker.logging.logger import Log
from letter_worker.processor.exceptions import PersistenceError
from letter_worker.processor.models import BatchResult, LetterOutcome, ObjectRef, OutcomeKind
from letter_worker.processor.processor import UNEXPECTED_ERROR_REASON, Processor


class BatchRunner:
    """Run every letter of a triggering batch, one at a time, isolating failures."""

    def __init__(self, processor: Processor) -> None:
        self._processor = processor

    def run(self, event: Any) -> BatchResult:
        """Process each notification record in order; never stops early."""
        records = event_records(event)
        Log.info(f"Processing batch of {len(records)} record(s)")
        result = BatchResult()
        for index, record in enumerate(records):
            try:
                ref = parse_record(record)
            except InvalidEventError as exc:
                Log.error(f"Skipping record {index}: {exc}", reason=exc.reason)
                result.outcomes.append(
                    LetterOutcome(
                        s3_key=f"<record {index}>",
                        kind=OutcomeKind.FAILED,
                        elapsed_ms=0,
                        reason=exc.reason,
                    )
                )
                continue
            result.outcomes.append(self.run_one(ref))
        Log.info(
            f"Batch finished: {len(result.completed)} complete, "
            f"{len(result.failed)} failed, {len(result.aborted)} aborted"
        )
        return result

    def run_one(self, ref: ObjectRef) -> LetterOutcome:
        """Execute a single letter attempt with error handling."""
        Log.info(f"Processing file from bucket {ref.bucket}", s3_key=ref.key)
        started = time.monotonic()
        try:
            self._processor.process(ref.bucket, ref.key)
        except PersistenceError as exc:
            return self._outcome(ref, OutcomeKind.ABORTED, started, exc)
        except Exception as exc:
            return self._outcome(ref, OutcomeKind.FAILED, started, exc)
        return self._outcome(ref, OutcomeKind.COMPLETED, started)

    @staticmethod
    def _outcome(
        ref: ObjectRef,
        kind: OutcomeKind,
        started: float,
        exc: Exception | None = None,
    ) -> LetterOutcome:
        elapsed_ms = int((time.monotonic() - started) * 1000)
        if exc is None:
            Log.info("Successfully processed letter", s3_key=ref.key, elapsed_ms=elapsed_ms)
            return LetterOutcome(s3_key=ref.key, kind=kind, elapsed_ms=elapsed_ms)

        reason = getattr(exc, "reason", UNEXPECTED_ERROR_REASON)
        if kind is OutcomeKind.ABORTED:
            Log.error(
                f"Aborted letter, status left unchanged: {exc}",
                s3_key=ref.key,
                elapsed_ms=elapsed_ms,
                reason=reason,
            )
        else:
            Log.error(
                f"Failed to process letter: {exc}",
                s3_key=ref.key,
                elapsed_ms=elapsed_ms,
                reason=reason,
            )
        return LetterOutcome(s3_key=ref.key, kind=kind, elapsed_ms=elapsed_ms, reason=reason)
