import time

from letter_worker.config.settings import Settings
from letter_worker.database.models import LetterRecord
from letter_worker.database.repositories.letter_repository import LetterRepository
from letter_worker.logging.logger import Log
from letter_worker.processor.exceptions import PersistenceError
from letter_worker.processor.models import BatchResult, ObjectRef
from letter_worker.worker.batch_runner import BatchRunner

STUCK_PROCESSING_REASON = "stuck_processing"


class StaleLetterSweeper:
    """Poll loop: find letters stuck in PROCESSING -> re-run them -> sleep.

    A letter stays PROCESSING when an invocation dies mid-attempt (timeout,
    crash, failed final write). Re-running it relies on the same idempotent
    overwrite as a re-delivered upload event. A letter swept max_sweep_attempts
    times without leaving PROCESSING is marked ERROR instead.
    """

    def __init__(
        self,
        letter_repo: LetterRepository,
        batch_runner: BatchRunner,
        settings: Settings,
    ) -> None:
        self._letter_repo = letter_repo
        self._batch_runner = batch_runner
        self._settings = settings

    def run(self, max_sweeps: int | None = None) -> None:
        """Main poll loop. Runs forever until interrupted.

        If max_sweeps is set, stop after that many sweeps (for testing).
        """
        Log.info("Sweeper started, polling for stale letters")
        sweeps_done = 0
        try:
            while True:
                self.sweep_once()
                sweeps_done += 1
                if max_sweeps is not None and sweeps_done >= max_sweeps:
                    break
                time.sleep(self._settings.sweep_interval_seconds)
        except KeyboardInterrupt:
            Log.info("Sweeper shutting down gracefully")

    def sweep_once(self) -> BatchResult:
        """Re-run one page of stale letters. Database errors end the sweep early."""
        result = BatchResult()
        if not self._settings.documents_bucket:
            Log.warning("documents_bucket is not configured, skipping sweep")
            return result
        try:
            stale = self._letter_repo.find_stale_processing(
                self._settings.stale_processing_seconds,
                self._settings.sweep_batch_size,
            )
        except PersistenceError as exc:
            Log.warning(f"Database error, will retry: {exc}")
            return result

        if not stale:
            Log.debug("No stale letters found")
            return result

        Log.info(f"Re-running {len(stale)} stale letter(s)")
        for letter in stale:
            try:
                if letter.sweep_attempts >= self._settings.max_sweep_attempts:
                    self._abandon(letter)
                    continue
                attempts = self._letter_repo.record_sweep_attempt(letter.s3_key)
            except PersistenceError as exc:
                Log.warning(f"Database error, skipping letter: {exc}", s3_key=letter.s3_key)
                continue
            if attempts is None:
                Log.debug("Letter left PROCESSING before re-run", s3_key=letter.s3_key)
                continue
            Log.info(
                f"Re-running stale letter (sweep {attempts}/{self._settings.max_sweep_attempts})",
                s3_key=letter.s3_key,
            )
            ref = ObjectRef(bucket=self._settings.documents_bucket, key=letter.s3_key)
            result.outcomes.append(self._batch_runner.run_one(ref))
        return result

    def _abandon(self, letter: LetterRecord) -> None:
        if self._letter_repo.abandon_stale(letter.s3_key, STUCK_PROCESSING_REASON):
            Log.error(
                f"Letter still stuck after {letter.sweep_attempts} sweep(s), marked as error",
                s3_key=letter.s3_key,
                reason=STUCK_PROCESSING_REASON,
            )
