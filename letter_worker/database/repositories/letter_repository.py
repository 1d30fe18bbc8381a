from typing import Any

import psycopg
from psycopg.rows import dict_row

from letter_worker.database.connection import get_connection
from letter_worker.database.models import LetterRecord, LetterStatus
from letter_worker.processor.exceptions import LetterNotFoundError, PersistenceError

_LETTER_COLUMNS = """
    id, s3_key, file_name, status, patient_id, summary, error,
    sweep_attempts, created_at, updated_at
"""


class LetterRepository:
    """Status store for the letters table.

    Every write is a single UPDATE keyed by s3_key, committed on its own.
    Each one replaces its target columns outright, so concurrent invocations
    for the same key converge on whichever write lands last.
    """

    def mark_processing(self, s3_key: str) -> None:
        self._update(
            s3_key,
            """
            UPDATE letters
            SET status = %s, error = NULL, updated_at = clock_timestamp()
            WHERE s3_key = %s
            """,
            (LetterStatus.PROCESSING.value, s3_key),
        )

    def mark_complete(self, s3_key: str, summary: str, patient_id: str) -> None:
        self._update(
            s3_key,
            """
            UPDATE letters
            SET status = %s, summary = %s, patient_id = %s, error = NULL,
                sweep_attempts = 0, updated_at = clock_timestamp()
            WHERE s3_key = %s
            """,
            (LetterStatus.COMPLETE.value, summary, patient_id, s3_key),
        )

    def mark_error(self, s3_key: str, error: str | None = None) -> None:
        """Mark a letter as failed. Summary and patient_id are left untouched."""
        self._update(
            s3_key,
            """
            UPDATE letters
            SET status = %s, error = %s, sweep_attempts = 0,
                updated_at = clock_timestamp()
            WHERE s3_key = %s
            """,
            (LetterStatus.ERROR.value, error, s3_key),
        )

    def find_by_s3_key(self, s3_key: str) -> LetterRecord | None:
        """Find a letter by S3 key. Useful for tests and operators."""
        rows = self._select(
            f"SELECT {_LETTER_COLUMNS} FROM letters WHERE s3_key = %s",
            (s3_key,),
        )
        return rows[0] if rows else None

    def find_stale_processing(
        self, older_than_seconds: int, limit: int
    ) -> list[LetterRecord]:
        """Letters stuck in PROCESSING for longer than the given age, oldest first."""
        return self._select(
            f"""
            SELECT {_LETTER_COLUMNS}
            FROM letters
            WHERE status = %s
              AND updated_at < NOW() - make_interval(secs => %s)
            ORDER BY updated_at
            LIMIT %s
            """,
            (LetterStatus.PROCESSING.value, older_than_seconds, limit),
        )

    def record_sweep_attempt(self, s3_key: str) -> int | None:
        """Count one sweeper re-run of a PROCESSING letter.

        Returns the new count, or None if the letter has left PROCESSING.
        """
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        """
                        UPDATE letters
                        SET sweep_attempts = sweep_attempts + 1
                        WHERE s3_key = %s AND status = %s
                        RETURNING sweep_attempts
                        """,
                        (s3_key, LetterStatus.PROCESSING.value),
                    )
                    row = cur.fetchone()
                conn.commit()
        except psycopg.Error as exc:
            raise PersistenceError(f"Failed to update letter {s3_key}: {exc}") from exc
        return row[0] if row else None

    def abandon_stale(self, s3_key: str, error: str) -> bool:
        """Move a letter from PROCESSING to ERROR. False if it already left PROCESSING."""
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        """
                        UPDATE letters
                        SET status = %s, error = %s, sweep_attempts = 0,
                            updated_at = clock_timestamp()
                        WHERE s3_key = %s AND status = %s
                        """,
                        (
                            LetterStatus.ERROR.value,
                            error,
                            s3_key,
                            LetterStatus.PROCESSING.value,
                        ),
                    )
                    updated = cur.rowcount > 0
                conn.commit()
        except psycopg.Error as exc:
            raise PersistenceError(f"Failed to update letter {s3_key}: {exc}") from exc
        return updated

    def _update(self, s3_key: str, query: str, params: tuple[Any, ...]) -> None:
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(query, params)
                    if cur.rowcount == 0:
                        raise LetterNotFoundError(f"Letter {s3_key} not found")
                conn.commit()
        except psycopg.Error as exc:
            raise PersistenceError(f"Failed to update letter {s3_key}: {exc}") from exc

    def _select(self, query: str, params: tuple[Any, ...]) -> list[LetterRecord]:
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(query, params)
                    rows = cur.fetchall()
        except psycopg.Error as exc:
            raise PersistenceError(f"Failed to query letters: {exc}") from exc
        return [self._to_record(row) for row in rows]

    @staticmethod
    def _to_record(row: dict[str, Any]) -> LetterRecord:
        return LetterRecord(
            id=str(row["id"]),
            s3_key=row["s3_key"],
            file_name=row["file_name"],
            status=LetterStatus(row["status"]),
            patient_id=str(row["patient_id"]) if row["patient_id"] is not None else None,
            summary=row["summary"],
            error=row["error"],
            sweep_attempts=row["sweep_attempts"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
