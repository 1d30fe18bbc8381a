import psycopg

from letter_worker.database.connection import get_connection
from letter_worker.processor.exceptions import (
    AmbiguousPatientError,
    PatientNotFoundError,
    RegistryError,
)


class PatientRepository:
    """Read-only lookups against the patients table."""

    def resolve(self, nhs_number: str) -> str:
        """Return the patient id registered for a normalized NHS number.

        Raises:
            PatientNotFoundError: if no patient has this NHS number.
            AmbiguousPatientError: if more than one patient has it.
            RegistryError: if the registry query fails.
        """
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        "SELECT id FROM patients WHERE nhs_number = %s LIMIT 2",
                        (nhs_number,),
                    )
                    rows = cur.fetchall()
        except psycopg.Error as exc:
            raise RegistryError(f"Failed to query patients table: {exc}") from exc

        if not rows:
            raise PatientNotFoundError(
                f"Patient not found for NHS number {nhs_number}. "
                "Patient must be registered before uploading letters."
            )
        if len(rows) > 1:
            raise AmbiguousPatientError(
                f"More than one patient registered for NHS number {nhs_number}"
            )
        return str(rows[0][0])
