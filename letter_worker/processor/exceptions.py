class ProcessorError(Exception):
    """Base exception for all processor-related errors."""

    reason = "processing_failed"


class StorageReadError(ProcessorError):
    """Raised when document bytes cannot be fetched from storage."""

    reason = "download_failed"


class NoNhsNumberError(ProcessorError):
    """Raised when the extracted text contains no NHS number."""

    reason = "no_nhs_number"


class RegistryError(ProcessorError):
    """Raised when the patient registry cannot be queried."""

    reason = "registry_failed"


class PatientNotFoundError(RegistryError):
    """Raised when no patient is registered for an NHS number."""

    reason = "patient_not_found"


class AmbiguousPatientError(RegistryError):
    """Raised when more than one patient shares an NHS number."""

    reason = "patient_ambiguous"


class PersistenceError(ProcessorError):
    """Raised when a letter status write fails.

    Aborts the processing attempt; the letter keeps its prior status.
    """

    reason = "persistence_failed"


class LetterNotFoundError(PersistenceError):
    """Raised when no letter row exists for an S3 key."""


class BatchAbortedError(ProcessorError):
    """Raised by the trigger entrypoint when at least one attempt was aborted."""

    def __init__(self, keys: list[str]) -> None:
        super().__init__(f"Aborted processing for {len(keys)} letter(s): {keys}")
        self.keys = keys
