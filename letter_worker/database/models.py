from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class LetterStatus(str, Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETE = "COMPLETE"
    ERROR = "ERROR"


@dataclass
class LetterRecord:
    """Represents a row from the letters table."""

    id: str
    s3_key: str
    file_name: str
    status: LetterStatus
    patient_id: str | None = None
    summary: str | None = None
    error: str | None = None
    sweep_attempts: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
