from typing import Any
from urllib.parse import unquote_plus

from letter_worker.processor.exceptions import ProcessorError
from letter_worker.processor.models import ObjectRef


class InvalidEventError(ProcessorError):
    """Raised when a notification record does not name a bucket and key."""

    reason = "invalid_event"


def decode_object_key(raw_key: str) -> str:
    """Decode an S3 notification key: '+' becomes a space, then %-escapes."""
    return unquote_plus(raw_key)


def parse_record(record: Any) -> ObjectRef:
    """Extract the bucket and decoded key from one S3 notification record.

    Raises:
        InvalidEventError: if the record is not shaped like an S3 notification.
    """
    try:
        s3 = record["s3"]
        bucket = s3["bucket"]["name"]
        raw_key = s3["object"]["key"]
    except (KeyError, TypeError) as exc:
        raise InvalidEventError(f"Malformed S3 notification record: {exc!r}") from exc
    if not isinstance(bucket, str) or not isinstance(raw_key, str) or not raw_key:
        raise InvalidEventError("S3 notification record has no bucket name or object key")
    return ObjectRef(bucket=bucket, key=decode_object_key(raw_key))


def event_records(event: Any) -> list[Any]:
    """Return the notification records of a trigger event."""
    if not isinstance(event, dict):
        raise InvalidEventError(f"Unsupported event payload: {type(event).__name__}")
    records = event.get("Records") or []
    if not isinstance(records, list):
        raise InvalidEventError("Event 'Records' must be a list")
    return records
