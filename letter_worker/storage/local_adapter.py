from pathlib import Path

from letter_worker.processor.exceptions import StorageReadError
from letter_worker.storage.base import BaseDocumentStorage


def document_file_path(files_root: Path, bucket: str, key: str) -> Path:
    """Build path to a stored letter: {files_root}/{bucket}/{key}"""
    return files_root / bucket / key


class LocalDocumentStorage(BaseDocumentStorage):
    """Reads letters from a directory tree laid out like buckets and keys."""

    def __init__(self, files_root: Path) -> None:
        self._files_root = files_root.resolve()

    def read(self, bucket: str, key: str) -> bytes:
        path = document_file_path(self._files_root, bucket, key).resolve()
        if not path.is_relative_to(self._files_root):
            raise StorageReadError(f"Key escapes storage root: {bucket}/{key}")
        try:
            return path.read_bytes()
        except OSError as exc:
            raise StorageReadError(f"Failed to read {path}: {exc}") from exc
