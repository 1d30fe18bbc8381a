from pathlib import Path

from letter_worker.config.settings import Settings
from letter_worker.storage.base import BaseDocumentStorage
from letter_worker.storage.local_adapter import LocalDocumentStorage
from letter_worker.storage.s3_adapter import S3DocumentStorage


class DocumentStorageFactory:
    """Creates the configured storage reader."""

    BACKENDS = ("s3", "local")

    @classmethod
    def create(cls, settings: Settings) -> BaseDocumentStorage:
        backend = settings.storage_backend.lower()
        if backend == "s3":
            return S3DocumentStorage(region_name=settings.aws_region)
        if backend == "local":
            return LocalDocumentStorage(Path(settings.files_root))
        raise ValueError(
            f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
