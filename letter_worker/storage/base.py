from abc import ABC, abstractmethod


class BaseDocumentStorage(ABC):
    """Contract for reading uploaded letter bytes from object storage."""

    @abstractmethod
    def read(self, bucket: str, key: str) -> bytes:
        """Fetch the full content of one stored object.

        Raises:
            StorageReadError: if the object cannot be read.
        """
