from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from letter_worker.processor.exceptions import StorageReadError
from letter_worker.storage.base import BaseDocumentStorage


class S3DocumentStorage(BaseDocumentStorage):
    """Reads letters from S3, concatenating the streamed body chunks."""

    CHUNK_SIZE = 1024 * 1024

    def __init__(self, *, region_name: str | None = None, client: Any = None) -> None:
        self._client = client if client is not None else boto3.client(
            "s3", region_name=region_name
        )

    def read(self, bucket: str, key: str) -> bytes:
        try:
            response = self._client.get_object(Bucket=bucket, Key=key)
            body = response.get("Body")
            if body is None:
                raise StorageReadError(f"Empty response from S3 for s3://{bucket}/{key}")
            chunks = list(body.iter_chunks(chunk_size=self.CHUNK_SIZE))
        except (ClientError, BotoCoreError) as exc:
            raise StorageReadError(f"Failed to read s3://{bucket}/{key}: {exc}") from exc
        return b"".join(chunks)
