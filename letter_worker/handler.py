"""AWS Lambda entrypoint for S3 ObjectCreated notifications.

Clients (connection pool, S3, AI provider) are built once per process on the
first invocation and reused while the execution environment stays warm.
"""

from typing import Any

from letter_worker.config.settings import Settings
from letter_worker.database.connection import init_pool
from letter_worker.logging.logger import Log
from letter_worker.processor.exceptions import BatchAbortedError
from letter_worker.processor.processor import build_processor
from letter_worker.worker.batch_runner import BatchRunner

_runner: BatchRunner | None = None


def get_batch_runner() -> BatchRunner:
    """Return the process-wide BatchRunner, building it on first use."""
    global _runner  # noqa: PLW0603
    if _runner is None:
        settings = Settings()
        Log.configure(settings.log_level)
        init_pool(settings)
        _runner = BatchRunner(build_processor(settings))
    return _runner


def handler(event: dict[str, Any], context: Any) -> dict[str, object]:
    """Process one batch of upload notifications.

    Raises:
        BatchAbortedError: after the whole batch ran, if any letter's status
            write failed, so the invoker re-delivers the event.
    """
    _ = context
    result = get_batch_runner().run(event)
    if result.aborted:
        raise BatchAbortedError(result.aborted)
    return result.as_dict()
