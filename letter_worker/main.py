from letter_worker.config.settings import Settings
from letter_worker.database.connection import close_pool, init_pool
from letter_worker.database.repositories.letter_repository import LetterRepository
from letter_worker.logging.logger import Log
from letter_worker.processor.processor import build_processor
from letter_worker.worker.batch_runner import BatchRunner
from letter_worker.worker.sweeper import StaleLetterSweeper


def main() -> None:
    """Entry point: initialize pool -> build dependencies -> start sweeper loop."""
    settings = Settings()
    Log.configure(settings.log_level)
    init_pool(settings)

    try:
        batch_runner = BatchRunner(build_processor(settings))
        sweeper = StaleLetterSweeper(LetterRepository(), batch_runner, settings)
        sweeper.run()
    finally:
        close_pool()


if __name__ == "__main__":
    main()
