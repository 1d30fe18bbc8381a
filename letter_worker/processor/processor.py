from letter_worker.config.settings import Settings
from letter_worker.database.repositories.letter_repository import LetterRepository
from letter_worker.database.repositories.patient_repository import PatientRepository
from letter_worker.logging.logger import Log
from letter_worker.pdf.factory import PdfExtractorFactory
from letter_worker.processor.exceptions import PersistenceError
from letter_worker.processor.pipeline import PipelineContext, PipelineStep
from letter_worker.processor.steps import (
    DownloadDocumentStep,
    ExtractNhsNumberStep,
    ExtractTextStep,
    MarkCompleteStep,
    MarkErrorStep,
    MarkProcessingStep,
    ResolvePatientStep,
    SummarizeStep,
)
from letter_worker.storage.factory import DocumentStorageFactory
from letter_worker.summarization.factory import SummarizerFactory

UNEXPECTED_ERROR_REASON = "unexpected_error"


class Processor:
    """Drives one letter through the ingestion steps, in order.

    Pipeline: mark processing -> download -> extract text -> NHS number ->
    resolve patient -> summarize -> mark complete.

    A failure in any step after the first runs ``failed_step`` (which marks
    the letter ERROR) and re-raises. A failed status write is a
    PersistenceError: it propagates without any further write, so the letter
    keeps whatever status it already had.
    """

    def __init__(self, steps: list[PipelineStep], failed_step: PipelineStep) -> None:
        self._steps = steps
        self._failed_step = failed_step

    def process(self, bucket: str, s3_key: str) -> PipelineContext:
        context = PipelineContext(bucket=bucket, s3_key=s3_key)
        try:
            for step in self._steps:
                context = step.run(context)
        except PersistenceError:
            raise
        except Exception as exc:
            context.error_reason = getattr(exc, "reason", UNEXPECTED_ERROR_REASON)
            context.error_message = str(exc)
            self._failed_step.run(context)
            raise
        return context


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    letter_repo = LetterRepository()
    steps: list[PipelineStep] = [
        MarkProcessingStep(letter_repo),
        DownloadDocumentStep(DocumentStorageFactory.create(settings)),
        ExtractTextStep(PdfExtractorFactory.create(settings)),
        ExtractNhsNumberStep(),
        ResolvePatientStep(PatientRepository()),
        SummarizeStep(SummarizerFactory.create(settings)),
        MarkCompleteStep(letter_repo),
    ]
    Log.debug(f"Built processor with {len(steps)} steps")
    return Processor(steps=steps, failed_step=MarkErrorStep(letter_repo))
