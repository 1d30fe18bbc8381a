from letter_worker.database.repositories.letter_repository import LetterRepository
from letter_worker.database.repositories.patient_repository import PatientRepository
from letter_worker.logging.logger import Log
from letter_worker.pdf.base import BasePdfExtractor
from letter_worker.processor.exceptions import NoNhsNumberError
from letter_worker.processor.nhs_number import extract_nhs_number
from letter_worker.processor.pipeline import PipelineContext, PipelineStep
from letter_worker.storage.base import BaseDocumentStorage
from letter_worker.summarization.base import BaseSummarizer


class MarkProcessingStep(PipelineStep):
    def __init__(self, letter_repo: LetterRepository) -> None:
        self._letter_repo = letter_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        self._letter_repo.mark_processing(context.s3_key)
        Log.info("Letter marked as processing", s3_key=context.s3_key)
        return context


class MarkErrorStep(PipelineStep):
    def __init__(self, letter_repo: LetterRepository) -> None:
        self._letter_repo = letter_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        self._letter_repo.mark_error(context.s3_key, context.error_reason or None)
        Log.info(
            f"Letter marked as error: {context.error_message}",
            s3_key=context.s3_key,
            reason=context.error_reason,
        )
        return context


class DownloadDocumentStep(PipelineStep):
    def __init__(self, storage: BaseDocumentStorage) -> None:
        self._storage = storage

    def run(self, context: PipelineContext) -> PipelineContext:
        context.raw_bytes = self._storage.read(context.bucket, context.s3_key)
        Log.info(f"Downloaded {len(context.raw_bytes)} bytes", s3_key=context.s3_key)
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted_text = self._pdf_extractor.extract(context.raw_bytes)
        Log.info(
            f"Extracted {len(context.extracted_text)} characters", s3_key=context.s3_key
        )
        return context


class ExtractNhsNumberStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        nhs_number = extract_nhs_number(context.extracted_text)
        if nhs_number is None:
            raise NoNhsNumberError("No NHS number found in document")
        context.nhs_number = nhs_number
        return context


class ResolvePatientStep(PipelineStep):
    def __init__(self, patient_repo: PatientRepository) -> None:
        self._patient_repo = patient_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.nhs_number is None:
            raise ValueError("PipelineContext.nhs_number must be set before patient lookup")
        context.patient_id = self._patient_repo.resolve(context.nhs_number)
        Log.info("Resolved patient", s3_key=context.s3_key, patient_id=context.patient_id)
        return context


class SummarizeStep(PipelineStep):
    def __init__(self, summarizer: BaseSummarizer) -> None:
        self._summarizer = summarizer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.summary = self._summarizer.summarize(context.extracted_text)
        Log.debug(f"Summary: {context.summary[:100]}...", s3_key=context.s3_key)
        return context


class MarkCompleteStep(PipelineStep):
    def __init__(self, letter_repo: LetterRepository) -> None:
        self._letter_repo = letter_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.summary is None or context.patient_id is None:
            raise ValueError("PipelineContext.summary and patient_id must be set before completion")
        self._letter_repo.mark_complete(context.s3_key, context.summary, context.patient_id)
        Log.info("Letter marked as complete", s3_key=context.s3_key)
        return context
