from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(slots=True)
class PipelineContext:
    bucket: str
    s3_key: str
    raw_bytes: bytes = b""
    extracted_text: str = ""
    nhs_number: str | None = None
    patient_id: str | None = None
    summary: str | None = None
    error_reason: str = ""
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
