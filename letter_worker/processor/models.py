from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class ObjectRef:
    """One stored object named by an upload notification."""

    bucket: str
    key: str


class OutcomeKind(str, Enum):
    COMPLETED = "completed"
    FAILED = "failed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class LetterOutcome:
    """Result of one processing attempt for one letter."""

    s3_key: str
    kind: OutcomeKind
    elapsed_ms: int
    reason: str | None = None


@dataclass
class BatchResult:
    """Outcomes of every letter in one triggering batch, in order."""

    outcomes: list[LetterOutcome] = field(default_factory=list)

    def keys(self, kind: OutcomeKind) -> list[str]:
        return [o.s3_key for o in self.outcomes if o.kind is kind]

    @property
    def completed(self) -> list[str]:
        return self.keys(OutcomeKind.COMPLETED)

    @property
    def failed(self) -> list[str]:
        return self.keys(OutcomeKind.FAILED)

    @property
    def aborted(self) -> list[str]:
        return self.keys(OutcomeKind.ABORTED)

    def as_dict(self) -> dict[str, object]:
        return {
            "processed": len(self.outcomes),
            "completed": self.completed,
            "failed": self.failed,
            "aborted": self.aborted,
        }
