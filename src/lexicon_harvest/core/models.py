# ABOUTME: Domain models for the harvest pipeline - records, progress events and run results
# ABOUTME: Pydantic models shared by the extraction core, the queue store and the delivery client

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFINITION_SEPARATOR = " | "


class Record(BaseModel):
    """One accepted word with its joined definitions and origin fragment.

    ``origin`` is empty when no origin was found; the "desconocido" sentinel is
    applied by the delivery client, not here.
    """

    model_config = ConfigDict(frozen=True)

    word: str = Field(description="The looked-up word")
    definition: str = Field(description="Up to five definitions joined by ' | '")
    origin: str = Field(default="", description="Origin fragments joined by ' | ', or empty")

    @property
    def definitions(self) -> list[str]:
        return self.definition.split(DEFINITION_SEPARATOR)

    @property
    def has_origin(self) -> bool:
        return bool(self.origin)


class ProgressKind(str, Enum):
    """Kinds of progress events emitted by the harvest loop."""

    STARTED = "started"
    RESOLVED = "resolved"
    SKIPPED = "skipped"
    FAILED = "failed"
    FINISHED = "finished"


class ProgressEvent(BaseModel):
    """A single state change of the harvest loop, for external reporters."""

    kind: ProgressKind
    word: str | None = None
    index: int = 0
    total: int = 0
    detail: str | None = None


class HarvestResult(BaseModel):
    """Outcome of a harvest run."""

    records: list[Record] = Field(default_factory=list)
    attempted: int = 0
    ineligible: int = 0
    not_found: int = 0
    no_content: int = 0
    failed: int = 0
    resumed: int = 0

    @property
    def accepted(self) -> int:
        """Records produced by this run, excluding resumed ones."""
        return len(self.records) - self.resumed

    @property
    def skipped(self) -> int:
        return self.not_found + self.no_content + self.failed
