# ABOUTME: Resumable record queue stored as one "[word][definition][origin]" line per record
# ABOUTME: Used as the harvest checkpoint and as the hand-off file replayed by the delivery client

import re
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from lexicon_harvest.config import get_config
from lexicon_harvest.core.models import Record
from lexicon_harvest.extraction.base import HarvestError
from lexicon_harvest.utils.logging import get_logger

MIN_FIELDS = 3

# A bracketed field; "\]" and "\\" are escapes inside it
_FIELD = re.compile(r"\[((?:[^\]\\]|\\.)*)\]")
_ESCAPE = re.compile(r"\\(.)")


class MalformedLine(HarvestError):
    """Raised for a queue line with fewer than three bracketed fields."""

    def __init__(self, line_number: int, line: str):
        super().__init__(f"Malformed queue line {line_number}: {line!r}")
        self.line_number = line_number
        self.line = line


class SaveOutcome(str, Enum):
    SAVED = "saved"
    NOTHING_TO_SAVE = "nothing_to_save"


class QueueLoadResult(BaseModel):
    """Records read back from a queue file, plus the lines that had to be skipped."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    records: list[Record] = Field(default_factory=list)
    malformed: list[MalformedLine] = Field(default_factory=list)


def encode_field(value: str) -> str:
    value = value.replace("\\", "\\\\").replace("]", "\\]")
    return "[" + value.replace("\r", " ").replace("\n", " ") + "]"


def encode_record(record: Record) -> str:
    return "".join(encode_field(value) for value in (record.word, record.definition, record.origin))


def decode_line(line: str, line_number: int = 0) -> Record:
    """Parse one queue line. Groups beyond the third are ignored.

    Raises:
        MalformedLine: If the line holds fewer than three bracketed fields
    """
    fields = [_ESCAPE.sub(r"\1", raw).strip() for raw in _FIELD.findall(line)]
    if len(fields) < MIN_FIELDS:
        raise MalformedLine(line_number, line)
    word, definition, origin = fields[:MIN_FIELDS]
    return Record(word=word, definition=definition, origin=origin)


class QueueStore:
    """Reads and writes the record queue file."""

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path is not None else get_config().queue_path
        self.logger = get_logger(__name__)

    def save(self, records: Sequence[Record], path: str | Path | None = None) -> SaveOutcome:
        """Write ``records`` to the queue file, replacing it.

        An empty queue writes nothing, so no file is guaranteed to exist afterwards.

        Raises:
            OSError: If the file cannot be written
        """
        target = Path(path) if path is not None else self.path

        if not records:
            self.logger.info("No records to save, queue file left untouched", path=str(target))
            return SaveOutcome.NOTHING_TO_SAVE

        content = "\n".join(encode_record(record) for record in records)
        try:
            target.write_text(content, encoding="utf-8")
        except OSError as e:
            self.logger.error("Failed to save record queue", path=str(target), error=str(e))
            raise

        self.logger.info("Saved record queue", path=str(target), record_count=len(records))
        return SaveOutcome.SAVED

    def load(self, path: str | Path | None = None) -> QueueLoadResult:
        """Read the queue file back, skipping blank and malformed lines.

        Raises:
            FileNotFoundError: If the queue file does not exist
        """
        source = Path(path) if path is not None else self.path
        result = QueueLoadResult()

        # Records are separated by "\n" only; other line breaks may occur inside a field
        for line_number, line in enumerate(source.read_text(encoding="utf-8").split("\n"), start=1):
            if not line.strip():
                continue
            try:
                result.records.append(decode_line(line, line_number))
            except MalformedLine as e:
                self.logger.warning("Skipping malformed queue line", path=str(source), line_number=line_number)
                result.malformed.append(e)

        self.logger.info(
            "Loaded record queue",
            path=str(source),
            record_count=len(result.records),
            malformed_count=len(result.malformed),
        )
        return result
