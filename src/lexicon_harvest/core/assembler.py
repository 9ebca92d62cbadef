# ABOUTME: Record assembler combining a word, its definitions and its origin into one record
# ABOUTME: Drops words without definitions and normalizes whitespace in the joined definition

import re
from collections.abc import Sequence

from lexicon_harvest.core.models import DEFINITION_SEPARATOR, Record

_WHITESPACE = re.compile(r"\s+")


def normalize_definition(definitions: Sequence[str]) -> str:
    """Join definitions with " | " and collapse newlines and whitespace runs to single spaces."""
    joined = DEFINITION_SEPARATOR.join(definitions).replace("\n", " ")
    return _WHITESPACE.sub(" ", joined).strip()


def assemble(word: str, definitions: Sequence[str], origin: str) -> Record | None:
    """Build the record for ``word``, or ``None`` when there is nothing to define it with.

    An empty ``origin`` is kept empty.
    """
    if not definitions:
        return None
    return Record(word=word, definition=normalize_definition(definitions), origin=origin)
