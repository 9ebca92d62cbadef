# ABOUTME: Definition extractor reading the first few glosses from definition-list entries
# ABOUTME: Strips footnote markers, filters stylesheet leaks and template residue, caps the count

import re

from bs4 import BeautifulSoup, Tag

MAX_DEFINITIONS = 5
MIN_DEFINITION_LENGTH = 4

# Inline reference markers and plain links that may carry footnote numbers
FOOTNOTE_SELECTOR = "sup.reference, a"
FOOTNOTE_PATTERNS = (re.compile(r"\[\d+\]"), re.compile(r"\d+"))

STYLESHEET_LEAK_PREFIX = ".mw-parser-output"
TEMPLATE_BRACE = "{"


def is_footnote_marker(text: str) -> bool:
    """True for ``[12]`` or ``12`` style footnote text."""
    return any(pattern.fullmatch(text) for pattern in FOOTNOTE_PATTERNS)


def strip_footnotes(entry: Tag) -> Tag:
    """Remove footnote markers from a single ``dd`` element in place."""
    for marker in entry.select(FOOTNOTE_SELECTOR):
        if marker.decomposed:
            continue
        if is_footnote_marker(marker.get_text().strip()):
            marker.decompose()
    return entry


def is_acceptable_definition(text: str) -> bool:
    return (
        bool(text)
        and not text.startswith(STYLESHEET_LEAK_PREFIX)
        and TEMPLATE_BRACE not in text
        and len(text) >= MIN_DEFINITION_LENGTH
    )


def extract_definitions(doc: BeautifulSoup, limit: int = MAX_DEFINITIONS) -> list[str]:
    """Return up to ``limit`` cleaned definitions from the ``dd`` elements of ``doc``.

    Entries are kept in document order. Scanning stops as soon as ``limit``
    definitions were accepted, so later entries are never touched.
    """
    definitions: list[str] = []
    if limit < 1:
        return definitions

    for entry in doc.find_all("dd"):
        if entry.decomposed:
            continue
        text = strip_footnotes(entry).get_text().strip()
        if is_acceptable_definition(text):
            definitions.append(text)
            if len(definitions) == limit:
                break

    return definitions
