# ABOUTME: Origin extractor finding "del latín ..." style etymology phrases in dictionary pages
# ABOUTME: Flattens candidate elements structurally, then pattern-matches the flattened text

"""
Origin phrases are embedded in arbitrary inline markup, e.g.

    <p>Del latín <i>cattus</i>, gato montés.</p>

A phrase ends at the first ``.``, ``,`` or ``;``, at the end of any inline
element, or at the end of the candidate element. Each candidate element is
flattened into plain text where the end of every child element is replaced by
a boundary mark, so those three terminators can be expressed as one pattern.
"""

import re
from functools import lru_cache

from bs4 import BeautifulSoup, Tag
from bs4.element import NavigableString, PreformattedString

CANDIDATE_TAGS = ["p", "li", "dd", "dt"]
FRAGMENT_SEPARATOR = " | "
DEFAULT_MARKER = "latín"

_BOUNDARY = "\x00"


@lru_cache(maxsize=16)
def origin_pattern(marker: str) -> re.Pattern[str]:
    """Pattern capturing the phrase that follows ``del <marker>``."""
    return re.compile(rf"del\s+{re.escape(marker)}\s+(.+?)(?:[.,;]|{_BOUNDARY}|\Z)", re.IGNORECASE)


def flatten_element(element: Tag) -> str:
    """Return the text of ``element`` with a boundary mark after each non-void child element."""
    parts: list[str] = []
    for child in element.children:
        if isinstance(child, Tag):
            parts.append(flatten_element(child))
            if not child.is_empty_element:
                parts.append(_BOUNDARY)
        elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            parts.append(str(child))
    return "".join(parts)


def find_origin_fragments(doc: BeautifulSoup, marker: str = DEFAULT_MARKER) -> list[str]:
    """Return the origin fragment of every candidate element, in document order."""
    pattern = origin_pattern(marker)
    fragments = []
    for element in doc.find_all(CANDIDATE_TAGS):
        match = pattern.search(flatten_element(element))
        if not match:
            continue
        fragment = match.group(1).replace(_BOUNDARY, "").strip()
        if fragment:
            fragments.append(fragment)
    return fragments


def extract_origin(doc: BeautifulSoup, marker: str = DEFAULT_MARKER) -> str:
    """Join all origin fragments of ``doc`` with " | "; empty string when there are none."""
    return FRAGMENT_SEPARATOR.join(find_origin_fragments(doc, marker))
