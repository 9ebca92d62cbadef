# ABOUTME: Noise filter removing styling, scripts and boilerplate boxes from dictionary pages
# ABOUTME: Mutates the owned document in place and returns it; safe to apply repeatedly

from bs4 import BeautifulSoup

NOISE_TAGS = ("style", "script")

# Improper-definition notes, abbreviation markers, etymology boxes, reference lists, headers
BOILERPLATE_SELECTORS = (
    ".mw-parser-output .definicion-impropia",
    ".mnv",
    ".impropia",
    ".etim",
    ".referencias",
    ".encabezado",
)


def _remove_all(doc: BeautifulSoup, selector: str) -> None:
    for element in doc.select(selector):
        # Already gone with a removed ancestor
        if not element.decomposed:
            element.decompose()


def strip_scripts(doc: BeautifulSoup) -> BeautifulSoup:
    """Remove every ``style`` and ``script`` element."""
    _remove_all(doc, ", ".join(NOISE_TAGS))
    return doc


def strip_boilerplate(doc: BeautifulSoup) -> BeautifulSoup:
    """Remove every element matching one of ``BOILERPLATE_SELECTORS``."""
    for selector in BOILERPLATE_SELECTORS:
        _remove_all(doc, selector)
    return doc


def clean(doc: BeautifulSoup) -> BeautifulSoup:
    """Strip scripts then boilerplate from ``doc``, returning the same document."""
    return strip_boilerplate(strip_scripts(doc))
