# ABOUTME: Protocol interfaces and error taxonomy for the word extraction layer
# ABOUTME: Collaborators deliver word lists and dictionary markup; errors say what to skip or abort

from __future__ import annotations

from typing import Protocol


class HarvestError(Exception):
    """Base class for all harvest errors."""

    pass


class SourceUnavailable(HarvestError):
    """Raised when the frequency corpus cannot be fetched. Fatal to the run."""

    pass


class PageNotFound(HarvestError):
    """Raised when the dictionary has no page for a word."""

    pass


class PageFetchError(HarvestError):
    """Raised when a dictionary page could not be retrieved."""

    pass


class NoUsableContent(HarvestError):
    """Raised when a page yields no acceptable definition."""

    pass


class WordSource(Protocol):
    """Protocol for listing candidate words, most frequent first."""

    async def list(self, count: int) -> list[str]:
        """Return the first ``count`` words of the ranked corpus.

        Raises:
            SourceUnavailable: If the corpus cannot be delivered
        """
        ...


class PageSource(Protocol):
    """Protocol for fetching the dictionary markup of a word."""

    async def fetch_page(self, word: str) -> str:
        """Return the page markup for ``word``.

        Raises:
            PageNotFound: If the dictionary has no entry
            PageFetchError: If the page could not be retrieved
        """
        ...
