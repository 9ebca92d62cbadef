# ABOUTME: Frequency list source - lists the most common words of a ranked corpus
# ABOUTME: Fetches the plain-text corpus over HTTP and keeps the first token of each line

from __future__ import annotations

import httpx

from lexicon_harvest.config import get_config
from lexicon_harvest.extraction.base import SourceUnavailable
from lexicon_harvest.utils.logging import get_logger, log_api_call


def parse_frequency_corpus(text: str) -> list[str]:
    """Return the first whitespace-delimited token of every non-blank line, in order."""
    words = []
    for line in text.splitlines():
        tokens = line.split()
        if tokens:
            words.append(tokens[0])
    return words


class FrequencyListSource:
    """Word source backed by a ``word count`` frequency list."""

    def __init__(self, corpus_url: str | None = None, client: httpx.AsyncClient | None = None):
        config = get_config()
        self.corpus_url = corpus_url or config.corpus_url
        self.http_client = client or httpx.AsyncClient(  # Allow for dependency injection
            headers={"User-Agent": config.user_agent}, timeout=config.http_timeout
        )
        self.logger = get_logger(__name__)

    async def list(self, count: int) -> list[str]:
        """List the ``count`` most frequent words, most frequent first.

        Words are neither deduplicated nor length-checked here.
        """
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")

        text = await self._fetch_corpus()
        words = parse_frequency_corpus(text)[:count]

        self.logger.info("Listed frequent words", requested=count, listed=len(words), corpus_url=self.corpus_url)
        return words

    @log_api_call("frequency_corpus")
    async def _fetch_corpus(self) -> str:
        try:
            response = await self.http_client.get(self.corpus_url, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPError as e:
            self.logger.error("Frequency corpus unavailable", corpus_url=self.corpus_url, error=str(e))
            raise SourceUnavailable(f"Could not fetch frequency corpus: {e}") from e

        return response.text

    async def close(self) -> None:
        await self.http_client.aclose()
