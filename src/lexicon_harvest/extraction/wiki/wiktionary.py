# ABOUTME: Spanish Wiktionary page fetcher using the MediaWiki parse API
# ABOUTME: Resolves a word to its rendered page markup and parses it into a document tree

import httpx
from bs4 import BeautifulSoup

from lexicon_harvest.config import get_config
from lexicon_harvest.extraction.base import PageFetchError, PageNotFound
from lexicon_harvest.utils.logging import get_logger, log_api_call


def parse_document(html: str) -> BeautifulSoup:
    """Parse page markup into a document owned by the caller."""
    return BeautifulSoup(html, "html.parser")


class WiktionaryPageFetcher:
    """Fetches rendered page markup from the Wiktionary parse API."""

    def __init__(self, api_url: str | None = None, client: httpx.AsyncClient | None = None):
        config = get_config()
        self.api_url = api_url or config.wiktionary_api_url
        self.http_client = client or httpx.AsyncClient(  # Allow for dependency injection
            headers={"User-Agent": config.user_agent}, timeout=config.http_timeout
        )
        self.logger = get_logger(__name__)

    @log_api_call("wiktionary")
    async def fetch_page(self, word: str) -> str:
        """Return the rendered markup of the page for ``word``."""
        params = {"action": "parse", "page": word, "format": "json", "origin": "*"}

        self.logger.debug("Requesting dictionary page", word=word, api_url=self.api_url)

        try:
            response = await self.http_client.get(self.api_url, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise PageNotFound(f"No dictionary page for {word!r}") from e
            raise PageFetchError(f"Dictionary request for {word!r} failed: {e}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise PageFetchError(f"Dictionary request for {word!r} failed: {e}") from e

        html = self._extract_markup(data)
        if not html:
            error_code = data.get("error", {}).get("code") if isinstance(data, dict) else None
            raise PageNotFound(f"No dictionary page for {word!r}" + (f" ({error_code})" if error_code else ""))

        self.logger.debug("Retrieved dictionary page", word=word, markup_length=len(html))
        return html

    @staticmethod
    def _extract_markup(data: object) -> str | None:
        """Pull ``parse.text['*']`` out of a parse API response."""
        if not isinstance(data, dict):
            return None
        parse = data.get("parse")
        if not isinstance(parse, dict):
            return None
        text = parse.get("text")
        if not isinstance(text, dict):
            return None
        html = text.get("*")
        return html if isinstance(html, str) and html else None

    async def close(self) -> None:
        await self.http_client.aclose()
