# ABOUTME: Tests for the frequency list source covering corpus parsing and HTTP failures
# ABOUTME: HTTP calls are served by pytest-httpx

import httpx
import pytest

from lexicon_harvest.extraction.base import SourceUnavailable
from lexicon_harvest.extraction.source import FrequencyListSource, parse_frequency_corpus

CORPUS_URL = "https://example.org/es_50k.txt"
CORPUS = "de 9999\nque 9000\n\nno 8000\na 7000\nla 6000\nel 5000\n"


class TestParseFrequencyCorpus:
    def test_first_token_per_line(self):
        assert parse_frequency_corpus(CORPUS) == ["de", "que", "no", "a", "la", "el"]

    def test_handles_windows_line_endings_and_indentation(self):
        assert parse_frequency_corpus("  casa 10\r\ngato 5\r\n") == ["casa", "gato"]

    def test_duplicates_are_kept(self):
        assert parse_frequency_corpus("casa 2\ncasa 1\n") == ["casa", "casa"]


class TestFrequencyListSource:
    @pytest.fixture
    def source(self):
        return FrequencyListSource(corpus_url=CORPUS_URL, client=httpx.AsyncClient())

    @pytest.mark.asyncio
    async def test_list_returns_first_count_words(self, source, httpx_mock):
        httpx_mock.add_response(url=CORPUS_URL, text=CORPUS)

        assert await source.list(3) == ["de", "que", "no"]

    @pytest.mark.asyncio
    async def test_list_with_count_beyond_corpus(self, source, httpx_mock):
        httpx_mock.add_response(url=CORPUS_URL, text="casa 1\n")

        assert await source.list(50) == ["casa"]

    @pytest.mark.asyncio
    async def test_server_error_is_source_unavailable(self, source, httpx_mock):
        httpx_mock.add_response(url=CORPUS_URL, status_code=503)

        with pytest.raises(SourceUnavailable):
            await source.list(10)

    @pytest.mark.asyncio
    async def test_connection_error_is_source_unavailable(self, source, httpx_mock):
        httpx_mock.add_exception(httpx.ConnectError("connection refused"))

        with pytest.raises(SourceUnavailable, match="connection refused"):
            await source.list(10)

    @pytest.mark.asyncio
    async def test_count_must_be_positive(self, source):
        with pytest.raises(ValueError):
            await source.list(0)

    def test_default_client_sends_user_agent(self):
        source = FrequencyListSource()
        assert "lexicon-harvest" in source.http_client.headers["User-Agent"]
        assert source.corpus_url.endswith("es_50k.txt")
