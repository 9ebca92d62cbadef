# ABOUTME: Harvest pipeline resolving frequent words into dictionary records, one word at a time
# ABOUTME: Fetch, parse, clean, extract and assemble per word, with a fixed pause between lookups

import asyncio
from collections.abc import Callable, Iterable

from lexicon_harvest.config import get_config
from lexicon_harvest.core.assembler import assemble
from lexicon_harvest.core.models import HarvestResult, ProgressEvent, ProgressKind, Record
from lexicon_harvest.extraction.analysis.definitions import extract_definitions
from lexicon_harvest.extraction.analysis.noise import strip_boilerplate, strip_scripts
from lexicon_harvest.extraction.analysis.origin import extract_origin
from lexicon_harvest.extraction.base import (
    HarvestError,
    NoUsableContent,
    PageNotFound,
    PageSource,
    WordSource,
)
from lexicon_harvest.extraction.wiki.wiktionary import parse_document
from lexicon_harvest.utils.logging import get_logger, log_extraction_step

ProgressCallback = Callable[[ProgressEvent], None]


class HarvestPipeline:
    """Sequential word-to-record pipeline.

    Each word is fully resolved before the next one starts, and every lookup is
    followed by ``request_delay_ms`` of sleep to throttle the dictionary. A
    failing word is logged and skipped; only the word source can abort a run.
    """

    def __init__(
        self,
        pages: PageSource,
        source: WordSource | None = None,
        progress_callback: ProgressCallback | None = None,
        request_delay_ms: int | None = None,
        origin_marker: str | None = None,
        max_definitions: int | None = None,
        min_word_length: int | None = None,
    ):
        config = get_config()
        self.pages = pages
        self.source = source
        self.progress_callback = progress_callback
        self.request_delay = (request_delay_ms if request_delay_ms is not None else config.request_delay_ms) / 1000
        self.origin_marker = origin_marker or config.origin_marker
        self.max_definitions = max_definitions or config.max_definitions
        self.min_word_length = min_word_length if min_word_length is not None else config.min_word_length
        self.logger = get_logger(__name__)

    def is_eligible(self, word: str) -> bool:
        return len(word) > self.min_word_length

    def extract_record(self, word: str, html: str) -> Record:
        """Turn the page markup of ``word`` into a record.

        The origin is read before boilerplate removal because the etymology box
        is one of the boilerplate elements.

        Raises:
            NoUsableContent: If the page has no acceptable definition
        """
        doc = parse_document(html)
        strip_scripts(doc)
        origin = extract_origin(doc, self.origin_marker)
        strip_boilerplate(doc)
        definitions = extract_definitions(doc, self.max_definitions)

        record = assemble(word, definitions, origin)
        if record is None:
            raise NoUsableContent(f"No usable definitions for {word!r}")
        return record

    @log_extraction_step("resolve_word", expected=(PageNotFound, NoUsableContent))
    async def resolve_word(self, word: str) -> Record:
        """Fetch and extract the record for a single word.

        Raises:
            PageNotFound: If the dictionary has no page for the word
            PageFetchError: If the page could not be retrieved
            NoUsableContent: If the page has no acceptable definition
        """
        html = await self.pages.fetch_page(word)
        return self.extract_record(word, html)

    async def harvest(self, count: int, existing: list[Record] | None = None) -> HarvestResult:
        """List ``count`` frequent words and resolve them.

        Raises:
            SourceUnavailable: If the word source fails
        """
        if self.source is None:
            raise ValueError("HarvestPipeline.harvest needs a word source")
        words = await self.source.list(count)
        return await self.run(words, existing=existing)

    async def run(self, words: Iterable[str], existing: list[Record] | None = None) -> HarvestResult:
        """Resolve ``words`` in order, appending accepted records to the queue.

        Words already present in ``existing`` are not looked up again; the
        existing records lead the resulting queue.
        """
        result = HarvestResult(records=list(existing or []))
        result.resumed = len(result.records)
        known = {record.word for record in result.records}

        candidates = []
        for word in words:
            if not self.is_eligible(word):
                result.ineligible += 1
            elif word not in known:
                candidates.append(word)

        total = len(candidates)
        self.logger.info(
            "Starting harvest", candidates=total, ineligible=result.ineligible, resumed=result.resumed
        )
        self._emit(ProgressKind.STARTED, total=total)

        for index, word in enumerate(candidates, start=1):
            result.attempted += 1
            try:
                record = await self.resolve_word(word)
            except PageNotFound as e:
                result.not_found += 1
                self._emit(ProgressKind.SKIPPED, word, index, total, str(e))
            except NoUsableContent as e:
                result.no_content += 1
                self._emit(ProgressKind.SKIPPED, word, index, total, str(e))
            except HarvestError as e:
                result.failed += 1
                self._emit(ProgressKind.FAILED, word, index, total, str(e))
            except Exception as e:
                self.logger.error(
                    "Unexpected error resolving word", word=word, error=str(e), error_type=type(e).__name__
                )
                result.failed += 1
                self._emit(ProgressKind.FAILED, word, index, total, str(e))
            else:
                result.records.append(record)
                self._emit(ProgressKind.RESOLVED, word, index, total, record.definition)

            await asyncio.sleep(self.request_delay)

        self.logger.info(
            "Harvest finished",
            accepted=result.accepted,
            attempted=result.attempted,
            not_found=result.not_found,
            no_content=result.no_content,
            failed=result.failed,
        )
        self._emit(ProgressKind.FINISHED, index=total, total=total)
        return result

    def _emit(
        self,
        kind: ProgressKind,
        word: str | None = None,
        index: int = 0,
        total: int = 0,
        detail: str | None = None,
    ) -> None:
        if self.progress_callback is None:
            return
        self.progress_callback(ProgressEvent(kind=kind, word=word, index=index, total=total, detail=detail))
