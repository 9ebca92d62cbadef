# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Provides commands to harvest dictionary records, look up one word and deliver the queue

from pathlib import Path

import asyncclick as click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from lexicon_harvest.config import get_config
from lexicon_harvest.core.models import Record
from lexicon_harvest.core.pipeline import HarvestPipeline
from lexicon_harvest.extraction.base import HarvestError, SourceUnavailable
from lexicon_harvest.extraction.source import FrequencyListSource
from lexicon_harvest.extraction.wiki.wiktionary import WiktionaryPageFetcher
from lexicon_harvest.persistence.queue_store import QueueStore, SaveOutcome
from lexicon_harvest.services.delivery import BackendDeliveryClient
from lexicon_harvest.utils.logging import (
    LoggingMode,
    configure_logging,
    get_logging_status,
    with_pipeline_context,
    with_word_context,
)
from lexicon_harvest.utils.logging.progress import HarvestProgressReporter
from lexicon_harvest.utils.rich_tables import (
    create_delivery_report_table,
    create_harvest_summary_table,
    create_logging_status_table,
    create_record_table,
    create_records_table,
    print_rich_table,
)

console = Console()


async def _deliver_records(records: list[Record], json_output: bool, malformed: int = 0) -> None:
    """Deliver records to the backend and display the report.

    Raises:
        click.ClickException: If the endpoint is missing or any record was not delivered
    """
    client = BackendDeliveryClient()
    if not client.is_configured:
        await client.close()
        raise click.ClickException("Delivery endpoint not configured (set LEXICON_HARVEST_DELIVERY_ENDPOINT)")

    try:
        report = await client.deliver_all(records)
    finally:
        await client.close()

    if not json_output:
        print_rich_table(console, create_delivery_report_table(report, malformed=malformed))

    if not report.success:
        failed_words = ", ".join(failure.word for failure in report.failures)
        raise click.ClickException(
            f"{len(report.failures)} of {len(records)} records could not be delivered: {failed_words}"
        )


@click.command()
@click.option(
    "--count", "-n", type=click.IntRange(min=1), default=None, help="Number of frequent words to look up"
)
@click.option("--output", "-o", type=click.Path(path_type=Path), default=None, help="Record queue file")
@click.option("--resume", is_flag=True, help="Keep records from an existing queue file and skip their words")
@click.option("--deliver", is_flag=True, help="Deliver the queue to the backend after saving")
@click.pass_context
async def harvest(ctx, count: int | None, output: Path | None, resume: bool, deliver: bool):
    """
    📚 Harvest definitions and origins for the most frequent words.

    Looks up every word on Wiktionary, one at a time, and saves the accepted
    records to the queue file as [word][definition][origin] lines.
    """
    await _harvest_async(count, output, resume, deliver, ctx.obj["json_output"])


async def _harvest_async(count: int | None, output: Path | None, resume: bool, deliver: bool, json_output: bool):
    config = get_config()
    count = count if count is not None else config.word_count
    store = QueueStore(output)

    with with_pipeline_context("harvest", word_count=count) as logger:
        existing: list[Record] = []
        if resume and store.path.exists():
            loaded = store.load()
            existing = loaded.records
            logger.info("Resuming from queue file", path=str(store.path), records=len(existing))

        if not json_output:
            console.print(
                Panel.fit(
                    f"📚 [bold cyan]Lexicon Harvest[/bold cyan]\nWords: {count} · Queue: {store.path}",
                    border_style="magenta",
                )
            )

        source = FrequencyListSource()
        pages = WiktionaryPageFetcher()
        try:
            if json_output:
                pipeline = HarvestPipeline(pages=pages, source=source)
                result = await pipeline.harvest(count, existing=existing)
            else:
                with HarvestProgressReporter(console=console) as reporter:
                    pipeline = HarvestPipeline(pages=pages, source=source, progress_callback=reporter)
                    result = await pipeline.harvest(count, existing=existing)
        except SourceUnavailable as e:
            logger.error("Harvest aborted", error=str(e))
            raise click.ClickException(str(e)) from e
        finally:
            await source.close()
            await pages.close()

        if not json_output:
            print_rich_table(console, create_harvest_summary_table(result, str(store.path)))

        save_error: OSError | None = None
        try:
            outcome = store.save(result.records)
        except OSError as e:
            save_error = e
        else:
            if outcome == SaveOutcome.NOTHING_TO_SAVE and not json_output:
                console.print("[yellow]No word met the criteria, the queue file was not written.[/yellow]")

        delivery_error: click.ClickException | None = None
        if deliver and result.records:
            try:
                await _deliver_records(result.records, json_output)
            except click.ClickException as e:
                delivery_error = e

        if save_error is not None:
            message = f"Could not save queue to {store.path}: {save_error}"
            if delivery_error is not None:
                message += f"; {delivery_error.message}"
            raise click.ClickException(message)
        if delivery_error is not None:
            raise delivery_error


@click.command()
@click.argument("word")
@click.pass_context
async def lookup(ctx, word: str):
    """
    🔍 Look up a single word and show the extracted record.
    """
    await _lookup_async(word, ctx.obj["json_output"])


async def _lookup_async(word: str, json_output: bool):
    config = get_config()

    with with_word_context(word) as logger:
        pages = WiktionaryPageFetcher()
        pipeline = HarvestPipeline(pages=pages)
        try:
            record = await pipeline.resolve_word(word)
        except HarvestError as e:
            logger.warning("Lookup failed", error=str(e))
            if not json_output:
                console.print(f"[red]❌ {escape(str(e))}[/red]")
            return
        finally:
            await pages.close()

        logger.info("Lookup complete", definition=record.definition, origin=record.origin)

        if json_output:
            click.echo(record.model_dump_json())
        else:
            print_rich_table(console, create_record_table(record, config.unknown_origin))


@click.command()
@click.option("--input", "-i", "input_path", type=click.Path(path_type=Path), default=None, help="Record queue file")
@click.pass_context
async def deliver(ctx, input_path: Path | None):
    """
    📮 Deliver a saved record queue to the backend.

    Malformed lines are reported and skipped; a failed record does not stop
    the remaining ones.
    """
    await _deliver_async(input_path, ctx.obj["json_output"])


async def _deliver_async(input_path: Path | None, json_output: bool):
    store = QueueStore(input_path)

    with with_pipeline_context("deliver", path=str(store.path)) as logger:
        try:
            loaded = store.load()
        except FileNotFoundError as e:
            raise click.ClickException(f"Queue file not found: {store.path}") from e

        for error in loaded.malformed:
            logger.warning("Malformed queue line skipped", line_number=error.line_number)
            if not json_output:
                console.print(f"[yellow]⚠️ {escape(str(error))}[/yellow]")

        if not json_output:
            print_rich_table(console, create_records_table(loaded.records))

        if not loaded.records:
            if not json_output:
                console.print("[yellow]Nothing to deliver.[/yellow]")
            return

        await _deliver_records(loaded.records, json_output, malformed=len(loaded.malformed))


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    config = get_config()
    mode = LoggingMode.PRODUCTION if json_output else LoggingMode.INTERACTIVE

    # Use config defaults when CLI parameters are not provided
    final_log_level = log_level or config.log_level
    final_log_file = log_file or (str(config.log_file) if config.log_file else None)

    configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)


@click.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status()
    print_rich_table(console, create_logging_status_table(status))


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Output structured JSON logs instead of rich interface")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    📚 Lexicon Harvest - Spanish dictionary records from Wiktionary

    Looks up the most frequent Spanish words, extracts short definitions and
    their Latin origin, and queues the records for delivery to a backend.
    """
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    # Initialize logging once here instead of in each command
    _initialize_logging(json, log_level, log_file)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


app.add_command(harvest)
app.add_command(lookup)
app.add_command(deliver)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
