# ABOUTME: Rich table utilities for harvest summaries, records and delivery reports
# ABOUTME: Provides pre-configured table generators for common data display patterns

from typing import Any

from rich.box import ROUNDED
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lexicon_harvest.core.models import HarvestResult, Record
from lexicon_harvest.services.delivery import DeliveryReport


def create_key_value_table(
    title: str,
    data: dict[str, str],
    title_style: str = "bold cyan",
    key_style: str = "bold blue",
    value_style: str = "green",
    box_style=ROUNDED,
) -> Table:
    """Create a key-value table.

    Args:
        title: Table title with emoji/styling
        data: Dictionary of key-value pairs to display
        title_style: Style for the table title
        key_style: Style for the key column
        value_style: Style for the value column
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        expand=False,
    )

    table.add_column("Field", style=key_style, width=None, no_wrap=False)
    table.add_column("Value", style=value_style, width=None, no_wrap=False)

    for key, value in data.items():
        table.add_row(key, str(value))

    return table


def create_multi_column_table(
    title: str,
    columns: list[tuple[str, str]],
    rows: list[list[str]],
    title_style: str = "bold cyan",
    header_style: str = "bold magenta",
    alternate_row_styles: list[str] | None = None,
    box_style=ROUNDED,
) -> Table:
    """Create a multi-column table with zebra striping.

    Args:
        title: Table title with emoji/styling
        columns: List of (column_name, column_style) tuples
        rows: List of row data
        title_style: Style for the table title
        header_style: Style for column headers
        alternate_row_styles: Alternating row styles for zebra striping
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style=header_style,
        border_style="cyan",
        title_justify="left",
        row_styles=alternate_row_styles or ["", "dim"],
        expand=True,
    )

    for name, style in columns:
        table.add_column(name, style=style)

    for row in rows:
        table.add_row(*row)

    return table


def create_record_table(record: Record, unknown_origin: str = "desconocido") -> Table:
    """Create a table showing one record, one row per definition."""
    data = {"📖 Palabra": escape(record.word)}
    for number, definition in enumerate(record.definitions, start=1):
        data[f"📝 Definición {number}"] = escape(definition)
    data["🏛️ Origen"] = escape(record.origin) if record.has_origin else f"[dim]{unknown_origin}[/dim]"

    return create_key_value_table(
        title=f"📦 {escape(record.word)}",
        data=data,
        title_style="bold magenta",
        key_style="cyan",
        value_style="white",
    )


def create_records_table(records: list[Record], limit: int = 20) -> Table:
    """Create a table listing the first ``limit`` records."""

    def _truncate(text: str, length: int) -> str:
        return text[:length] + "..." if len(text) > length else text

    rows = [
        [escape(record.word), escape(_truncate(record.definition, 80)), escape(record.origin) or "—"]
        for record in records[:limit]
    ]
    title = (
        f"📚 Records ({len(records)})" if len(records) <= limit else f"📚 Records (first {limit} of {len(records)})"
    )

    return create_multi_column_table(
        title=title,
        columns=[("Word", "bold cyan"), ("Definition", "white"), ("Origin", "yellow")],
        rows=rows,
    )


def create_harvest_summary_table(result: HarvestResult, queue_path: str | None = None) -> Table:
    """Create a summary table for a harvest run."""
    data = {
        "🔎 Looked up": str(result.attempted),
        "✅ Accepted": str(result.accepted),
        "♻️ Resumed": str(result.resumed),
        "🚫 Ineligible": str(result.ineligible),
        "❓ Not found": str(result.not_found),
        "📭 No usable content": str(result.no_content),
        "❌ Failed": str(result.failed),
        "📦 Queue size": str(len(result.records)),
    }
    if queue_path:
        data["💾 Queue file"] = queue_path

    return create_key_value_table(title="🏁 Harvest Summary", data=data, title_style="bold green")


def create_delivery_report_table(report: DeliveryReport, malformed: int = 0) -> Table:
    """Create a summary table for a delivery run, listing failures."""
    data = {
        "✅ Delivered": str(len(report.delivered)),
        "❌ Failed": str(len(report.failures)),
    }
    if malformed:
        data["⚠️ Malformed lines skipped"] = str(malformed)
    for number, failure in enumerate(report.failures, start=1):
        data[f"❌ {number}. {escape(failure.word)}"] = escape(failure.error)

    return create_key_value_table(
        title="📮 Delivery Report",
        data=data,
        title_style="bold green" if report.success else "bold red",
    )


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Create a styled table for logging configuration status.

    Args:
        status: Logging status dictionary

    Returns:
        Logging configuration table
    """
    log_files = status.get("log_files", {})
    data = {
        "🛠️ Mode": status.get("mode", "unknown"),
        "📁 Log Directory": status.get("log_directory") or "Not created",
        "📄 Main Log": log_files.get("main") or "—",
        "🧾 JSON Log": log_files.get("json") or "—",
        "🚨 Error Log": log_files.get("errors") or "—",
        "🔇 Suppressed": ", ".join(status.get("third_party_suppressed", [])),
    }

    return create_key_value_table(title="📊 Logging Configuration", data=data, title_style="bold blue")


def print_rich_table(console: Console, table: Table) -> None:
    """Print a Rich table with spacing."""
    console.print()
    console.print(table)
    console.print()
