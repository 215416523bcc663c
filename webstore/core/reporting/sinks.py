"""Result sinks that receive executed reports."""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table
from rich.text import Text


class BaseReportSink(ABC):
    """Destination for report results. Sinks only read the rows they receive."""

    @abstractmethod
    def emit(self, title: str, rows: list[BaseModel]) -> None:
        """Receive one report's title and ordered rows."""
        pass


class MemorySink(BaseReportSink):
    """Sink collecting results in memory."""

    def __init__(self) -> None:
        self.results: list[tuple[str, list[BaseModel]]] = []

    def emit(self, title: str, rows: list[BaseModel]) -> None:
        self.results.append((title, list(rows)))


def format_value(value: Any) -> str:
    """Render a row value for display.

    Decimals get two places, datetimes are ISO formatted, nested rows are
    rendered one per line and None becomes '-'.
    """
    if value is None:
        return "-"
    if isinstance(value, Decimal):
        return f"{value:.2f}"
    if isinstance(value, datetime):
        return value.isoformat(sep=" ", timespec="seconds")
    if isinstance(value, BaseModel):
        return ", ".join(format_value(v) for v in value.model_dump().values())
    if isinstance(value, list):
        return "\n".join(format_value(v) for v in value) or "-"
    return str(value)


class ConsoleSink(BaseReportSink):
    """Sink rendering each report as a rich table."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def emit(self, title: str, rows: list[BaseModel]) -> None:
        table = Table(title=Text(f"=== {title} ==="), title_justify="left")
        if not rows:
            self.console.print(table.title)
            self.console.print("[yellow]No rows[/yellow]\n")
            return

        columns = list(type(rows[0]).model_fields)
        for column in columns:
            table.add_column(column.replace("_", " ").title())
        for row in rows:
            # Cells are data, not console markup
            table.add_row(
                *(Text(format_value(getattr(row, column))) for column in columns)
            )
        self.console.print(table)
        self.console.print()
