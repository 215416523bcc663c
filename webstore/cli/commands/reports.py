"""Report commands."""

import asyncio
from datetime import datetime

import typer
from rich.console import Console

from webstore.core.exceptions import APIException
from webstore.core.reporting.definitions import get_report_definitions
from webstore.core.reporting.engine import ReportingEngine
from webstore.core.reporting.sinks import ConsoleSink
from webstore.core.reporting.sources.sqlalchemy_data_source import SQLAlchemyDataSource

app = typer.Typer(help="Run analytical reports")
console = Console()


def _parse_now(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        console.print(f"[red]✗ Invalid --now value: {value} (expected ISO 8601)[/red]")
        raise typer.Exit(2)


@app.command("list")
def list_reports() -> None:
    """List available reports."""
    console.print("\n[bold cyan]Available reports:[/bold cyan]")
    for definition in get_report_definitions().values():
        marker = " [dim](time-windowed)[/dim]" if definition.time_windowed else ""
        console.print(
            f"  • [green]{definition.report_id}[/green] - {definition.title}{marker}"
        )


@app.command()
def run(
    report_id: str = typer.Argument(..., help="Report to execute"),
    now: str = typer.Option(None, "--now", help="Evaluation time (ISO 8601)"),
) -> None:
    """Execute a single report and print its rows."""
    from webstore.core.db.session import SessionLocal

    evaluation_time = _parse_now(now)
    db = SessionLocal()
    try:
        engine = ReportingEngine(SQLAlchemyDataSource(db))
        result = asyncio.run(engine.execute(report_id, now=evaluation_time))
    except APIException as e:
        console.print(f"[red]✗ {e.message}[/red]")
        raise typer.Exit(1)
    finally:
        db.close()

    ConsoleSink(console).emit(result.title, result.rows)


@app.command("run-all")
def run_all(
    now: str = typer.Option(None, "--now", help="Evaluation time (ISO 8601)"),
) -> None:
    """Execute every report in order."""
    from webstore.core.db.session import SessionLocal

    evaluation_time = _parse_now(now)
    db = SessionLocal()
    try:
        engine = ReportingEngine(SQLAlchemyDataSource(db))
        failed = asyncio.run(engine.run_all(ConsoleSink(console), now=evaluation_time))
    except APIException as e:
        console.print(f"[red]✗ {e.message}[/red]")
        raise typer.Exit(1)
    finally:
        db.close()

    if failed:
        console.print(f"\n[red]✗ {len(failed)} report(s) failed:[/red]")
        for report_id in failed:
            console.print(f"  • {report_id}")
        raise typer.Exit(1)
    console.print(f"[green]✓ Executed {len(get_report_definitions())} report(s)[/green]")
