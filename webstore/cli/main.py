"""Main CLI entry point for WebStore reporting."""

import typer

import webstore.core.logging  # noqa: F401  (configures application loggers)
from webstore.cli.commands import reports

app = typer.Typer(
    name="webstore",
    help="WebStore reporting CLI",
    add_completion=False,
)

# Register subcommands
app.add_typer(reports.app, name="reports")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
