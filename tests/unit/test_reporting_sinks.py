"""Unit tests for report result sinks."""

from datetime import datetime
from decimal import Decimal
from io import StringIO

from rich.console import Console

from webstore.core.reporting.sinks import ConsoleSink, MemorySink, format_value
from webstore.schemas.reporting import (
    CategoryProductRow,
    OrderReference,
    PendingOrderRow,
)


def _console() -> Console:
    return Console(file=StringIO(), width=200, color_system=None)


class TestFormatValue:
    def test_decimal_has_two_places(self):
        assert format_value(Decimal("18.5")) == "18.50"
        assert format_value(Decimal("-2.25")) == "-2.25"

    def test_none(self):
        assert format_value(None) == "-"

    def test_datetime(self):
        assert format_value(datetime(2024, 1, 1, 8, 30)) == "2024-01-01 08:30:00"

    def test_nested_rows_one_per_line(self):
        orders = [
            OrderReference(order_id=1, order_date=datetime(2024, 1, 1)),
            OrderReference(order_id=5, order_date=datetime(2024, 2, 29)),
        ]
        assert format_value(orders) == "1, 2024-01-01 00:00:00\n5, 2024-02-29 00:00:00"

    def test_empty_list(self):
        assert format_value([]) == "-"


def test_memory_sink_collects_results():
    sink = MemorySink()
    row = PendingOrderRow(
        order_id=1,
        customer_name="Ann Lee",
        order_date=datetime(2024, 1, 1),
        total=Decimal("10.00"),
    )

    sink.emit("Pending", [row])
    sink.emit("Empty", [])

    assert sink.results == [("Pending", [row]), ("Empty", [])]


def test_console_sink_renders_table():
    console = _console()
    row = CategoryProductRow(
        product_id=1,
        product_name="Laptop",
        top_store=None,
        orders=[OrderReference(order_id=3, order_date=datetime(2024, 1, 2))],
    )

    ConsoleSink(console).emit("Electronics", [row])

    output = console.file.getvalue()
    assert "=== Electronics ===" in output
    assert "Product Name" in output
    assert "Laptop" in output
    assert "3, 2024-01-02 00:00:00" in output


def test_console_sink_prints_bracketed_text_verbatim():
    console = _console()
    rows = [
        PendingOrderRow(
            order_id=1,
            customer_name="Ann [/] Lee",
            order_date=datetime(2024, 1, 1),
            total=Decimal("10.00"),
        ),
        PendingOrderRow(
            order_id=2,
            customer_name="Cable [bold]",
            order_date=datetime(2024, 1, 2),
            total=Decimal("5.00"),
        ),
    ]

    ConsoleSink(console).emit("Orders [beta]", rows)

    output = console.file.getvalue()
    assert "Ann [/] Lee" in output
    assert "Cable [bold]" in output
    assert "=== Orders [beta] ===" in output


def test_console_sink_empty_report():
    console = _console()

    ConsoleSink(console).emit("Recent Orders", [])

    output = console.file.getvalue()
    assert "=== Recent Orders ===" in output
    assert "No rows" in output
