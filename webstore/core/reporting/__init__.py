"""Reporting module: report operations, registry, engine and sinks."""

from webstore.core.reporting.data_source import BaseDataSource
from webstore.core.reporting.engine import ReportingEngine, ReportResult
from webstore.core.reporting.sinks import BaseReportSink, ConsoleSink, MemorySink

__all__ = [
    "BaseDataSource",
    "BaseReportSink",
    "ConsoleSink",
    "MemorySink",
    "ReportResult",
    "ReportingEngine",
]
