"""Reporting engine for executing reports."""

import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from webstore.core.config import Settings, get_settings
from webstore.core.logging import log_report_executed, log_report_failed
from webstore.core.reporting.data_source import BaseDataSource
from webstore.core.reporting.definitions import ReportDefinition, get_report_definitions
from webstore.core.reporting.exceptions import (
    DataSourceUnavailableException,
    ReportNotFoundException,
)
from webstore.core.reporting.sinks import BaseReportSink

logger = logging.getLogger(__name__)


@dataclass
class ReportResult:
    """Ordered rows produced by one report execution."""

    report_id: str
    title: str
    generated_at: datetime
    rows: list[Any]


class ReportingEngine:
    """Engine for executing reports against a data source."""

    def __init__(self, data_source: BaseDataSource, settings: Settings | None = None):
        """Initialize reporting engine.

        Args:
            data_source: Data source every report reads from
            settings: Settings supplying report parameters (default: app settings)
        """
        self.data_source = data_source
        self.settings = settings or get_settings()
        self._definitions = get_report_definitions()

    def list_reports(self) -> list[ReportDefinition]:
        """Get the available reports in presentation order."""
        return list(self._definitions.values())

    def get_report(self, report_id: str) -> ReportDefinition:
        """Get a report definition.

        Raises:
            ReportNotFoundException: If the report id is not registered
        """
        definition = self._definitions.get(report_id)
        if not definition:
            raise ReportNotFoundException(report_id)
        return definition

    async def execute(self, report_id: str, now: datetime | None = None) -> ReportResult:
        """Execute a report.

        Args:
            report_id: Report identifier (e.g., 'pending-orders')
            now: Evaluation time for time-windowed reports (default: current UTC time)

        Returns:
            ReportResult with the ordered rows

        Raises:
            ReportNotFoundException: If the report id is not registered
            DataSourceUnavailableException: If the data source cannot be read
            ReferentialIntegrityException: If a record references a missing entity
        """
        definition = self.get_report(report_id)
        now = now or datetime.now(UTC)

        kwargs: dict[str, Any] = {
            argument: getattr(self.settings, setting)
            for argument, setting in definition.parameters
        }
        if definition.time_windowed:
            kwargs["now"] = now

        started = time.perf_counter()
        rows = await definition.operation(self.data_source, **kwargs)
        log_report_executed(
            report_id, len(rows), (time.perf_counter() - started) * 1000
        )

        return ReportResult(
            report_id=report_id,
            title=definition.title,
            generated_at=now,
            rows=rows,
        )

    async def run_all(
        self, sink: BaseReportSink, now: datetime | None = None
    ) -> list[str]:
        """Execute every report in order, sending each result to the sink.

        A report whose data source read fails is logged and skipped; the
        remaining reports still run.

        Args:
            sink: Destination for report results
            now: Evaluation time shared by all reports (default: current UTC time)

        Returns:
            IDs of the reports that failed
        """
        now = now or datetime.now(UTC)
        failed = []
        for definition in self.list_reports():
            try:
                result = await self.execute(definition.report_id, now=now)
            except DataSourceUnavailableException as e:
                log_report_failed(definition.report_id, e.code)
                failed.append(definition.report_id)
                continue
            sink.emit(result.title, result.rows)

        if failed:
            logger.warning(f"{len(failed)} report(s) failed: {', '.join(failed)}")
        return failed
