"""Reporting router for read-only report execution."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from webstore.core.db.deps import get_db
from webstore.core.reporting.engine import ReportingEngine
from webstore.core.reporting.sources.sqlalchemy_data_source import SQLAlchemyDataSource
from webstore.schemas.common import StandardResponse
from webstore.schemas.reporting import ReportResultResponse, ReportSummaryResponse

router = APIRouter()


def get_reporting_engine(
    db: Annotated[Session, Depends(get_db)],
) -> ReportingEngine:
    """Dependency to get a ReportingEngine bound to the request's session."""
    return ReportingEngine(SQLAlchemyDataSource(db))


@router.get(
    "/reports",
    response_model=StandardResponse[list[ReportSummaryResponse]],
    status_code=status.HTTP_200_OK,
    summary="List reports",
    description="List the available reports in presentation order.",
)
async def list_reports(
    engine: Annotated[ReportingEngine, Depends(get_reporting_engine)],
) -> StandardResponse[list[ReportSummaryResponse]]:
    """List available reports."""
    return StandardResponse(
        data=[
            ReportSummaryResponse.model_validate(definition)
            for definition in engine.list_reports()
        ],
        meta={"total": len(engine.list_reports())},
    )


@router.get(
    "/reports/{report_id}",
    response_model=StandardResponse[ReportResultResponse],
    status_code=status.HTTP_200_OK,
    summary="Execute report",
    description="Execute a report and return its ordered rows.",
)
async def execute_report(
    report_id: str,
    engine: Annotated[ReportingEngine, Depends(get_reporting_engine)],
    now: datetime | None = Query(
        default=None,
        description="Evaluation time for time-windowed reports (default: now)",
    ),
) -> StandardResponse[ReportResultResponse]:
    """Execute a report."""
    result = await engine.execute(report_id, now=now)

    return StandardResponse(
        data=ReportResultResponse(
            report_id=result.report_id,
            title=result.title,
            generated_at=result.generated_at,
            rows=[row.model_dump(mode="json") for row in result.rows],
        ),
        meta={"total": len(result.rows)},
    )
