"""Custom exceptions for the reporting module."""

from typing import Any

from fastapi import status

from webstore.core.exceptions import APIException


class ReportNotFoundException(APIException):
    """Exception raised when a report id is not registered.

    Args:
        report_id: The unknown report identifier.
    """

    def __init__(self, report_id: str) -> None:
        super().__init__(
            code="REPORTING_REPORT_NOT_FOUND",
            message=f"Report '{report_id}' not found",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"report_id": report_id},
        )
        self.report_id = report_id


class DataSourceUnavailableException(APIException):
    """Exception raised when the data source cannot be read.

    Covers connectivity failures, timeouts and any other error raised by the
    underlying store while a report is fetching its records. The engine never
    retries; the failure belongs to the single report that triggered it.
    """

    def __init__(self, collection: str, reason: str) -> None:
        """Initialize data source unavailable exception.

        Args:
            collection: Entity collection being read (e.g., 'orders').
            reason: Underlying error message.
        """
        super().__init__(
            code="REPORTING_DATA_SOURCE_UNAVAILABLE",
            message=f"Could not read '{collection}' from the data source",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details={"collection": collection, "reason": reason},
        )
        self.collection = collection


class ReferentialIntegrityException(APIException):
    """Exception raised when a record references an entity that does not exist.

    Reports expect a referentially intact dataset, so a dangling reference
    (e.g., an order whose customer was deleted) is surfaced instead of being
    skipped.
    """

    def __init__(
        self, entity: str, key: Any, referenced_by: str | None = None
    ) -> None:
        """Initialize referential integrity exception.

        Args:
            entity: Missing entity type (e.g., 'Customer').
            key: Identifier that could not be resolved.
            referenced_by: Description of the referencing record (e.g., 'Order 7').
        """
        message = f"{entity} {key} does not exist"
        if referenced_by:
            message += f" (referenced by {referenced_by})"
        super().__init__(
            code="REPORTING_REFERENTIAL_INTEGRITY",
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"entity": entity, "key": key, "referenced_by": referenced_by},
        )
        self.entity = entity
        self.key = key
