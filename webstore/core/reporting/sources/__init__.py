"""Data source implementations for reporting."""

from webstore.core.reporting.sources.sqlalchemy_data_source import SQLAlchemyDataSource

__all__ = ["SQLAlchemyDataSource"]
