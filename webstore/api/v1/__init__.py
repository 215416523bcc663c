"""API v1 router aggregation."""

from fastapi import APIRouter

from webstore.api.v1 import reporting

api_router = APIRouter()

api_router.include_router(reporting.router, prefix="/reporting", tags=["reporting"])
