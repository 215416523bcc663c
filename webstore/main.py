from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import webstore.core.logging  # noqa: F401  (configures application loggers)
from webstore.api.v1 import api_router
from webstore.core.config import get_settings
from webstore.core.exceptions import APIException

settings = get_settings()

app = FastAPI(
    title="WebStore Reporting API",
    version="0.1.0",
    description="Read-only analytical reports over the WebStore dataset",
    docs_url="/docs",
    openapi_url="/openapi.json",
)

# CORS configuration
origins = [origin.strip() for origin in settings.CORS_ORIGINS.split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    """Handle APIException and return the standard error format."""
    # exc.detail already contains {"error": {...}}, add data: null for the envelope
    response_content = exc.detail.copy()
    response_content["data"] = None
    return JSONResponse(
        status_code=exc.status_code,
        content=response_content,
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors and format them as standard errors."""
    details: dict[str, list[str]] = {}
    for error in exc.errors():
        # Extract field path (e.g., ["query", "now"] -> "now")
        field_path = error["loc"]
        field_name = str(field_path[-1] if len(field_path) > 1 else field_path[0])
        details.setdefault(field_name, []).append(error["msg"])

    return JSONResponse(
        status_code=422,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Validation failed",
                "details": details,
            },
            "data": None,
        },
    )


@app.get("/healthz", tags=["system"])
def healthz():
    """Health check endpoint."""
    return {
        "status": "ok",
        "env": settings.ENV,
    }


# Include API routers
app.include_router(api_router, prefix="/api/v1")
