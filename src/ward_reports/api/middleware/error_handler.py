"""Global exception handlers mapping domain exceptions to HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ward_reports.exceptions import (
    AssemblyCancelledError,
    FatalAssemblyError,
    LayoutError,
    WardReportError,
)


def register_error_handlers(app: FastAPI) -> None:
    """Register exception-to-HTTP-status mappings."""

    @app.exception_handler(FatalAssemblyError)
    async def handle_fatal_assembly(request: Request, exc: FatalAssemblyError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "type": "fatal_assembly_error",
                "failures": [f.to_dict() for f in exc.failures],
            },
        )

    @app.exception_handler(AssemblyCancelledError)
    async def handle_cancelled(request: Request, exc: AssemblyCancelledError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"error": str(exc), "type": "assembly_cancelled"})

    @app.exception_handler(LayoutError)
    async def handle_layout_error(request: Request, exc: LayoutError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "layout_error"})

    @app.exception_handler(WardReportError)
    async def handle_generic_error(request: Request, exc: WardReportError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "ward_report_error"})
