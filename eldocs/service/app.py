"""FastAPI application entrypoint for eldocs service mode."""

from __future__ import annotations

import asyncio
import dataclasses
from pathlib import Path
from typing import Any, Callable, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import ConfigError, EldocsConfig, load_config
from ..orchestrator import Orchestrator, RunResult


class GenerateRequest(BaseModel):
    path: str
    source_dir: Optional[str] = None
    output_dir: Optional[str] = None
    changed_only: Optional[bool] = None
    diff_base: Optional[str] = None
    use_ai: Optional[bool] = None


class GenerateResponse(BaseModel):
    status: str
    written: List[str]
    unchanged: List[str]
    skipped: List[str]
    failed: dict[str, str]


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def build_config(payload: GenerateRequest) -> EldocsConfig:
    """Translate a service request into the pipeline configuration."""
    config = load_config(Path(payload.path))
    overrides: dict[str, object] = {}
    if payload.source_dir:
        overrides["source_dir"] = Path(payload.source_dir)
    if payload.output_dir:
        overrides["output_dir"] = Path(payload.output_dir)
    if payload.changed_only is not None:
        overrides["changed_only"] = payload.changed_only
    if payload.diff_base:
        overrides["diff_base"] = payload.diff_base
    if payload.use_ai is not None:
        overrides["use_ai"] = payload.use_ai
    return dataclasses.replace(config, **overrides)


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing eldocs operations."""

    app = FastAPI(title="eldocs Service", version="1.0.0")

    async def get_orchestrator() -> Orchestrator:
        # A new orchestrator per request keeps runs independent.
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/generate", response_model=GenerateResponse)
    async def generate(
        payload: GenerateRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> GenerateResponse:
        def _run() -> RunResult:
            return orchestrator.run(build_config(payload))

        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(None, _run)
        return GenerateResponse(
            status="partial" if result.failed else "ok",
            written=[str(path) for path in result.written],
            unchanged=[str(path) for path in result.unchanged],
            skipped=[str(path) for path in result.skipped],
            failed={str(path): reason for path, reason in result.failed.items()},
        )

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(
        _: Any, exc: FileNotFoundError
    ) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(
        _: Any, exc: ConfigError
    ) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(RuntimeError)
    async def runtime_error_handler(
        _: Any, exc: RuntimeError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)
