"""FastAPI application entrypoint for docblocks service mode."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

try:  # pragma: no cover - optional dependency
    from fastapi import Depends, FastAPI
    from fastapi.responses import JSONResponse
    from pydantic import BaseModel

    _FASTAPI_AVAILABLE = True
except ModuleNotFoundError:  # pragma: no cover - service mode optional
    FastAPI = None  # type: ignore[assignment]
    Depends = None  # type: ignore[assignment]
    JSONResponse = None  # type: ignore[assignment]
    BaseModel = object  # type: ignore[assignment]
    _FASTAPI_AVAILABLE = False

from ..frontmatter import FrontMatterError
from ..parser import Parser


class ParseRequest(BaseModel):
    content: str
    extension: Optional[str] = None


class ParseResponse(BaseModel):
    components: List[Dict[str, Any]]


class HealthResponse(BaseModel):
    status: str


def _default_parser() -> Parser:
    return Parser()


def create_app(
    parser_factory: Callable[[], Parser] = _default_parser,
) -> FastAPI:
    """Create the FastAPI application exposing the docblocks parser."""

    if not _FASTAPI_AVAILABLE:  # pragma: no cover - validated via unit tests
        raise RuntimeError(
            "FastAPI is required for service mode. Install it with `pip install docblocks[service]`."
        )

    app = FastAPI(title="docblocks", version="1.0.0")

    def get_parser() -> Parser:
        return parser_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/parse", response_model=ParseResponse)
    def parse_content(
        payload: ParseRequest,
        parser: Parser = Depends(get_parser),
    ) -> ParseResponse:
        components = parser.parse(payload.content, payload.extension)
        return ParseResponse(components=[component.to_dict() for component in components])

    @app.exception_handler(FrontMatterError)
    async def front_matter_error_handler(
        _: Any, exc: FrontMatterError
    ) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    if not _FASTAPI_AVAILABLE:
        raise RuntimeError(
            "FastAPI is required for service mode. Install it with `pip install docblocks[service]`."
        )

    try:
        import uvicorn
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise RuntimeError(
            "uvicorn is required to run the service. Install it with `pip install docblocks[service]`."
        ) from exc

    app = create_app()
    uvicorn.run(app, host=host, port=port)
