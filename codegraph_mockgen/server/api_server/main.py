from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from codegraph_mockgen import __version__
from codegraph_mockgen.common.exceptions import MockgenError
from codegraph_mockgen.infra.config.settings import MockgenSettings, get_settings
from codegraph_mockgen.infra.observability.logging import get_logger, setup_logging
from codegraph_mockgen.server.api_server.routes import health, mock
from codegraph_mockgen.service import MockService

logger = get_logger(__name__)


def create_app(settings: MockgenSettings | None = None, service: MockService | None = None) -> FastAPI:
    """
    Build the HTTP application.

    Args:
        settings: Configuration (defaults to environment settings)
        service: MockService to serve requests with (built from settings if omitted)
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Mockgen API",
        description="Generate Go interface mocks from source text.",
        version=__version__,
    )
    app.state.mock_service = service or MockService(settings=settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=settings.cors_allow_origin_regex,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Origin"],
        expose_headers=["Content-Length"],
        max_age=12 * 60 * 60,
    )

    @app.exception_handler(MockgenError)
    async def mockgen_error_handler(request: Request, exc: MockgenError):
        logger.warning("request_failed", path=request.url.path, kind=exc.kind, error=exc.message)
        return JSONResponse(status_code=exc.http_status_code, content=exc.to_payload())

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(mock.router, tags=["mock"])
    return app


def _create_default_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    return create_app(settings)


app = _create_default_app()
