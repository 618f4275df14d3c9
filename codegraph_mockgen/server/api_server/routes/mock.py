"""
Mock API Routes

Endpoints:
    POST /mock    - Raw Go source with exactly one interface in, stub source out
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from codegraph_mockgen.common.exceptions import InvalidInputError
from codegraph_mockgen.infra.observability.logging import get_logger
from codegraph_mockgen.service import MockService

logger = get_logger(__name__)

router = APIRouter()


def get_mock_service(request: Request) -> MockService:
    """MockService created at app start-up."""
    return request.app.state.mock_service


@router.post("/mock", response_class=PlainTextResponse)
async def mock_interface(request: Request, service: MockService = Depends(get_mock_service)):
    """
    Generate the mock of the single interface in the request body.

    Errors are returned as `{"error", "kind", "details"}` by the app's
    MockgenError handler.
    """
    body = await request.body()
    try:
        raw = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidInputError("request body must be UTF-8 encoded Go source") from e

    rendered = service.process_one(raw)
    return PlainTextResponse(rendered)
