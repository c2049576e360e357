"""FastAPI <-> controller adapter."""

import json

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from presentation.controllers import (
    AdapterRequest,
    AdapterResponse,
    GenericController,
    StatusCode,
)


class InvalidJSONBody(Exception):
    """Request body is present but is not valid JSON."""


async def to_adapter_request(request: Request) -> AdapterRequest:
    """Collect query, path parameters and JSON body. An empty body becomes None."""
    raw = await request.body()

    body = None
    if raw.strip():
        try:
            body = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidJSONBody(str(e)) from e

    return AdapterRequest(
        query=dict(request.query_params),
        params=dict(request.path_params),
        body=body,
    )


def to_http_response(response: AdapterResponse) -> Response:
    if response.status == StatusCode.NO_CONTENT:
        return Response(status_code=int(StatusCode.NO_CONTENT))
    return JSONResponse(status_code=int(response.status), content=response.data)


async def dispatch(controller: GenericController, request: Request) -> Response:
    """Run a controller for a FastAPI request."""
    adapter_request = await to_adapter_request(request)
    return to_http_response(await controller.handle(adapter_request))
