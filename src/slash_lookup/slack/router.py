"""Slash-command webhook router."""

from fastapi import APIRouter, Depends, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from slash_lookup.models.request import IncomingRequest
from slash_lookup.slack.handlers import Resolver, handle_command

router = APIRouter(prefix="", tags=["slack"])

COMMANDS_PATH = "/slack/commands"

# Common verbs are routed here so the validator answers them; anything else
# is caught by slack_http_exception_handler.
_ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_signing_secret(request: Request) -> str:
    """Signing secret loaded once by the application lifespan."""
    return request.app.state.slack_secret


def get_resolver(request: Request) -> Resolver:
    """Lookup collaborator created by the application lifespan."""
    return request.app.state.resolver


@router.api_route(COMMANDS_PATH, methods=_ROUTED_METHODS)
async def slack_commands(
    request: Request,
    secret: str = Depends(get_signing_secret),
    resolve: Resolver = Depends(get_resolver),
) -> PlainTextResponse:
    """Receive a Slack slash command and reply with plain text.

    The raw body is read before any form parsing so the signature is checked
    against the exact bytes Slack signed.
    """
    incoming = IncomingRequest(
        method=request.method,
        headers=dict(request.headers),
        raw_body=await request.body(),
    )
    response = await handle_command(incoming, secret, resolve)
    return PlainTextResponse(response.body, status_code=response.status_code)


async def slack_http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Answer unrouted verbs on the command endpoint with an empty 405.

    Every other HTTP error keeps FastAPI's default JSON body.
    """
    if exc.status_code == 405 and request.url.path == COMMANDS_PATH:
        return PlainTextResponse("", status_code=405, headers=exc.headers)
    return await http_exception_handler(request, exc)
