"""Slash-command orchestration: validate, look up, build the reply."""

import logging
from collections.abc import Awaitable, Callable

from slash_lookup.exceptions import LookupFailure
from slash_lookup.models.command import NO_RESULTS_TEXT, CommandResponse, Rejected
from slash_lookup.models.request import IncomingRequest
from slash_lookup.slack.verification import validate_request

logger = logging.getLogger(__name__)

Resolver = Callable[[str], Awaitable[str | None]]

LOOKUP_FAILURE_STATUS = 502


async def handle_command(
    request: IncomingRequest,
    secret: str,
    resolve: Resolver,
) -> CommandResponse:
    """Run one slash-command request through validation and lookup.

    - Rejected: the rejection status with an empty body, no lookup
    - match: 200 with the resolved text
    - no match: 200 with the fixed no-results text
    - LookupFailure: 502 with an empty body

    Cancellation of the enclosing request propagates through ``resolve``.
    """
    outcome = validate_request(request, secret)
    if isinstance(outcome, Rejected):
        return CommandResponse(status_code=outcome.status_code)

    query = outcome.command.query
    try:
        result = await resolve(query)
    except LookupFailure as exc:
        logger.error("Lookup failed for %r: %s", exc.term, exc, exc_info=True)
        return CommandResponse(status_code=LOOKUP_FAILURE_STATUS)

    if result is None:
        logger.info("No results for %r", query)
        return CommandResponse(status_code=200, body=NO_RESULTS_TEXT)

    logger.info("Resolved %r -> %s", query, result)
    return CommandResponse(status_code=200, body=result)
