"""Slack slash-command request authentication and validation.

Checks run in a fixed order and each one only runs if every earlier one
passed:

1. method is POST (405)
2. X-Slack-Request-Timestamp and X-Slack-Signature are present (403)
3. signature matches HMAC-SHA256 over ``v0:<timestamp>:<body>`` (403)
4. body is non-empty (400)
5. body parses as a form; ``text`` becomes the query

The body-empty check sits after authentication so unauthenticated callers
cannot learn anything beyond "forbidden".
"""

import hashlib
import hmac
import logging
from urllib.parse import parse_qsl

from slash_lookup.models.command import (
    Authenticated,
    Rejected,
    RejectionReason,
    SlashCommand,
    ValidationOutcome,
)
from slash_lookup.models.request import IncomingRequest

logger = logging.getLogger(__name__)

TIMESTAMP_HEADER = "X-Slack-Request-Timestamp"
SIGNATURE_HEADER = "X-Slack-Signature"


def compute_signature(secret: str, timestamp: str, body: bytes) -> str:
    """Return the ``v0=<hex>`` signature Slack would send for this body.

    The HMAC runs over the raw body bytes, so any byte sequence can be signed.
    """
    basestring = b"v0:" + timestamp.encode("utf-8") + b":" + body
    digest = hmac.new(secret.encode("utf-8"), basestring, hashlib.sha256).hexdigest()
    return f"v0={digest}"


def signatures_match(expected: str, supplied: str) -> bool:
    """Constant-time comparison of two signature strings."""
    return hmac.compare_digest(expected.encode("utf-8"), supplied.encode("utf-8"))


def parse_form_body(body: bytes) -> dict[str, str]:
    """Decode an application/x-www-form-urlencoded body into an ordered mapping.

    Blank values are kept. When a key repeats, the last value wins. Bytes that
    are not valid UTF-8 become U+FFFD rather than failing the request.
    """
    return dict(parse_qsl(body.decode("utf-8", errors="replace"), keep_blank_values=True))


def validate_request(request: IncomingRequest, secret: str) -> ValidationOutcome:
    """Decide whether a request is an authentic, well-formed slash command.

    Never raises for request content; every refusal comes back as
    ``Rejected`` with an internal reason.
    """
    if request.method != "POST":
        return _reject(RejectionReason.METHOD_NOT_ALLOWED, request)

    timestamp = request.header(TIMESTAMP_HEADER)
    signature = request.header(SIGNATURE_HEADER)
    if not timestamp or not signature:
        return _reject(RejectionReason.MISSING_SIGNATURE_HEADERS, request)

    expected = compute_signature(secret, timestamp, request.raw_body)
    if not signatures_match(expected, signature):
        return _reject(RejectionReason.SIGNATURE_MISMATCH, request)

    if not request.raw_body:
        return _reject(RejectionReason.EMPTY_BODY, request)

    fields = parse_form_body(request.raw_body)
    command = SlashCommand.model_validate(fields)
    logger.debug("Authenticated %s from user %s", command.command, command.user_id)
    return Authenticated(command=command)


def _reject(reason: RejectionReason, request: IncomingRequest) -> Rejected:
    logger.info(
        "Rejected %s request with %d: %s",
        request.method,
        reason.status_code,
        reason.value,
    )
    return Rejected(reason=reason)
