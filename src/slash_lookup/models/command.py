"""Slash-command payload, validation outcomes and handler response."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

NO_RESULTS_TEXT = "No results match your query"


class SlashCommand(BaseModel):
    """Form fields Slack posts for a slash command.

    Only ``text`` matters for the lookup; the rest is kept for logging.
    Unknown fields are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    text: str = ""
    command: str | None = None
    user_id: str | None = None
    user_name: str | None = None
    channel_id: str | None = None
    team_id: str | None = None
    response_url: str | None = None
    trigger_id: str | None = None

    @property
    def query(self) -> str:
        return self.text


class RejectionReason(str, Enum):
    """Why a request was refused. Several reasons can share a status code."""

    METHOD_NOT_ALLOWED = "method_not_allowed"
    MISSING_SIGNATURE_HEADERS = "missing_signature_headers"
    SIGNATURE_MISMATCH = "signature_mismatch"
    EMPTY_BODY = "empty_body"

    @property
    def status_code(self) -> int:
        return _REJECTION_STATUS[self]


_REJECTION_STATUS = {
    RejectionReason.METHOD_NOT_ALLOWED: 405,
    RejectionReason.MISSING_SIGNATURE_HEADERS: 403,
    RejectionReason.SIGNATURE_MISMATCH: 403,
    RejectionReason.EMPTY_BODY: 400,
}


class Authenticated(BaseModel):
    """The request is genuine and carries a parsed command."""

    model_config = ConfigDict(frozen=True)

    command: SlashCommand


class Rejected(BaseModel):
    """The request was refused before any lookup."""

    model_config = ConfigDict(frozen=True)

    reason: RejectionReason

    @property
    def status_code(self) -> int:
        return self.reason.status_code


ValidationOutcome = Authenticated | Rejected


class CommandResponse(BaseModel):
    """Status code and plain-text body returned to Slack."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: str = ""
