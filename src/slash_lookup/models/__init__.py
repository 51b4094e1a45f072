"""Data models for the slash-command webhook."""

from slash_lookup.models.command import (
    NO_RESULTS_TEXT,
    Authenticated,
    CommandResponse,
    Rejected,
    RejectionReason,
    SlashCommand,
    ValidationOutcome,
)
from slash_lookup.models.request import IncomingRequest

__all__ = [
    "IncomingRequest",
    "SlashCommand",
    "RejectionReason",
    "Authenticated",
    "Rejected",
    "ValidationOutcome",
    "CommandResponse",
    "NO_RESULTS_TEXT",
]
