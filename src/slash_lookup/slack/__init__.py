"""Slack ingress: slash-command verification, orchestration and routing."""

from slash_lookup.slack.handlers import handle_command
from slash_lookup.slack.router import router
from slash_lookup.slack.verification import validate_request

__all__ = [
    "handle_command",
    "router",
    "validate_request",
]
