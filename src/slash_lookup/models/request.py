"""Inbound HTTP request as seen by the validation core."""

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, field_validator


class IncomingRequest(BaseModel):
    """Method, headers and raw body of one webhook delivery.

    Header names are stored lower-cased so lookups are case-insensitive.
    """

    model_config = ConfigDict(frozen=True)

    method: str
    headers: dict[str, str] = {}
    raw_body: bytes = b""

    @field_validator("headers", mode="before")
    @classmethod
    def _lower_header_names(cls, value: Mapping[str, str]) -> dict[str, str]:
        return {str(name).lower(): val for name, val in value.items()}

    def header(self, name: str) -> str:
        """Return a header value by case-insensitive name, or "" when absent."""
        return self.headers.get(name.lower(), "")
