"""Exceptions raised outside the request validation path."""


class ConfigurationError(RuntimeError):
    """Required process configuration is missing or invalid."""


class LookupFailure(Exception):
    """The knowledge lookup could not complete.

    Distinct from a lookup that completed and found nothing, which is
    reported as ``None`` by the resolver.
    """

    def __init__(self, term: str, message: str) -> None:
        super().__init__(message)
        self.term = term
