"""Custom exception hierarchy for the exchange rates service."""

from typing import Any


class ExchangeRatesError(Exception):
    """Base exception for all exchange rates errors.

    All exceptions carry an optional `context` dict for structured error
    metadata that can be logged without parsing the message.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class TransportError(ExchangeRatesError):
    """Connection or request level failure (DNS, TCP, TLS, HTTP status).

    Policy: not retried. Propagates to the top-level caller.

    Context keys:
        url: str - the endpoint that was being contacted
        status_code: int | None - HTTP status code if applicable
    """


class ProtocolValidationError(ExchangeRatesError):
    """A payload failed structural validation where well-formed data is required.

    Policy: the whole operation fails. No partial results are salvaged.

    Context keys:
        url: str - the endpoint that returned the payload
    """
