"""
Error hierarchy for the Sendy API client.

Library calls do not raise these for service-side failures: every call returns
an Outcome. They are raised by the transport layer (caught by the client), by
configuration validation, and by Outcome.raise_for_outcome() for callers that
prefer exceptions.
"""

from typing import Optional


class SendyError(Exception):
    """Base exception for all Sendy client errors."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__


class ConfigurationError(SendyError):
    """Client configuration is missing or invalid."""
    pass


class SendyTransportError(SendyError):
    """
    Network or HTTP-layer failure.

    Examples:
    - Connection refused / DNS failure
    - Timeout
    - Non-2xx status (direct_http transport only)
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message, error_code="TRANSPORT_ERROR")
        self.status_code = status_code


class SendyDomainError(SendyError):
    """The service answered with a recognized error message."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message, error_code=error_code or "DOMAIN_ERROR")


class AlreadySubscribedError(SendyDomainError):
    """Subscriber is already on the list."""

    def __init__(self, message: str = "Already subscribed."):
        super().__init__(message, error_code="ALREADY_SUBSCRIBED")


class SubscriberNotFoundError(SendyDomainError):
    """Email does not exist in the list."""

    def __init__(self, message: str = "Email does not exist."):
        super().__init__(message, error_code="USER_NOT_FOUND")


class UnrecognizedResponseError(SendyError):
    """Body did not match any known response pattern."""

    def __init__(self, body: str):
        super().__init__(f"Unrecognized response body: {body[:200]!r}", error_code="UNRECOGNIZED_BODY")
        self.body = body


class HtmlStructureError(SendyError):
    """Legacy HTML response did not have the expected shape."""

    def __init__(self, message: str):
        super().__init__(message, error_code="HTML_PARSE_ERROR")
