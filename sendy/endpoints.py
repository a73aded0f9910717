"""
Endpoint resolution: operation name -> full URL.
"""

from typing import Optional, Union

from config.constants import Operation, ENDPOINT_PATHS


def resolve_endpoint(operation: Union[Operation, str], base_url: str) -> str:
    """
    Join the configured base URL with the operation's fixed path.

    No URL validation is done here; a malformed base URL fails in the transport.

    Args:
        operation: Operation enum or its value (e.g. "subscribe")
        base_url: Sendy installation URL, without trailing slash

    Returns:
        Full endpoint URL

    Raises:
        ValueError: unknown operation name
    """
    return f"{base_url}{ENDPOINT_PATHS[Operation(operation)]}"


def resolve_list_id(explicit: Optional[str], default: Optional[str]) -> str:
    """An explicit list ID wins, then the default, else an empty string."""
    if explicit:
        return explicit
    return default or ""
