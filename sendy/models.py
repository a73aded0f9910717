"""
Data models for the Sendy client.

Defines the immutable client configuration, the per-call request value,
the raw transport response, the legacy HTML tree node and the typed Outcome
every operation returns.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Any

from config.constants import Operation, TransportMode, ResponseFormat
from sendy.errors import (
    ConfigurationError,
    SendyDomainError,
    SendyTransportError,
    AlreadySubscribedError,
    SubscriberNotFoundError,
    UnrecognizedResponseError,
)


@dataclass(frozen=True)
class SendyConfig:
    """
    Client configuration. Created once, never mutated.

    base_url must not end with a slash; a trailing slash is stripped.
    """

    api_key: str
    base_url: str
    default_list_id: Optional[str] = None
    transport_mode: TransportMode = TransportMode.DIRECT_HTTP
    response_format: ResponseFormat = ResponseFormat.PLAIN_TEXT

    def __post_init__(self):
        base_url = (self.base_url or "").rstrip("/")
        if not base_url:
            raise ConfigurationError("base_url is required")
        object.__setattr__(self, "base_url", base_url)
        try:
            object.__setattr__(self, "transport_mode", TransportMode(self.transport_mode))
            object.__setattr__(self, "response_format", ResponseFormat(self.response_format))
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

    def __repr__(self) -> str:
        # api_key fuera del repr para que no termine en logs
        return (
            f"SendyConfig(base_url={self.base_url!r}, default_list_id={self.default_list_id!r}, "
            f"transport_mode={self.transport_mode.value}, response_format={self.response_format.value})"
        )

    @classmethod
    def from_settings(cls, settings) -> "SendyConfig":
        """
        Create from the application Settings (config.settings).

        Args:
            settings: Settings instance

        Returns:
            SendyConfig instance
        """
        sendy = settings.sendy
        return cls(
            api_key=sendy.SENDY_API_KEY,
            base_url=sendy.SENDY_BASE_URL,
            default_list_id=sendy.SENDY_LIST_ID,
            transport_mode=sendy.SENDY_TRANSPORT_MODE,
            response_format=sendy.SENDY_RESPONSE_FORMAT,
        )


@dataclass(frozen=True)
class OperationRequest:
    """A single POST to build and send. Built fresh for each call."""

    operation: Operation
    url: str
    fields: dict[str, str] = field(default_factory=dict)

    def redacted_fields(self) -> dict[str, str]:
        """Fields safe to log (api_key masked)."""
        return {k: ("***" if k == "api_key" else v) for k, v in self.fields.items()}


@dataclass(frozen=True)
class RawResponse:
    """Response as returned by a transport."""

    status_code: int
    body: str

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass
class HtmlNode:
    """
    Node of a parsed legacy HTML response.

    Children keep document order. Text and CDATA content of an element are
    collected into `text`; they are not counted as children.
    """

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    text: Optional[str] = None
    children: list["HtmlNode"] = field(default_factory=list)

    def child(self, index: int) -> Optional["HtmlNode"]:
        if 0 <= index < len(self.children):
            return self.children[index]
        return None

    def find_child(self, tag: str) -> Optional["HtmlNode"]:
        """First direct child with the given tag name."""
        for node in self.children:
            if node.tag == tag:
                return node
        return None

    def to_dict(self) -> dict:
        return {
            "tag": self.tag,
            "attributes": dict(self.attributes),
            "text": self.text,
            "children": [c.to_dict() for c in self.children],
        }


class OutcomeKind(Enum):
    """Classification of a single response."""
    SUCCESS = "SUCCESS"
    ALREADY_SUBSCRIBED = "ALREADY_SUBSCRIBED"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    NAMED_ERROR = "NAMED_ERROR"          # Recognized domain error
    RAW_BODY = "RAW_BODY"                # Unrecognized body, passed through
    TRANSPORT_ERROR = "TRANSPORT_ERROR"  # Never classified further


@dataclass(frozen=True)
class Outcome:
    """
    Typed result of one operation.

    - value: success payload (status literal, count string, campaign message)
    - message: error text for failure kinds
    - raw_body: the body the classification was made from (None on transport errors)
    """

    kind: OutcomeKind
    value: Optional[str] = None
    message: Optional[str] = None
    raw_body: Optional[str] = None

    @classmethod
    def success(cls, value: Optional[str] = None, raw_body: Optional[str] = None) -> "Outcome":
        return cls(OutcomeKind.SUCCESS, value=value, raw_body=raw_body)

    @classmethod
    def already_subscribed(cls, raw_body: Optional[str] = None) -> "Outcome":
        return cls(OutcomeKind.ALREADY_SUBSCRIBED, message="Already subscribed.", raw_body=raw_body)

    @classmethod
    def user_not_found(cls, message: str, raw_body: Optional[str] = None) -> "Outcome":
        return cls(OutcomeKind.USER_NOT_FOUND, message=message, raw_body=raw_body)

    @classmethod
    def named_error(cls, message: str, raw_body: Optional[str] = None) -> "Outcome":
        return cls(OutcomeKind.NAMED_ERROR, message=message, raw_body=raw_body)

    @classmethod
    def raw(cls, body: str) -> "Outcome":
        return cls(OutcomeKind.RAW_BODY, raw_body=body)

    @classmethod
    def transport_error(cls, message: str) -> "Outcome":
        return cls(OutcomeKind.TRANSPORT_ERROR, message=message)

    @property
    def ok(self) -> bool:
        return self.kind == OutcomeKind.SUCCESS

    @property
    def count(self) -> Optional[int]:
        """Integer value of an active_subscriber_count success, else None."""
        if self.kind != OutcomeKind.SUCCESS or self.value is None:
            return None
        try:
            return int(self.value)
        except ValueError:
            return None

    def raise_for_outcome(self) -> "Outcome":
        """
        Raise the matching SendyError for failure outcomes.

        Returns:
            self, when the outcome is a success

        Raises:
            SendyTransportError, AlreadySubscribedError, SubscriberNotFoundError,
            SendyDomainError or UnrecognizedResponseError
        """
        if self.kind == OutcomeKind.SUCCESS:
            return self
        if self.kind == OutcomeKind.TRANSPORT_ERROR:
            raise SendyTransportError(self.message or "Transport error")
        if self.kind == OutcomeKind.ALREADY_SUBSCRIBED:
            raise AlreadySubscribedError(self.message or "Already subscribed.")
        if self.kind == OutcomeKind.USER_NOT_FOUND:
            raise SubscriberNotFoundError(self.message or "Email does not exist.")
        if self.kind == OutcomeKind.NAMED_ERROR:
            raise SendyDomainError(self.message or "")
        raise UnrecognizedResponseError(self.raw_body or "")

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "value": self.value,
            "message": self.message,
            "raw_body": self.raw_body,
        }
