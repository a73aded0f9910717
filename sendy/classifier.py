"""
Response classifiers: raw Sendy body -> Outcome.

Two interchangeable strategies behind one interface:
- PlainTextClassifier (Mode A): exact match against known literals
- HtmlClassifier (Mode B): legacy HTML pages, parsed and read via Selectors

Neither raises on unexpected input: unknown bodies come back as RAW_BODY.
"""

import logging
import re
from typing import Protocol, Union, runtime_checkable

from config.constants import (
    Operation,
    ResponseFormat,
    SubscriberStatus,
    ERROR_PREFIX,
    SUCCESS_LITERALS,
    ERROR_LITERALS,
    HTML_SUBSCRIBED,
    HTML_ALREADY_SUBSCRIBED,
    HTML_UNSUBSCRIBED,
    HTML_EMAIL_NOT_FOUND,
    HTML_NOT_IN_LIST,
)
from sendy.errors import HtmlStructureError
from sendy.html_tree import Selector, parse_html
from sendy.models import Outcome

logger = logging.getLogger(__name__)


@runtime_checkable
class ResponseClassifier(Protocol):
    """Interpret a response body for a given operation."""

    def classify(self, operation: Union[Operation, str], body: str) -> Outcome:
        ...


class PlainTextClassifier:
    """
    Mode A: the body is a single string from a known set.

    Classification Rules:
    - SUCCESS: body equals one of the operation's success literals
      (active_subscriber_count: body is all digits)
    - NAMED_ERROR: body starts with "Error:" or equals a known error literal
    - RAW_BODY: anything else, returned unchanged

    No trimming is applied; bodies are compared as the service sent them.
    """

    COUNT_PATTERN = re.compile(r"[0-9]+")

    def classify(self, operation: Union[Operation, str], body: str) -> Outcome:
        operation = Operation(operation)

        if self._is_success(operation, body):
            logger.debug(f"[{operation.value}] success: {body!r}")
            return Outcome.success(value=body, raw_body=body)

        if body.startswith(ERROR_PREFIX) or body in ERROR_LITERALS[operation]:
            logger.debug(f"[{operation.value}] recognized error: {body!r}")
            return Outcome.named_error(body, raw_body=body)

        logger.debug(f"[{operation.value}] unrecognized body, passing through")
        return Outcome.raw(body)

    def _is_success(self, operation: Operation, body: str) -> bool:
        if operation == Operation.ACTIVE_SUBSCRIBER_COUNT:
            # fullmatch + ascii: "1e3", " 42" o digitos unicode no son conteos
            return body.isascii() and self.COUNT_PATTERN.fullmatch(body) is not None
        return body in SUCCESS_LITERALS[operation]


class HtmlClassifier:
    """
    Mode B: legacy HTML responses.

    Each supported operation has a Selector locating its status text:
    - subscribe: <head><title>
    - unsubscribe: root[2][1][0]
    - subscription_status: root[0][0]
    - active_subscriber_count: root[0][0]

    Operations without a known HTML shape (delete, create_campaign) are
    classified by the plain-text rules. A body whose structure does not match
    degrades to RAW_BODY with the original body attached. That includes bare
    text bodies such as "42": html.parser wraps them in no element.

    Status texts are compared stripped; the active_subscriber_count text is
    returned verbatim.
    """

    SELECTORS = {
        Operation.SUBSCRIBE: Selector("subscribe", ("head", "title")),
        Operation.UNSUBSCRIBE: Selector("unsubscribe", (2, 1, 0)),
        Operation.SUBSCRIPTION_STATUS: Selector("subscription_status", (0, 0)),
        Operation.ACTIVE_SUBSCRIBER_COUNT: Selector("active_subscriber_count", (0, 0)),
    }

    VERBATIM_TEXT = frozenset({Operation.ACTIVE_SUBSCRIBER_COUNT})

    def __init__(self, fallback: ResponseClassifier | None = None):
        self.fallback = fallback or PlainTextClassifier()

    def classify(self, operation: Union[Operation, str], body: str) -> Outcome:
        operation = Operation(operation)
        selector = self.SELECTORS.get(operation)
        if selector is None:
            return self.fallback.classify(operation, body)

        try:
            text = selector.select_text(
                parse_html(body), strip=operation not in self.VERBATIM_TEXT
            )
        except HtmlStructureError as e:
            logger.warning(f"[{operation.value}] HTML response not understood: {e.message}")
            return Outcome.raw(body)

        logger.debug(f"[{operation.value}] HTML status text: {text!r}")
        return self._interpret(operation, text, body)

    def _interpret(self, operation: Operation, text: str, body: str) -> Outcome:
        if operation == Operation.SUBSCRIBE:
            if text == HTML_ALREADY_SUBSCRIBED:
                return Outcome.already_subscribed(raw_body=body)
            if text == HTML_SUBSCRIBED:
                return Outcome.success(value=text, raw_body=body)
            return Outcome.named_error(text, raw_body=body)

        if operation == Operation.UNSUBSCRIBE:
            if text == HTML_UNSUBSCRIBED:
                return Outcome.success(value=text, raw_body=body)
            if text == HTML_EMAIL_NOT_FOUND:
                return Outcome.user_not_found(text, raw_body=body)
            return Outcome.named_error(text, raw_body=body)

        if operation == Operation.SUBSCRIPTION_STATUS:
            if text in (SubscriberStatus.SUBSCRIBED.value, SubscriberStatus.UNSUBSCRIBED.value):
                return Outcome.success(value=text, raw_body=body)
            if text == HTML_NOT_IN_LIST:
                return Outcome.user_not_found(text, raw_body=body)
            return Outcome.named_error(text, raw_body=body)

        # active_subscriber_count: el texto es el conteo, tal cual
        return Outcome.success(value=text, raw_body=body)


def build_classifier(response_format: Union[ResponseFormat, str]) -> ResponseClassifier:
    """Classifier for the response format the service speaks."""
    if ResponseFormat(response_format) == ResponseFormat.HTML:
        return HtmlClassifier()
    return PlainTextClassifier()
