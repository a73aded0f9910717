from enum import Enum


class Operation(str, Enum):
    """Operaciones expuestas por la API de Sendy"""

    SUBSCRIBE = "subscribe"
    UNSUBSCRIBE = "unsubscribe"
    DELETE = "delete"
    SUBSCRIPTION_STATUS = "subscription_status"
    ACTIVE_SUBSCRIBER_COUNT = "active_subscriber_count"
    CREATE_CAMPAIGN = "create_campaign"

    @classmethod
    def list(cls):
        """Retornar lista de operaciones"""
        return [o.value for o in cls]


class TransportMode(str, Enum):
    """Implementaciones de transporte HTTP disponibles"""

    DIRECT_HTTP = "direct_http"            # httpx, timeout + redirects
    LEGACY_CURL_LIKE = "legacy_curl_like"  # body pre-codificado, sin redirects


class ResponseFormat(str, Enum):
    """Formato de respuesta que devuelve la instalacion de Sendy"""

    PLAIN_TEXT = "plain_text"  # Mode A
    HTML = "html"              # Mode B (legacy)


class SubscriberStatus(str, Enum):
    """Estados de suscriptor reportados por subscription-status.php"""

    SUBSCRIBED = "Subscribed"
    UNSUBSCRIBED = "Unsubscribed"
    UNCONFIRMED = "Unconfirmed"
    BOUNCED = "Bounced"
    SOFT_BOUNCED = "Soft bounced"
    COMPLAINED = "Complained"


# Rutas relativas de cada endpoint

ENDPOINT_PATHS = {
    Operation.SUBSCRIBE: "/subscribe",
    Operation.UNSUBSCRIBE: "/unsubscribe",
    Operation.DELETE: "/api/subscribers/delete.php",
    Operation.SUBSCRIPTION_STATUS: "/api/subscribers/subscription-status.php",
    Operation.ACTIVE_SUBSCRIBER_COUNT: "/api/subscribers/active-subscriber-count.php",
    Operation.CREATE_CAMPAIGN: "/api/campaigns/create.php",
}


# Literales de respuesta (Mode A, texto plano)

ERROR_PREFIX = "Error:"

BOOLEAN_SUCCESS = frozenset({"true", "1"})

SUCCESS_LITERALS = {
    Operation.SUBSCRIBE: BOOLEAN_SUCCESS,
    Operation.UNSUBSCRIBE: BOOLEAN_SUCCESS,
    Operation.DELETE: BOOLEAN_SUCCESS,
    Operation.SUBSCRIPTION_STATUS: frozenset(s.value for s in SubscriberStatus),
    # active_subscriber_count: cualquier string numerico
    Operation.ACTIVE_SUBSCRIBER_COUNT: frozenset(),
    Operation.CREATE_CAMPAIGN: frozenset({
        "Campaign created",
        "Campaign created and now sending",
    }),
}

_API_KEY_ERRORS = (
    "No data passed",
    "API key not passed",
    "Invalid API key",
)

ERROR_LITERALS = {
    Operation.SUBSCRIBE: frozenset({
        "Already subscribed.",
        "Invalid email address.",
        "Invalid list ID.",
        "Some fields are missing.",
        "Email is suppressed.",
    }),
    Operation.UNSUBSCRIBE: frozenset({
        "Some fields are missing.",
        "Invalid email address.",
        "Email does not exist.",
    }),
    Operation.DELETE: frozenset({
        *_API_KEY_ERRORS,
        "List ID not passed",
        "List does not exist",
        "Email address not passed",
        "Subscriber does not exist",
    }),
    Operation.SUBSCRIPTION_STATUS: frozenset({
        *_API_KEY_ERRORS,
        "Email not passed",
        "List ID not passed",
        "Email does not exist in list",
    }),
    Operation.ACTIVE_SUBSCRIBER_COUNT: frozenset({
        *_API_KEY_ERRORS,
        "List ID not passed",
        "List does not exist",
    }),
    Operation.CREATE_CAMPAIGN: frozenset({
        *_API_KEY_ERRORS,
        "From name not passed",
        "From email not passed",
        "Reply to email not passed",
        "Subject not passed",
        "HTML not passed",
        "List or segment ID(s) not passed",
        "One or more list IDs are invalid",
        "One or more segment IDs are invalid",
        "List or segment IDs does not belong to a single brand",
        "Brand ID not passed",
        "Unable to create campaign",
        "Unable to create and send campaign",
        "Unable to calculate totals",
    }),
}


# Literales de respuesta (Mode B, HTML legacy)

HTML_SUBSCRIBED = "You're subscribed!"
HTML_ALREADY_SUBSCRIBED = "You're already subscribed!"
HTML_UNSUBSCRIBED = "You're unsubscribed."
HTML_EMAIL_NOT_FOUND = "Email does not exist."
HTML_NOT_IN_LIST = "Email does not exist in list"
