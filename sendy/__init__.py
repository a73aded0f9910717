"""
Sendy - Cliente para la API HTTP de Sendy.

Componentes:
- client: SendyClient, fachada de las seis operaciones
- endpoints / fields: URL y campos de cada operación
- classifier: interpretación de respuestas (texto plano o HTML legacy)
- http/: transportes HTTP intercambiables

Uso:
    from sendy import SendyClient, SendyConfig

    client = SendyClient(SendyConfig(api_key="...", base_url="https://newsletter.example.com"))
    outcome = client.subscribe("joe@example.com", {"name": "Joe"}, list_id="abc123")
    if outcome.ok:
        ...
"""

from sendy.client import SendyClient
from sendy.classifier import (
    ResponseClassifier,
    PlainTextClassifier,
    HtmlClassifier,
    build_classifier,
)
from sendy.endpoints import resolve_endpoint, resolve_list_id
from sendy.fields import CampaignPayload
from sendy.models import SendyConfig, OperationRequest, RawResponse, HtmlNode, Outcome, OutcomeKind
from sendy.errors import (
    SendyError,
    ConfigurationError,
    SendyTransportError,
    SendyDomainError,
    AlreadySubscribedError,
    SubscriberNotFoundError,
    UnrecognizedResponseError,
    HtmlStructureError,
)

__all__ = [
    # Client
    "SendyClient",
    "SendyConfig",
    # Classification
    "ResponseClassifier",
    "PlainTextClassifier",
    "HtmlClassifier",
    "build_classifier",
    "Outcome",
    "OutcomeKind",
    # Requests
    "resolve_endpoint",
    "resolve_list_id",
    "CampaignPayload",
    "OperationRequest",
    "RawResponse",
    "HtmlNode",
    # Errors
    "SendyError",
    "ConfigurationError",
    "SendyTransportError",
    "SendyDomainError",
    "AlreadySubscribedError",
    "SubscriberNotFoundError",
    "UnrecognizedResponseError",
    "HtmlStructureError",
]
