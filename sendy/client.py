"""
Sendy Client - Cliente síncrono para la API de Sendy.

Operaciones:
- POST /subscribe
- POST /unsubscribe
- POST /api/subscribers/delete.php
- POST /api/subscribers/subscription-status.php
- POST /api/subscribers/active-subscriber-count.php
- POST /api/campaigns/create.php

Cada llamada devuelve su propio Outcome; el cliente no guarda estado entre
llamadas más allá de la configuración inmutable.
"""

import logging
from typing import Any, Mapping, Optional, Union

from config.constants import Operation
from sendy.classifier import ResponseClassifier, build_classifier
from sendy.endpoints import resolve_endpoint, resolve_list_id
from sendy.errors import ConfigurationError, SendyTransportError
from sendy.fields import (
    CampaignPayload,
    subscribe_fields,
    unsubscribe_fields,
    delete_fields,
    subscription_status_fields,
    active_subscriber_count_fields,
    create_campaign_fields,
)
from sendy.http.transport import Transport, build_transport
from sendy.models import SendyConfig, OperationRequest, Outcome

logger = logging.getLogger(__name__)


class SendyClient:
    """Cliente para una instalación de Sendy."""

    def __init__(
        self,
        config: SendyConfig,
        transport: Optional[Transport] = None,
        classifier: Optional[ResponseClassifier] = None
    ):
        """
        Args:
            config: Configuración inmutable (api key, URL base, lista por defecto, modos)
            transport: Transporte HTTP; por defecto el de config.transport_mode
            classifier: Clasificador de respuestas; por defecto el de config.response_format
        """
        if not config.api_key:
            raise ConfigurationError("api_key is required")
        self.config = config
        self.transport = transport or build_transport(config.transport_mode)
        self.classifier = classifier or build_classifier(config.response_format)

    @classmethod
    def from_settings(cls, settings=None) -> "SendyClient":
        """
        Construir cliente desde config.settings (variables de entorno / .env).

        Args:
            settings: Settings alternativo; por defecto el singleton
        """
        if settings is None:
            from config.settings import settings
        config = SendyConfig.from_settings(settings)
        transport = build_transport(
            config.transport_mode,
            timeout=settings.http.HTTP_TIMEOUT,
            max_redirects=settings.http.HTTP_MAX_REDIRECTS,
            user_agent=settings.http.HTTP_USER_AGENT,
        )
        return cls(config, transport=transport)

    def subscribe(
        self,
        email: str,
        custom_fields: Optional[Mapping[str, Any]] = None,
        list_id: Optional[str] = None
    ) -> Outcome:
        """
        Suscribir un email a una lista.

        Args:
            email: Email a suscribir
            custom_fields: Campos adicionales (name, country, custom fields de la lista...)
            list_id: Lista destino (por defecto config.default_list_id)
        """
        return self._execute(self.build_request(
            Operation.SUBSCRIBE, email=email, custom_fields=custom_fields, list_id=list_id
        ))

    def unsubscribe(self, email: str, list_id: Optional[str] = None) -> Outcome:
        return self._execute(self.build_request(Operation.UNSUBSCRIBE, email=email, list_id=list_id))

    def delete(self, email: str, list_id: Optional[str] = None) -> Outcome:
        return self._execute(self.build_request(Operation.DELETE, email=email, list_id=list_id))

    def subscription_status(self, email: str, list_id: Optional[str] = None) -> Outcome:
        """
        Estado del suscriptor en la lista.

        Returns:
            Outcome SUCCESS con value en SubscriberStatus, o error
        """
        return self._execute(self.build_request(Operation.SUBSCRIPTION_STATUS, email=email, list_id=list_id))

    def active_subscriber_count(self, list_id: Optional[str] = None) -> Outcome:
        """
        Conteo de suscriptores activos.

        Returns:
            Outcome SUCCESS con value numérico (ver Outcome.count), o error
        """
        return self._execute(self.build_request(Operation.ACTIVE_SUBSCRIBER_COUNT, list_id=list_id))

    def create_campaign(self, data: Union[Mapping[str, Any], CampaignPayload]) -> Outcome:
        """
        Crear (y opcionalmente enviar) una campaña.

        Args:
            data: Campos de la campaña. api_key y list_ids se agregan solo si faltan.
        """
        return self._execute(self.build_request(Operation.CREATE_CAMPAIGN, data=data))

    def build_request(
        self,
        operation: Union[Operation, str],
        email: str = "",
        list_id: Optional[str] = None,
        custom_fields: Optional[Mapping[str, Any]] = None,
        data: Union[Mapping[str, Any], CampaignPayload, None] = None
    ) -> OperationRequest:
        """
        Armar URL y campos de una operación sin enviarla.

        Returns:
            OperationRequest
        """
        operation = Operation(operation)
        api_key = self.config.api_key
        resolved_list = resolve_list_id(list_id, self.config.default_list_id)

        if operation == Operation.SUBSCRIBE:
            fields = subscribe_fields(api_key, email, resolved_list, custom_fields)
        elif operation == Operation.UNSUBSCRIBE:
            fields = unsubscribe_fields(api_key, email, resolved_list)
        elif operation == Operation.DELETE:
            fields = delete_fields(api_key, email, resolved_list)
        elif operation == Operation.SUBSCRIPTION_STATUS:
            fields = subscription_status_fields(api_key, email, resolved_list)
        elif operation == Operation.ACTIVE_SUBSCRIBER_COUNT:
            fields = active_subscriber_count_fields(api_key, resolved_list)
        else:
            fields = create_campaign_fields(api_key, data or {}, self.config.default_list_id)

        return OperationRequest(
            operation=operation,
            url=resolve_endpoint(operation, self.config.base_url),
            fields=fields,
        )

    def _execute(self, request: OperationRequest) -> Outcome:
        """POST + clasificación. Un fallo de transporte no llega al clasificador."""
        operation = request.operation.value
        logger.info(f"[{operation}] POST {request.url}")
        logger.debug(f"[{operation}] fields: {request.redacted_fields()}")

        try:
            response = self.transport.post(request.url, request.fields)
        except SendyTransportError as e:
            logger.error(f"[{operation}] Error de transporte: {e.message}")
            return Outcome.transport_error(e.message)

        outcome = self.classifier.classify(request.operation, response.body)
        logger.info(f"[{operation}] HTTP {response.status_code} -> {outcome.kind.value}")
        return outcome
