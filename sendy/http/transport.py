"""
HTTP transports - POST de formularios a Sendy.

Dos implementaciones intercambiables, elegidas al construir el cliente:
- HttpxTransport (direct_http): form-encoded, timeout, redirects limitados,
  status no-2xx tratado como fallo de transporte
- CurlLikeTransport (legacy_curl_like): body pre-codificado como query string,
  sin seguir redirects, devuelve el body con cualquier status

Ambas lanzan SendyTransportError ante fallos de red; nunca devuelven un body
de error inventado.
"""

import logging
from typing import Optional, Protocol, Mapping, Union, runtime_checkable
from urllib.parse import urlencode

import httpx

from config.constants import TransportMode
from sendy.errors import SendyTransportError
from sendy.models import RawResponse

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 45.0
DEFAULT_MAX_REDIRECTS = 5
DEFAULT_USER_AGENT = "sendy-api-client/0.1"


@runtime_checkable
class Transport(Protocol):
    """Contrato mínimo: un POST de formulario."""

    def post(self, url: str, fields: Mapping[str, str]) -> RawResponse:
        """
        Raises:
            SendyTransportError: fallo de red o HTTP
        """
        ...


class HttpxTransport:
    """POST form-encoded con httpx, siguiendo hasta max_redirects redirects."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        user_agent: str = DEFAULT_USER_AGENT,
        httpx_transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Args:
            timeout: Timeout por request (segundos)
            max_redirects: Maximo de redirects a seguir
            user_agent: User-Agent enviado
            httpx_transport: Transporte httpx alternativo (p.ej. httpx.MockTransport en tests)
        """
        self.timeout = timeout
        self.max_redirects = max_redirects
        self.user_agent = user_agent
        self._httpx_transport = httpx_transport

    def post(self, url: str, fields: Mapping[str, str]) -> RawResponse:
        try:
            with httpx.Client(
                timeout=self.timeout,
                follow_redirects=self.max_redirects > 0,
                max_redirects=self.max_redirects,
                headers={"User-Agent": self.user_agent},
                transport=self._httpx_transport,
            ) as client:
                response = client.post(url, data=dict(fields))
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"POST {url} falló: {type(e).__name__}: {e}")
            raise SendyTransportError(f"{type(e).__name__}: {e}") from e

        # Considerar 2xx como éxito
        if not response.is_success:
            logger.error(f"POST {url} respondió HTTP {response.status_code}")
            raise SendyTransportError(
                f"HTTP {response.status_code} {response.reason_phrase}",
                status_code=response.status_code
            )

        return RawResponse(status_code=response.status_code, body=response.text)


class CurlLikeTransport:
    """
    Equivalente al camino cURL original: query string como body, sin redirects.

    El status HTTP no se interpreta; el body se devuelve para clasificarlo.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        httpx_transport: Optional[httpx.BaseTransport] = None
    ):
        self.timeout = timeout
        self.user_agent = user_agent
        self._httpx_transport = httpx_transport

    def post(self, url: str, fields: Mapping[str, str]) -> RawResponse:
        try:
            with httpx.Client(
                timeout=self.timeout,
                follow_redirects=False,
                transport=self._httpx_transport,
            ) as client:
                response = client.post(
                    url,
                    content=urlencode(dict(fields)),
                    headers={
                        "Content-Type": "application/x-www-form-urlencoded",
                        "User-Agent": self.user_agent,
                    },
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"POST {url} falló: {type(e).__name__}: {e}")
            raise SendyTransportError(f"{type(e).__name__}: {e}") from e

        if not response.is_success:
            logger.warning(f"POST {url} respondió HTTP {response.status_code}, se clasifica el body igual")

        return RawResponse(status_code=response.status_code, body=response.text)


def build_transport(
    mode: Union[TransportMode, str],
    timeout: float = DEFAULT_TIMEOUT,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
    user_agent: str = DEFAULT_USER_AGENT
) -> Transport:
    """Transporte para el modo configurado."""
    if TransportMode(mode) == TransportMode.LEGACY_CURL_LIKE:
        return CurlLikeTransport(timeout=timeout, user_agent=user_agent)
    return HttpxTransport(timeout=timeout, max_redirects=max_redirects, user_agent=user_agent)
