import pytest

from config.constants import ResponseFormat
from sendy.client import SendyClient
from sendy.models import SendyConfig, RawResponse


class FakeTransport:
    """Transporte en memoria: registra los POST y devuelve un body fijo."""

    def __init__(self, body: str = "1", status_code: int = 200, error: Exception | None = None):
        self.body = body
        self.status_code = status_code
        self.error = error
        self.calls = []

    def post(self, url, fields):
        self.calls.append((url, dict(fields)))
        if self.error is not None:
            raise self.error
        return RawResponse(status_code=self.status_code, body=self.body)

    @property
    def last_url(self):
        return self.calls[-1][0]

    @property
    def last_fields(self):
        return self.calls[-1][1]


@pytest.fixture
def sendy_config():
    """Configuración de prueba con lista por defecto."""
    return SendyConfig(
        api_key="test-key",
        base_url="https://newsletter.example.com",
        default_list_id="L1",
    )


@pytest.fixture
def html_config():
    """Configuración de prueba en modo HTML legacy."""
    return SendyConfig(
        api_key="test-key",
        base_url="https://newsletter.example.com",
        default_list_id="L1",
        response_format=ResponseFormat.HTML,
    )


@pytest.fixture
def make_client(sendy_config):
    """Fabrica (cliente, transporte fake) con el body indicado."""
    def _make(body: str = "1", status_code: int = 200, error: Exception | None = None, config=None):
        transport = FakeTransport(body=body, status_code=status_code, error=error)
        client = SendyClient(config or sendy_config, transport=transport)
        return client, transport
    return _make


def subscribe_page(title: str) -> str:
    """Respuesta HTML legacy de /subscribe."""
    return f"<html><head><title>{title}</title></head><body><h1>{title}</h1></body></html>"


def unsubscribe_page(message: str) -> str:
    """Respuesta HTML legacy de /unsubscribe: mensaje en html[2][1][0]."""
    return (
        "<html><head><title>Unsubscribe</title></head><div id=\"top\"></div>"
        f"<body><div class=\"logo\"></div><div class=\"box\"><h2>{message}</h2></div></body></html>"
    )


def value_page(value: str) -> str:
    """Respuesta HTML legacy de la API de suscriptores: valor en html[0][0]."""
    return f"<html><body><p>{value}</p></body></html>"


@pytest.fixture
def pages():
    """Generadores de páginas HTML legacy."""
    return {
        "subscribe": subscribe_page,
        "unsubscribe": unsubscribe_page,
        "value": value_page,
    }
