"""
Subpaquete HTTP - Transportes para los POST a Sendy.

Uso:
    from sendy.http import build_transport

    transport = build_transport("direct_http", timeout=45, max_redirects=5)
    response = transport.post(url, {"api_key": "...", "list_id": "..."})
"""

from sendy.http.transport import (
    Transport,
    HttpxTransport,
    CurlLikeTransport,
    build_transport,
)

__all__ = [
    "Transport",
    "HttpxTransport",
    "CurlLikeTransport",
    "build_transport",
]
