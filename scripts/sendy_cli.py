#!/usr/bin/env python
"""
Script para ejecutar una operación contra la instalación de Sendy configurada.

Sirve para comprobar qué formato de respuesta (plain_text / html) usa el
servicio real: el Outcome impreso muestra el body crudo cuando no se reconoce.

Uso:
    python -m scripts.sendy_cli subscribe joe@example.com [list_id] [campo=valor ...]
    python -m scripts.sendy_cli unsubscribe joe@example.com [list_id]
    python -m scripts.sendy_cli delete joe@example.com [list_id]
    python -m scripts.sendy_cli subscription_status joe@example.com [list_id]
    python -m scripts.sendy_cli active_subscriber_count [list_id]
    python -m scripts.sendy_cli create_campaign campo=valor [campo=valor ...]
"""

import json
import sys
import os

# Agregar raíz del proyecto al path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

# Cargar variables de entorno antes de leer settings
load_dotenv()

from config.constants import Operation
from config.logging_config import setup_logging
from config.settings import settings
from sendy import SendyClient, Outcome, ConfigurationError

EMAIL_OPERATIONS = (
    Operation.SUBSCRIBE,
    Operation.UNSUBSCRIBE,
    Operation.DELETE,
    Operation.SUBSCRIPTION_STATUS,
)


def parse_pairs(args: list[str]) -> dict[str, str]:
    """["a=1", "b=2"] -> {"a": "1", "b": "2"} (en orden)"""
    pairs = {}
    for arg in args:
        if "=" not in arg:
            raise ValueError(f"Argumento inválido '{arg}', se esperaba campo=valor")
        key, value = arg.split("=", 1)
        pairs[key] = value
    return pairs


def run(argv: list[str], client: SendyClient) -> Outcome:
    """Ejecutar la operación descrita por argv (sin el nombre del script)."""
    operation = Operation(argv[0].lower())
    args = argv[1:]

    if operation in EMAIL_OPERATIONS:
        if not args:
            raise ValueError(f"{operation.value} requiere un email")
        email, rest = args[0], args[1:]
        list_id = rest[0] if rest and "=" not in rest[0] else None
        if operation == Operation.SUBSCRIBE:
            custom = parse_pairs(rest[1:] if list_id else rest)
            return client.subscribe(email, custom_fields=custom, list_id=list_id)
        if operation == Operation.UNSUBSCRIBE:
            return client.unsubscribe(email, list_id=list_id)
        if operation == Operation.DELETE:
            return client.delete(email, list_id=list_id)
        return client.subscription_status(email, list_id=list_id)

    if operation == Operation.ACTIVE_SUBSCRIBER_COUNT:
        return client.active_subscriber_count(list_id=args[0] if args else None)

    return client.create_campaign(parse_pairs(args))


def main():
    if len(sys.argv) < 2:
        print(f"Operaciones disponibles: {', '.join(Operation.list())}")
        sys.exit(1)

    setup_logging("sendy")

    try:
        client = SendyClient.from_settings(settings)
        outcome = run(sys.argv[1:], client)
    except (ValueError, ConfigurationError) as e:
        print(f"Error: {e}")
        print(f"Disponibles: {', '.join(Operation.list())}")
        sys.exit(1)

    print(f"\n{'='*60}")
    print(f"Sendy:     {settings.SENDY_BASE_URL}")
    print(f"Lista:     {settings.SENDY_LIST_ID or '-'}")
    print(f"Operación: {sys.argv[1]}")
    print(f"Formato:   {client.config.response_format.value}")
    print(f"{'='*60}\n")
    print(json.dumps(outcome.to_dict(), ensure_ascii=False, indent=2))

    sys.exit(0 if outcome.ok else 1)


if __name__ == "__main__":
    main()
