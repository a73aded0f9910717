"""
Configuración centralizada de logging con rotación diaria.

La librería solo usa loggers de módulo (logging.getLogger(__name__)); quien la
embebe decide los handlers. Los scripts de scripts/ llaman a setup_logging()
para escribir en consola y en logs/{service_name}.log.

Los archivos rotan a medianoche y se eliminan después de N días.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import TimedRotatingFileHandler

from config.settings import settings

# Directorio de logs (relativo a la raíz del proyecto)
LOGS_DIR = Path(__file__).resolve().parent.parent / "logs"

# Configuración
LOG_RETENTION_DAYS = 7
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(service_name: str = "sendy", logs_dir: Path | None = None) -> logging.Logger:
    """
    Configura logging con rotación diaria para un servicio específico.

    Args:
        service_name: Nombre del servicio. Define el archivo de log:
                     - "sendy" → logs/sendy.log
        logs_dir: Directorio alternativo (por defecto LOGS_DIR)

    Returns:
        Logger raíz configurado
    """
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    log_dir = logs_dir or LOGS_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    # Obtener logger raíz
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Limpiar handlers existentes (evita duplicados)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Handler 1: Consola (stderr, stdout queda para la salida del script)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Handler 2: Archivo con rotación diaria
    log_file = log_dir / f"{service_name}.log"
    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=LOG_RETENTION_DAYS,
        encoding="utf-8",
        utc=False
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)

    # Sufijo para archivos rotados: sendy.log.2026-01-23
    file_handler.suffix = "%Y-%m-%d"

    root_logger.addHandler(file_handler)

    # httpx loguea cada request a INFO; lo dejamos en WARNING
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging iniciado [{service_name}] ({settings.ENVIRONMENT}) → {log_file}")

    return root_logger

