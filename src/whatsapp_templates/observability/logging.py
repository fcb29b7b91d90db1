"""Configuração de logging estruturado (JSON)."""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from whatsapp_templates.config.settings import Settings, get_settings

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(service)s] %(message)s"


class ServiceNameFilter(logging.Filter):
    """Insere o nome do serviço no record de log.

    Importante: nunca adicionar valores de parâmetros ou telefones nos logs.
    """

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.service = self._service_name
        return True


def configure_logging(level: str, service_name: str, fmt: str = "json") -> None:
    """Configura logging JSON (ou texto) com campos padrão do serviço."""

    formatter: logging.Formatter
    if fmt == "text":
        formatter = logging.Formatter(_TEXT_FORMAT)
    else:
        formatter = JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s %(service)s",
            rename_fields={"levelname": "level", "name": "logger"},
        )

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(ServiceNameFilter(service_name))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [handler]


def configure_logging_from_settings(settings: Settings | None = None) -> None:
    """Configura logging a partir de TEMPLATES_LOG_LEVEL/TEMPLATES_LOG_FORMAT.

    Raises:
        ValueError: Se nível ou formato configurados forem inválidos
    """

    settings = settings or get_settings()
    errors = settings.validate_logging_config()
    if errors:
        raise ValueError("; ".join(errors))

    configure_logging(
        settings.log_level.upper(),
        settings.service_name,
        settings.log_format.lower(),
    )


def get_logger(name: str) -> logging.Logger:
    """Retorna logger simples; o filtro injeta service."""

    return logging.getLogger(name)
