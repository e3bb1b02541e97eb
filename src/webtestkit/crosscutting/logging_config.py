# -*- coding: utf-8 -*-
"""
Configuración de logging estructurado.

Proporciona:
- Logging estructurado con structlog (JSON o consola)
- Enmascarado de credenciales en URLs antes de loguearlas
- Silenciado de loggers ruidosos de Selenium

La librería nunca configura logging al importarse: la aplicación o la suite
de tests llama a configure_structured_logging() si lo necesita.
"""
from __future__ import annotations

import os
import sys
import logging
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

import structlog
from structlog.types import Processor


def configure_structured_logging(
    level: str = "INFO",
    json_format: Optional[bool] = None,
    include_process_id: bool = True,
) -> None:
    """
    Configura logging estructurado con structlog.

    Args:
        level: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Si True, usa formato JSON. Si None, detecta automáticamente
                     (JSON si LOG_FORMAT=json o si no hay TTY)
        include_process_id: Incluir ID de proceso en logs
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if json_format is None:
        json_format = (
            os.getenv("LOG_FORMAT", "").lower() == "json"
            or not sys.stdout.isatty()
        )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if include_process_id:
        def add_process_id(logger, method_name, event_dict):
            event_dict["pid"] = os.getpid()
            return event_dict
        processors.append(add_process_id)

    if json_format:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    # Silenciar loggers ruidosos
    for noisy in ("selenium", "urllib3", "psutil"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Obtiene un logger estructurado (típicamente con el nombre del módulo)."""
    return structlog.get_logger(name)


def mask_url(url: Optional[str]) -> Optional[str]:
    """Oculta usuario/contraseña de una URL antes de loguearla."""
    if not url:
        return url
    parts = urlsplit(url)
    if "@" not in parts.netloc:
        return url
    host = parts.netloc.rsplit("@", 1)[1]
    return urlunsplit((parts.scheme, f"***:***@{host}", parts.path, parts.query, parts.fragment))


def configure_from_settings(settings=None) -> None:
    """Configura logging con WEBTESTKIT_LOG_LEVEL / WEBTESTKIT_LOG_FORMAT."""
    from webtestkit.config.settings import get_settings

    s = settings or get_settings()
    json_format = None if s.log_format is None else s.log_format == "json"
    configure_structured_logging(level=s.log_level, json_format=json_format)
