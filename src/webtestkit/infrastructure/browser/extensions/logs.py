from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List

from selenium.webdriver.remote.webdriver import WebDriver

from webtestkit.domain.models.log_models import LogEntry, LogLevel
from webtestkit.infrastructure.browser.core.browser_utils import require_driver

logger = logging.getLogger(__name__)

BROWSER_LOG = "browser"


def get_browser_logs_as_dicts(driver: WebDriver) -> List[Dict[str, Any]]:
    """
    Entradas crudas del log 'browser' (POST /session/{id}/se/log).
    Cada lectura vacía el buffer del driver.
    """
    require_driver(driver, "leer los logs del navegador")
    entries = driver.get_log(BROWSER_LOG) or []
    logger.debug("[logs] %d entradas de log '%s'", len(entries), BROWSER_LOG)
    return list(entries)


def get_browser_logs(driver: WebDriver) -> List[LogEntry]:
    return [LogEntry.from_dict(raw) for raw in get_browser_logs_as_dicts(driver)]


def filter_logs(entries: Iterable[LogEntry], level: LogLevel | str) -> List[LogEntry]:
    """Entradas de exactamente `level` (no 'igual o superior')."""
    wanted = LogLevel.parse(level)
    return [e for e in entries if e.level == wanted]
