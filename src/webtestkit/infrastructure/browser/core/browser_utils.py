from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def require_driver(driver, action: str) -> None:
    """Valida que haya un driver antes de operar sobre él."""
    if driver is None:
        raise ValueError(f"No se pudo {action}: el parámetro 'driver' no puede ser None")


def safe_quit(driver) -> None:
    """Cierra el driver si está vivo (idempotente)."""
    if driver:
        try:
            driver.quit()
        except Exception:
            logger.debug("Error cerrando driver", exc_info=True)
