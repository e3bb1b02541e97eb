from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from selenium.webdriver.remote.webdriver import WebDriver

from webtestkit.domain.models.log_models import LogEntry, LogLevel


# =========================
# Puerto: WebHelperPort
# =========================

@runtime_checkable
class WebHelperPort(Protocol):
    """
    Helper que configura y es dueño de una sesión de navegador ligada a una URL base.

    Los helpers concretos (Chrome, Edge, Internet Explorer) deben implementar
    esta interfaz. Se usan como context manager: al salir se cierra el driver
    (y, según el navegador, la ventana que haya quedado viva).
    """

    @property
    def base_url(self) -> str:
        """URL base del sitio bajo test (con credenciales embebidas si se pasaron)."""
        ...

    @property
    def driver(self) -> WebDriver:
        """WebDriver subyacente de Selenium."""
        ...

    def navigate_to_base_url(self) -> None:
        """Navega a la URL base."""
        ...

    def check_for_javascript_errors(self) -> List[LogEntry]:
        """Entradas de consola JS de nivel SEVERE de la página actual."""
        ...

    def check_for_javascript_warnings(self) -> List[LogEntry]:
        """Entradas de consola JS de nivel WARNING de la página actual."""
        ...

    def check_javascript_logs(self, level: LogLevel | str) -> List[LogEntry]:
        """Entradas de consola JS de exactamente el nivel indicado."""
        ...

    def close(self) -> None:
        """Cierra el driver (idempotente)."""
        ...

    def __enter__(self) -> "WebHelperPort":
        ...

    def __exit__(self, exc_type, exc, tb) -> None:
        ...
