from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.remote.webdriver import WebDriver

from webtestkit.config.settings import Settings, get_settings
from webtestkit.crosscutting.exceptions import WebHelperClosedError
from webtestkit.crosscutting.logging_config import get_logger, mask_url
from webtestkit.domain.models.log_models import LogEntry, LogLevel
from webtestkit.infrastructure.browser.core.browser_utils import safe_quit
from webtestkit.infrastructure.browser.core.driver_factory import Timeout, apply_timeouts, to_seconds
from webtestkit.infrastructure.browser.core.url_auth import build_windows_auth_url, normalize_url
from webtestkit.infrastructure.browser.extensions.logs import filter_logs, get_browser_logs

log = get_logger("web_helper")


class BaseWebHelper(ABC):
    """
    Administra el ciclo de vida de un WebDriver local ligado a una URL base.

    Con `username` y `password` la URL base lleva las credenciales embebidas
    (Windows Authentication). Usar como context manager:

        with ChromeWebHelper("http://intranet", username="u", password="p") as helper:
            helper.navigate_to_base_url()
    """

    browser_name: str = "browser"
    # Chrome se maximiza vía flag '--start-maximized'; Edge/IE vía API de ventana.
    maximize_by_default: bool = True

    def __init__(
        self,
        base_url: str,
        *,
        username: Optional[str] = None,
        password: Optional[str] = None,
        options: Any = None,
        page_load_timeout: Optional[Timeout] = None,
        maximize: Optional[bool] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        name = type(self).__name__
        if not base_url or not base_url.strip():
            raise ValueError(f"No se pudo inicializar {name}: base_url no puede estar vacío")
        if username is not None or password is not None:
            if not username:
                raise ValueError(f"No se pudo inicializar {name}: username no puede estar vacío")
            if not password:
                raise ValueError(f"No se pudo inicializar {name}: password no puede estar vacío")
            self._base_url = build_windows_auth_url(base_url, username, password)
        else:
            self._base_url = normalize_url(base_url)

        self.settings = settings or get_settings()
        self.page_load_timeout = to_seconds(page_load_timeout, self.settings.browser.page_load_timeout)
        if maximize is None:
            maximize = self.settings.browser.maximize_window and self.maximize_by_default
        self.maximize = bool(maximize)

        self._closed = False
        self._driver: Optional[WebDriver] = None
        self._log = log.bind(helper=name, base_url=mask_url(self._base_url))

        opts = options if options is not None else self._default_options()
        driver = self._create_driver(opts)
        try:
            apply_timeouts(driver, self.page_load_timeout)
            if self.maximize:
                driver.maximize_window()
        except Exception:
            safe_quit(driver)
            raise

        self._driver = driver
        self._log.info(
            "web_helper_initialized",
            browser=self.browser_name,
            page_load_timeout=self.page_load_timeout,
            maximized=self.maximize,
        )

    # ------------------------------------------------------------------ hooks

    @abstractmethod
    def _default_options(self) -> Any:
        """Options por defecto del navegador."""

    @abstractmethod
    def _create_driver(self, options: Any) -> WebDriver:
        """Arranca el driver local con las options dadas."""

    # ------------------------------------------------------------------ public

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def driver(self) -> WebDriver:
        if self._closed or self._driver is None:
            raise WebHelperClosedError(f"{type(self).__name__} ya está cerrado")
        return self._driver

    @property
    def closed(self) -> bool:
        return self._closed

    def navigate_to_base_url(self) -> None:
        self._log.debug("navigate_base_url")
        self.driver.get(self._base_url)

    def check_for_javascript_errors(self) -> List[LogEntry]:
        return self.check_javascript_logs(LogLevel.SEVERE)

    def check_for_javascript_warnings(self) -> List[LogEntry]:
        return self.check_javascript_logs(LogLevel.WARNING)

    def check_javascript_logs(self, level: LogLevel | str) -> List[LogEntry]:
        return filter_logs(self._read_logs(), level)

    def close(self) -> None:
        """Cierra el driver si está vivo (idempotente)."""
        if self._closed:
            return
        self._closed = True
        safe_quit(self._driver)
        self._driver = None
        self._log.info("web_helper_closed", browser=self.browser_name)

    def __enter__(self) -> BaseWebHelper:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<{type(self).__name__} base_url={mask_url(self._base_url)!r} {state}>"

    # ------------------------------------------------------------------ utils

    def _read_logs(self) -> List[LogEntry]:
        return get_browser_logs(self.driver)

    def _read_logs_or_empty(self) -> List[LogEntry]:
        """Algunos drivers no exponen el log 'browser': en ese caso no hay entradas."""
        try:
            return get_browser_logs(self.driver)
        except WebDriverException as e:
            self._log.debug("browser_logs_unavailable", browser=self.browser_name, error=str(e))
            return []
