"""
Módulo de browser:
helpers que administran la sesión del navegador, extensiones sobre el driver
(waits, alertas, controles, logs), URLs con Windows Authentication y
descubrimiento de procesos de driver/navegador.
"""

from .core.browser_utils import require_driver, safe_quit
from .core.driver_factory import (
    apply_timeouts,
    build_chrome_options,
    build_edge_options,
    build_ie_options,
    to_seconds,
)
from .core.url_auth import build_windows_auth_url, default_port, normalize_url
from .helpers.base import BaseWebHelper
from .helpers.chrome import ChromeWebHelper
from .helpers.edge import EdgeWebHelper
from .helpers.internet_explorer import InternetExplorerWebHelper
from .pages.page_base import PageBase

__all__ = [
    # browser_utils
    "require_driver",
    "safe_quit",
    # driver_factory
    "apply_timeouts",
    "build_chrome_options",
    "build_edge_options",
    "build_ie_options",
    "to_seconds",
    # url_auth
    "build_windows_auth_url",
    "default_port",
    "normalize_url",
    # helpers
    "BaseWebHelper",
    "ChromeWebHelper",
    "EdgeWebHelper",
    "InternetExplorerWebHelper",
    # pages
    "PageBase",
]
