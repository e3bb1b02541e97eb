from __future__ import annotations

from typing import List

import psutil
from selenium.webdriver import Ie, IeOptions

from webtestkit.domain.models.log_models import LogEntry
from webtestkit.infrastructure.browser.core import process_helper
from webtestkit.infrastructure.browser.core.driver_factory import build_ie_options

from .base import BaseWebHelper


class InternetExplorerWebHelper(BaseWebHelper):
    """
    Helper sobre IEDriverServer.

    IEDriverServer no cierra la ventana de iexplore al hacer quit(): close()
    localiza antes el proceso de la ventana (hijo del driver), cierra el
    driver y, si la ventana sigue viva, la mata.
    """

    browser_name = "internet_explorer"

    def _default_options(self) -> IeOptions:
        return build_ie_options()

    def _create_driver(self, options: IeOptions) -> Ie:
        return Ie(options=options)

    def _read_logs(self) -> List[LogEntry]:
        # Algunas versiones de IE no dan acceso a los logs
        return self._read_logs_or_empty()

    def close(self) -> None:
        if self.closed:
            return
        browser = None
        try:
            browser = process_helper.get_internet_explorer_window_process_or_none()
        except psutil.Error:
            self._log.warning("browser_window_lookup_failed", exc_info=True)

        super().close()

        try:
            process_helper.kill_process(browser)
        except psutil.Error:
            self._log.warning("browser_window_kill_failed", exc_info=True)
