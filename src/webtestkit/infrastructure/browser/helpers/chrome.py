from __future__ import annotations

from selenium.webdriver import Chrome, ChromeOptions

from webtestkit.infrastructure.browser.core.driver_factory import build_chrome_options

from .base import BaseWebHelper


class ChromeWebHelper(BaseWebHelper):
    """Helper sobre ChromeDriver. La ventana se maximiza por flag, no por API."""

    browser_name = "chrome"
    maximize_by_default = False

    def _default_options(self) -> ChromeOptions:
        return build_chrome_options(
            download_dir=self.settings.browser.download_dir,
            headless=self.settings.browser.headless,
        )

    def _create_driver(self, options: ChromeOptions) -> Chrome:
        return Chrome(options=options)
