from __future__ import annotations

import logging
from abc import ABC
from typing import Optional

from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from webtestkit.crosscutting.logging_config import mask_url
from webtestkit.infrastructure.browser.core.driver_factory import Timeout
from webtestkit.infrastructure.browser.extensions.waits import (
    Locator,
    wait_for_page_load,
    wait_until_element_exists,
)

logger = logging.getLogger(__name__)


class PageBase(ABC):
    """
    Base para page objects: guarda el driver y ofrece atajos de navegación.
    Las subclases definen sus locators y acciones.
    """

    def __init__(self, driver: WebDriver) -> None:
        if driver is None:
            raise ValueError("driver requerido")
        self._driver = driver

    @property
    def driver(self) -> WebDriver:
        return self._driver

    def open(self, url: str, *, timeout: Optional[Timeout] = None) -> None:
        """GET + espera a document.readyState == 'complete'."""
        logger.debug("[page] GET %s", mask_url(url))
        self._driver.get(url)
        wait_for_page_load(self._driver, timeout)

    def wait_until_loaded(self, timeout: Optional[Timeout] = None) -> bool:
        return wait_for_page_load(self._driver, timeout)

    def find(self, locator: Locator) -> WebElement:
        return self._driver.find_element(*locator)

    def wait_for(self, locator: Locator, timeout: Optional[Timeout] = None) -> WebElement:
        return wait_until_element_exists(self._driver, locator, timeout)
