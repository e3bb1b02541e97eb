from __future__ import annotations

from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.common.keys import Keys
from selenium.webdriver.remote.webdriver import WebDriver

from webtestkit.infrastructure.browser.core.browser_utils import require_driver


def _send_key(driver: WebDriver, key: str) -> None:
    ActionChains(driver).send_keys(key).perform()


def page_down(driver: WebDriver) -> None:
    """Envía PgDn a la página activa."""
    require_driver(driver, "enviar PgDn")
    _send_key(driver, Keys.PAGE_DOWN)


def page_up(driver: WebDriver) -> None:
    """Envía PgUp a la página activa."""
    require_driver(driver, "enviar PgUp")
    _send_key(driver, Keys.PAGE_UP)
