from __future__ import annotations

from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

CLICK_JS = "arguments[0].click();"


def javascript_click(element: WebElement, driver: WebDriver) -> None:
    """Click vía JS; sirve cuando un overlay intercepta el click nativo."""
    driver.execute_script(CLICK_JS, element)
