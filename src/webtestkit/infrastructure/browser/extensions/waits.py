from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional, Tuple, Type, TypeVar

from selenium.common.exceptions import (
    StaleElementReferenceException,
    TimeoutException,
)
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from webtestkit.config.settings import get_settings
from webtestkit.crosscutting.exceptions import WebDriverWaitError
from webtestkit.infrastructure.browser.core.browser_utils import require_driver
from webtestkit.infrastructure.browser.core.driver_factory import Timeout, to_seconds

logger = logging.getLogger(__name__)

T = TypeVar("T")
Locator = Tuple[str, str]


def wait_until(
    driver: WebDriver,
    condition: Callable[[WebDriver], T],
    timeout: Optional[Timeout] = None,
    *,
    message: str = "condición",
    ignored_exceptions: Optional[Iterable[Type[BaseException]]] = None,
    poll_frequency: Optional[float] = None,
) -> T:
    """
    Espera acotada: evalúa `condition(driver)` hasta que devuelva algo truthy
    o venza el timeout.

    - `timeout`: segundos o timedelta; None usa Settings.wait_timeout.
    - Al vencer lanza WebDriverWaitError con la TimeoutException como causa.
    - NoSuchElementException se ignora siempre mientras se sondea: termina en timeout.
    """
    require_driver(driver, "esperar")
    wait_cfg = get_settings().wait
    seconds = to_seconds(timeout, wait_cfg.timeout)
    poll = poll_frequency if poll_frequency is not None else wait_cfg.poll_frequency

    wait = WebDriverWait(
        driver,
        seconds,
        poll_frequency=poll,
        ignored_exceptions=tuple(ignored_exceptions) if ignored_exceptions else None,
    )
    try:
        return wait.until(condition)
    except TimeoutException as e:
        logger.warning("[waits] wait_timeout %.1fs esperando %s", seconds, message)
        raise WebDriverWaitError(
            f"Se excedió el timeout de {seconds:g}s esperando {message}",
            details={"timeout": seconds},
            cause=e,
        ) from e


def _describe(locator: Locator) -> str:
    by, value = locator
    return f"{by}={value!r}"


def wait_for_page_load(driver: WebDriver, timeout: Optional[Timeout] = None) -> bool:
    """True cuando document.readyState == 'complete'."""
    return bool(
        wait_until(
            driver,
            lambda d: d.execute_script("return document.readyState") == "complete",
            timeout,
            message="la carga completa de la página",
        )
    )


def wait_until_element_exists(
    driver: WebDriver, locator: Locator, timeout: Optional[Timeout] = None
) -> WebElement:
    """Elemento presente en el DOM (no necesariamente visible)."""
    return wait_until(
        driver,
        EC.presence_of_element_located(locator),
        timeout,
        message=f"que exista el elemento con locator {_describe(locator)}",
    )


def wait_until_element_is_visible(
    driver: WebDriver, locator: Locator, timeout: Optional[Timeout] = None
) -> WebElement:
    return wait_until(
        driver,
        EC.visibility_of_element_located(locator),
        timeout,
        message=f"que sea visible el elemento con locator {_describe(locator)}",
    )


def wait_until_element_is_clickable(
    driver: WebDriver, locator: Locator, timeout: Optional[Timeout] = None
) -> WebElement:
    return wait_until(
        driver,
        EC.element_to_be_clickable(locator),
        timeout,
        message=f"que sea clickeable el elemento con locator {_describe(locator)}",
    )


def wait_until_element_contains_text(
    driver: WebDriver, locator: Locator, text: str, timeout: Optional[Timeout] = None
) -> bool:
    """True cuando el texto del elemento contiene `text`. Tolera elementos stale mientras re-renderiza."""
    result: Any = wait_until(
        driver,
        EC.text_to_be_present_in_element(locator, text),
        timeout,
        message=f"el texto {text!r} en el elemento con locator {_describe(locator)}",
        ignored_exceptions=(StaleElementReferenceException,),
    )
    return bool(result)
