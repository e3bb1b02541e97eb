from __future__ import annotations

import logging
from typing import Optional

from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.common.alert import Alert
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from webtestkit.config.settings import get_settings
from webtestkit.crosscutting.exceptions import WebDriverWaitError
from webtestkit.infrastructure.browser.core.browser_utils import require_driver
from webtestkit.infrastructure.browser.core.driver_factory import Timeout, to_seconds

logger = logging.getLogger(__name__)


def _wait_for_alert(driver: WebDriver, seconds: float) -> Alert:
    WebDriverWait(driver, seconds, poll_frequency=get_settings().wait.poll_frequency).until(EC.alert_is_present())
    return driver.switch_to.alert


def _handle_alert(driver: WebDriver, timeout: Optional[Timeout], *, accept: bool) -> None:
    action = "aceptando" if accept else "descartando"
    require_driver(driver, f"esperar una alerta ({action})")
    seconds = to_seconds(timeout, get_settings().wait.timeout)
    try:
        alert = _wait_for_alert(driver, seconds)
        if alert is not None:
            if accept:
                alert.accept()
            else:
                alert.dismiss()
            logger.debug("[alerts] alerta %s", "aceptada" if accept else "descartada")
    except TimeoutException as e:
        raise WebDriverWaitError(
            f"Se excedió el timeout de {seconds:g}s esperando una alerta",
            details={"timeout": seconds},
            cause=e,
        ) from e
    except WebDriverException as e:
        raise WebDriverWaitError(f"Error esperando y {action} la alerta", cause=e) from e


def wait_and_accept_alert(driver: WebDriver, timeout: Optional[Timeout] = None) -> None:
    """Espera a que aparezca una alerta JS y la acepta."""
    _handle_alert(driver, timeout, accept=True)


def wait_and_dismiss_alert(driver: WebDriver, timeout: Optional[Timeout] = None) -> None:
    """Espera a que aparezca una alerta JS y la descarta."""
    _handle_alert(driver, timeout, accept=False)
