from __future__ import annotations

import logging
import math
from datetime import timedelta
from pathlib import Path
from typing import Optional, Union

from selenium.webdriver import ChromeOptions, EdgeOptions, IeOptions

logger = logging.getLogger(__name__)

Timeout = Union[int, float, timedelta]

# Captura de la consola JS (se lee luego con driver.get_log("browser"))
_LOGGING_PREFS = {"browser": "ALL"}


def to_seconds(timeout: Optional[Timeout], default: float) -> float:
    """Normaliza un timeout (segundos o timedelta) a segundos float; None -> default."""
    if timeout is None:
        return float(default)
    if isinstance(timeout, bool):
        raise TypeError("timeout debe ser segundos (int/float) o timedelta")
    if isinstance(timeout, timedelta):
        seconds = timeout.total_seconds()
    elif isinstance(timeout, (int, float)):
        seconds = float(timeout)
    else:
        raise TypeError("timeout debe ser segundos (int/float) o timedelta")
    if not math.isfinite(seconds) or seconds <= 0:
        raise ValueError(f"timeout debe ser finito y mayor que 0 (recibido: {timeout!r})")
    return seconds


def build_chrome_options(
    *,
    download_dir: Optional[Path] = None,
    headless: bool = False,
    extra_flags: Optional[list[str]] = None,
) -> ChromeOptions:
    """
    ChromeOptions por defecto: ventana maximizada, directorio de descargas
    y captura de logs del navegador.
    No lanza efectos colaterales; sólo prepara el objeto de construcción.
    """
    opts = ChromeOptions()
    flags = ["--start-maximized"]
    if headless:
        flags.append("--headless=new")
    for f in flags + (extra_flags or []):
        opts.add_argument(f)

    prefs = {}
    if download_dir is not None:
        prefs["download.default_directory"] = str(download_dir)
        prefs["download.prompt_for_download"] = False
    if prefs:
        opts.add_experimental_option("prefs", prefs)

    opts.set_capability("goog:loggingPrefs", dict(_LOGGING_PREFS))
    return opts


def build_edge_options(
    *,
    headless: bool = False,
    extra_flags: Optional[list[str]] = None,
) -> EdgeOptions:
    """EdgeOptions por defecto (Edge Chromium) con captura de logs del navegador."""
    opts = EdgeOptions()
    flags = ["--headless=new"] if headless else []
    for f in flags + (extra_flags or []):
        opts.add_argument(f)
    opts.set_capability("ms:loggingPrefs", dict(_LOGGING_PREFS))
    return opts


def build_ie_options() -> IeOptions:
    """IeOptions por defecto: ignora el nivel de zoom (si no, IEDriverServer se niega a arrancar)."""
    opts = IeOptions()
    opts.ignore_zoom_level = True
    return opts


def apply_timeouts(driver, page_load_timeout: float) -> None:
    """Fija el timeout de carga de página del driver."""
    driver.set_page_load_timeout(float(page_load_timeout))
    logger.debug("page_load_timeout=%.1fs", page_load_timeout)
