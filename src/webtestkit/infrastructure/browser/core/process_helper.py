"""
Descubrimiento de procesos de driver/navegador a nivel de sistema operativo.

Algunos drivers (IEDriverServer, sobre todo) no cierran la ventana del
navegador al hacer quit(). Estas funciones localizan el proceso del driver
por nombre y la ventana del navegador como hijo directo de ese proceso,
para poder matarla después.
"""
from __future__ import annotations

from typing import List, Optional

import psutil

from webtestkit.crosscutting.exceptions import DriverProcessError
from webtestkit.crosscutting.logging_config import get_logger

log = get_logger("process_helper")

CHROME_DRIVER = "chromedriver"
EDGE_DRIVER = "msedgedriver"
IE_DRIVER = "IEDriverServer"

CHROME_BROWSER = "chrome"
EDGE_BROWSER = "msedge"
IE_BROWSER = "iexplore"

_DRIVER_LABELS = {
    CHROME_DRIVER: "ChromeDriver",
    EDGE_DRIVER: "EdgeDriver",
    IE_DRIVER: "IEDriver",
}


def _normalize_name(name: Optional[str]) -> str:
    name = (name or "").strip().lower()
    return name[:-4] if name.endswith(".exe") else name


def find_processes_by_name(name: str) -> List[psutil.Process]:
    """Procesos vivos cuyo nombre coincide (sin distinguir mayúsculas ni '.exe')."""
    target = _normalize_name(name)
    found: List[psutil.Process] = []
    for p in psutil.process_iter(["name"]):
        try:
            if _normalize_name(p.info.get("name")) == target:
                found.append(p)
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            continue
    return found


def _get_single_process(name: str) -> psutil.Process:
    processes = find_processes_by_name(name)
    if len(processes) != 1:
        label = _DRIVER_LABELS.get(name, name)
        raise DriverProcessError(
            f"No se pudo determinar el proceso de {label}. "
            f"Actualmente hay {len(processes)} procesos de {label} activos",
            details={"process_name": name, "count": len(processes)},
        )
    return processes[0]


def _get_single_process_or_none(name: str) -> Optional[psutil.Process]:
    processes = find_processes_by_name(name)
    return processes[0] if len(processes) == 1 else None


# ------------------------------ drivers ------------------------------

def get_chrome_driver_process() -> psutil.Process:
    """Proceso único de chromedriver; DriverProcessError si hay 0 o más de uno."""
    return _get_single_process(CHROME_DRIVER)


def get_chrome_driver_process_or_none() -> Optional[psutil.Process]:
    return _get_single_process_or_none(CHROME_DRIVER)


def get_edge_driver_process() -> psutil.Process:
    """Proceso único de msedgedriver; DriverProcessError si hay 0 o más de uno."""
    return _get_single_process(EDGE_DRIVER)


def get_edge_driver_process_or_none() -> Optional[psutil.Process]:
    return _get_single_process_or_none(EDGE_DRIVER)


def get_internet_explorer_driver_process() -> psutil.Process:
    """Proceso único de IEDriverServer; DriverProcessError si hay 0 o más de uno."""
    return _get_single_process(IE_DRIVER)


def get_internet_explorer_driver_process_or_none() -> Optional[psutil.Process]:
    return _get_single_process_or_none(IE_DRIVER)


# ------------------------------ ventanas ------------------------------

def get_window_process(driver_pid: int, browser_name: str) -> Optional[psutil.Process]:
    """Primer proceso `browser_name` cuyo padre es `driver_pid` (None si no hay)."""
    for p in find_processes_by_name(browser_name):
        try:
            if p.ppid() == driver_pid:
                return p
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            continue
    return None


def _window_for(driver_name: str, browser_name: str, driver_pid: Optional[int]) -> Optional[psutil.Process]:
    if driver_pid is None:
        driver_pid = _get_single_process(driver_name).pid
    return get_window_process(driver_pid, browser_name)


def _window_for_or_none(driver_name: str, browser_name: str) -> Optional[psutil.Process]:
    driver_process = _get_single_process_or_none(driver_name)
    if driver_process is None:
        return None
    return get_window_process(driver_process.pid, browser_name)


def get_chrome_window_process(driver_pid: Optional[int] = None) -> Optional[psutil.Process]:
    return _window_for(CHROME_DRIVER, CHROME_BROWSER, driver_pid)


def get_chrome_window_process_or_none() -> Optional[psutil.Process]:
    return _window_for_or_none(CHROME_DRIVER, CHROME_BROWSER)


def get_edge_window_process(driver_pid: Optional[int] = None) -> Optional[psutil.Process]:
    return _window_for(EDGE_DRIVER, EDGE_BROWSER, driver_pid)


def get_edge_window_process_or_none() -> Optional[psutil.Process]:
    return _window_for_or_none(EDGE_DRIVER, EDGE_BROWSER)


def get_internet_explorer_window_process(driver_pid: Optional[int] = None) -> Optional[psutil.Process]:
    return _window_for(IE_DRIVER, IE_BROWSER, driver_pid)


def get_internet_explorer_window_process_or_none() -> Optional[psutil.Process]:
    return _window_for_or_none(IE_DRIVER, IE_BROWSER)


def kill_process(process: Optional[psutil.Process]) -> bool:
    """Mata el proceso si sigue vivo. Devuelve True si lo mató."""
    if process is None:
        return False
    try:
        if not process.is_running():
            return False
        process.kill()
        log.info("browser_window_killed", pid=process.pid)
        return True
    except psutil.NoSuchProcess:
        return False
