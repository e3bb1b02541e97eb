"""
Configuración global de pytest con fixtures compartidas.

Este archivo proporciona:
- Settings de test (polling rápido, sin leer .env del desarrollador)
- Mock de WebDriver (sin navegador real)
- Parches de las clases de driver de Selenium (Chrome, Edge, Ie)
"""
from __future__ import annotations

from typing import Generator
from unittest.mock import MagicMock, patch

import pytest

from webtestkit.config.settings import Settings, get_settings


# =========================================================
# Fixture: Configuración de Test
# =========================================================

@pytest.fixture(autouse=True)
def fast_polling(monkeypatch) -> Generator[None, None, None]:
    """
    Polling de waits a 10ms para que los tests de timeout no tarden.

    get_settings() está cacheado: se limpia antes y después de cada test.
    """
    monkeypatch.setenv("WEBTESTKIT_POLL_FREQUENCY", "0.01")
    monkeypatch.setenv("WEBTESTKIT_WAIT_TIMEOUT", "0.2")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Configuración de test explícita (no depende del entorno)."""
    return Settings(
        page_load_timeout=30.0,
        wait_timeout=0.2,
        poll_frequency=0.01,
        maximize_window=True,
        headless=True,
        download_dir=tmp_path / "downloads",
    )


# =========================================================
# Fixture: Mock de WebDriver (sin Selenium real)
# =========================================================

@pytest.fixture
def mock_driver() -> MagicMock:
    """
    Mock de WebDriver.

    - get_log("browser") devuelve []
    - execute_script devuelve "complete" (document.readyState)
    - find_element devuelve siempre el mismo elemento mock
    """
    driver = MagicMock(name="WebDriver")
    driver.session_id = "session-123"
    driver.get_log.return_value = []
    driver.execute_script.return_value = "complete"

    element = MagicMock(name="WebElement")
    element.text = ""
    element.is_displayed.return_value = True
    element.is_enabled.return_value = True
    driver.find_element.return_value = element
    return driver


# =========================================================
# Fixture: Parches de clases de driver
# =========================================================

@pytest.fixture
def patched_chrome(mock_driver) -> Generator[MagicMock, None, None]:
    with patch(
        "webtestkit.infrastructure.browser.helpers.chrome.Chrome", return_value=mock_driver
    ) as chrome_cls:
        yield chrome_cls


@pytest.fixture
def patched_edge(mock_driver) -> Generator[MagicMock, None, None]:
    with patch(
        "webtestkit.infrastructure.browser.helpers.edge.Edge", return_value=mock_driver
    ) as edge_cls:
        yield edge_cls


@pytest.fixture
def patched_ie(mock_driver) -> Generator[MagicMock, None, None]:
    with patch(
        "webtestkit.infrastructure.browser.helpers.internet_explorer.Ie", return_value=mock_driver
    ) as ie_cls:
        yield ie_cls


@pytest.fixture
def browser_log_entries() -> list[dict]:
    """Entradas crudas de log 'browser' como las devuelve WebDriver."""
    return [
        {"level": "SEVERE", "message": "Uncaught TypeError: x is undefined", "source": "javascript", "timestamp": 1700000000000},
        {"level": "WARNING", "message": "deprecated API", "source": "console-api", "timestamp": 1700000000100},
        {"level": "INFO", "message": "hello", "source": "console-api", "timestamp": 1700000000200},
        {"level": "SEVERE", "message": "404 favicon.ico", "source": "network", "timestamp": 1700000000300},
    ]
