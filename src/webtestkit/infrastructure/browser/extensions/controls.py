"""
Atajos 'buscar y actuar' sobre controles de formulario.

Los locators son tuplas (By.X, valor), igual que en expected_conditions.
No esperan: si el elemento no está, Selenium lanza NoSuchElementException.
Para esperar primero, combinar con extensions.waits.
"""
from __future__ import annotations

from typing import Tuple

from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.support.select import Select

from webtestkit.infrastructure.browser.extensions.elements import javascript_click

Locator = Tuple[str, str]


# ------------------------------ texto ------------------------------

def find_and_enter_text(driver: WebDriver, locator: Locator, text: str) -> None:
    driver.find_element(*locator).send_keys(text)


def find_and_enter_text_by_id(driver: WebDriver, element_id: str, text: str) -> None:
    find_and_enter_text(driver, (By.ID, element_id), text)


def find_and_enter_text_by_name(driver: WebDriver, element_name: str, text: str) -> None:
    find_and_enter_text(driver, (By.NAME, element_name), text)


def find_and_get_text(driver: WebDriver, locator: Locator) -> str:
    return driver.find_element(*locator).text


def find_and_get_text_by_id(driver: WebDriver, element_id: str) -> str:
    return find_and_get_text(driver, (By.ID, element_id))


def find_and_get_text_by_name(driver: WebDriver, element_name: str) -> str:
    return find_and_get_text(driver, (By.NAME, element_name))


# ------------------------------ clicks ------------------------------

def find_and_click(driver: WebDriver, locator: Locator) -> None:
    driver.find_element(*locator).click()


def find_and_click_by_id(driver: WebDriver, element_id: str) -> None:
    find_and_click(driver, (By.ID, element_id))


def find_and_click_by_name(driver: WebDriver, element_name: str) -> None:
    find_and_click(driver, (By.NAME, element_name))


def find_and_javascript_click(driver: WebDriver, locator: Locator) -> None:
    javascript_click(driver.find_element(*locator), driver)


def find_and_javascript_click_by_id(driver: WebDriver, element_id: str) -> None:
    find_and_javascript_click(driver, (By.ID, element_id))


def find_and_javascript_click_by_name(driver: WebDriver, element_name: str) -> None:
    find_and_javascript_click(driver, (By.NAME, element_name))


# ------------------------------ dropdowns ------------------------------

def find_and_select_dropdown_item(driver: WebDriver, locator: Locator, item_text: str) -> None:
    """Selecciona la opción cuyo texto visible es `item_text`."""
    Select(driver.find_element(*locator)).select_by_visible_text(item_text)


def find_and_select_dropdown_item_by_id(driver: WebDriver, element_id: str, item_text: str) -> None:
    find_and_select_dropdown_item(driver, (By.ID, element_id), item_text)


def find_and_select_dropdown_item_by_name(driver: WebDriver, element_name: str, item_text: str) -> None:
    find_and_select_dropdown_item(driver, (By.NAME, element_name), item_text)


def find_and_select_dropdown_index(driver: WebDriver, locator: Locator, item_index: int) -> None:
    """Selecciona la opción por índice (atributo 'index', base 0)."""
    Select(driver.find_element(*locator)).select_by_index(item_index)


def find_and_select_dropdown_index_by_id(driver: WebDriver, element_id: str, item_index: int) -> None:
    find_and_select_dropdown_index(driver, (By.ID, element_id), item_index)


def find_and_select_dropdown_index_by_name(driver: WebDriver, element_name: str, item_index: int) -> None:
    find_and_select_dropdown_index(driver, (By.NAME, element_name), item_index)
