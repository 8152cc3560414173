import pytest
from unittest.mock import Mock
from page_doubles import UNIT_CONFIG, MainPage, build_locator


@pytest.fixture
def config():
    """Unit tests do not use config.json."""
    return dict(UNIT_CONFIG)


@pytest.fixture
def mock_page():
    """Mock a Playwright Page returning one Mock locator per selector."""
    page = Mock()
    page.locators = {}
    page.locator.side_effect = lambda selector: page.locators.setdefault(
        selector, build_locator(selector))
    return page


@pytest.fixture
def main_page_locators(mock_page):
    """Locators of MainPage: two menu links, two rows and three cards."""
    locators = mock_page.locators
    locators[".menu a"] = build_locator(".menu a", members=[
        build_locator("menu-0", text="Home"),
        build_locator("menu-1", text="About")])
    locators[".row"] = build_locator(".row", members=[
        build_locator("row-0", text=" first \n"),
        build_locator("row-1", tag="input", value=" second ")])
    locators[".card"] = build_locator(".card", members=[
        build_locator(f"card-{i}", children={
            ".card-title": build_locator(f"card-title-{i}", text=f"Card {i}")})
        for i in range(3)])
    return locators


@pytest.fixture
def main_page(mock_page, main_page_locators, config):
    return MainPage(mock_page, config).initialize()
