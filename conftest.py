import json
import re
import time
from pathlib import Path
import pytest
from playwright.sync_api import Error as PlaywrightError, sync_playwright
from helpers.page_registry import PageRegistry


ROOT_DIR = Path(__file__).parent
REPORT_DIR = Path.cwd() / "reports"
REPORT_FILE = REPORT_DIR / "report.html"


# ---------------------------------------------------------------------------
# Load configuration
# ---------------------------------------------------------------------------
with open(ROOT_DIR / "config.json", encoding="utf-8") as f:
    CONFIG = json.load(f)


# ---------------------------------------------------------------------------
# CLI options
# ---------------------------------------------------------------------------
def pytest_addoption(parser):
    parser.addoption(
        "--browser_name",
        action="store",
        choices=["chromium", "firefox", "webkit"],
        help="Override browser from config.json",
    )

    parser.addoption(
        "--headed",
        action="store_true",
        default=False,
        help="Run browser in headed mode",
    )

    parser.addoption(
        "--highlight",
        action="store",
        choices=["true", "false"],
        help="Highlight elements during tests",
    )

    parser.addoption(
        "--screenshot_on_error",
        action="store",
        default="true",
        help="Capture screenshot on test failure",
    )

    parser.addoption(
        "--step_delay",
        action="store",
        type=int,
        help="Delay (in ms) between steps",
    )

    parser.addoption(
        "--waiting_appear_timeout",
        action="store",
        type=int,
        help="Timeout (in ms) of page appeared/disappeared checks",
    )


# ---------------------------------------------------------------------------
# Config fixture
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def config(pytestconfig):
    cfg = CONFIG.copy()

    # Browser and headless
    browser_name = pytestconfig.getoption("browser_name")
    if browser_name:
        cfg["browser"] = browser_name
    if pytestconfig.getoption("headed"):
        cfg["headless"] = False

    # Highlight mode
    highlight = pytestconfig.getoption("highlight")
    if highlight is not None:
        cfg["highlight"] = highlight.lower() == "true"
    else:
        cfg["highlight"] = bool(cfg.get("highlight", False))

    # Screenshot on error
    screenshot_on_error = pytestconfig.getoption("screenshot_on_error")
    if screenshot_on_error is not None:
        cfg["screenshot_on_error"] = screenshot_on_error.lower() == "true"

    # Step delay
    step_delay = pytestconfig.getoption("step_delay")
    if step_delay is not None:
        cfg["step_delay"] = step_delay

    # Appear / disappear timeout
    waiting_appear_timeout = pytestconfig.getoption("waiting_appear_timeout")
    if waiting_appear_timeout is not None:
        cfg["waiting_appear_timeout"] = waiting_appear_timeout

    return cfg


# ---------------------------------------------------------------------------
# Playwright fixtures
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def playwright_instance():
    """Provide a shared Playwright instance."""
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance, config):
    """Launch a browser based on config."""
    browser_name = config.get("browser", "chromium")
    headless = config.get("headless", True)
    try:
        browser = getattr(playwright_instance, browser_name).launch(headless=headless)
    except PlaywrightError as e:
        pytest.skip(f"Browser {browser_name} is not available: {e}")
    yield browser
    browser.close()


@pytest.fixture(scope="function")
def context(browser, config):
    """New browser context per test."""
    context = browser.new_context()
    context.set_default_timeout(config.get("timeout", 30000))
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context, config):
    """New page per test."""
    page = context.new_page()
    page.set_default_timeout(config.get("timeout", 30000))
    yield page
    page.close()


@pytest.fixture(scope="function")
def page_registry(page, config):
    """Block registry shared by the page models of one test."""
    return PageRegistry(page, config)


def pytest_configure(config):
    """Make sure reports/ exists and direct pytest-html there."""
    config.addinivalue_line("markers", "e2e: test drives a real browser")
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    config.option.htmlpath = str(REPORT_FILE)
    print(f"[INFO] HTML report → {REPORT_FILE}")


def pytest_sessionstart(session):
    """Delete old report & screenshots before the session begins."""
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    for f in REPORT_DIR.glob("*"):
        try:
            f.unlink()
        except OSError as e:
            print(f"[WARN] Could not remove {f}: {e}")


def safe_filename(name: str) -> str:
    """
    Convert any string (like test names or parameterized values)
    into a filesystem-safe filename.
    Keeps letters, digits, underscore, dash, and dot only.
    """
    name = re.sub(r'[<>:"/\\|?*\s,=#@!%^&;{}()+\[\]]+', '_', name)
    name = re.sub(r'_+', '_', name)
    name = name.strip('._')
    return name[:150]


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture a Playwright screenshot and attach it to the HTML report."""
    outcome = yield
    rep = outcome.get_result()

    if rep.when != "call" or not rep.failed:
        return

    opt_value = item.config.getoption("screenshot_on_error") or "true"
    if str(opt_value).strip().lower() != "true":
        return

    from playwright.sync_api import Page

    page = item.funcargs.get("page", None)
    if not page or not isinstance(page, Page):
        return

    from datetime import datetime

    # Build unique name: {test-name}-yyyy-MM-dd-hh-mm-ss-sss.png
    ts = datetime.now().strftime("%Y-%m-%d-%H-%M-%S-%f")[:-3]
    screenshot_path = REPORT_DIR / f"{safe_filename(item.name)}-{ts}.png"

    try:
        # Give browser time to render any failure overlay
        time.sleep(0.2)
        page.screenshot(path=str(screenshot_path), full_page=True)
        print(f"[INFO] Screenshot saved → {screenshot_path}")
    except PlaywrightError as e:
        print(f"[WARN] Screenshot capture failed: {e}")
        return

    html = item.config.pluginmanager.getplugin("html")
    if html:
        rel_path = screenshot_path.name
        link_html = f'<a href="{rel_path}" target="_blank">Open Screenshot</a>'
        rep.extras = getattr(rep, "extras", [])
        rep.extras.append(html.extras.html(link_html))
        rep.extras.append(html.extras.image(rel_path))
