from playwright.sync_api import Locator
from common.constants import EDITABLE_TAGS
from utils.text_utils import normalize_text

HIGHLIGHT_STYLE = "border: 2px solid red !important;"


def highlight_element(locator: Locator):
    """
    Highlights an element by adding a 2px solid red border.
    Returns the element's original 'style' attribute so it can be restored later.
    """
    original_style = locator.evaluate("el => el.getAttribute('style')")
    locator.evaluate(
        f"el => el.setAttribute('style', (el.getAttribute('style') || '') + '; {HIGHLIGHT_STYLE}')"
    )
    return original_style


def reset_element_style(locator: Locator, original_style: str | None):
    """
    Restores an element's style attribute to its original value.
    Args:
        locator: The Playwright Locator for the element.
        original_style: The style string returned from highlight_element().
    """
    if original_style is None:
        locator.evaluate("el => el.removeAttribute('style')")
    else:
        locator.evaluate("(el, style) => el.setAttribute('style', style)", original_style)


def is_editable_tag(tag_name: str | None) -> bool:
    return (tag_name or "").lower() in EDITABLE_TAGS


def get_any_element_text(element) -> str | None:
    """
    Returns the value of an editable element (input, textarea)
    or the rendered text of any other element.

    Args:
        element: SmartElement or any handle with get_tag_name(),
            get_value() and get_text().
    """
    if is_editable_tag(element.get_tag_name()):
        return element.get_value()
    return element.get_text()


def get_any_element_inner_text(element) -> str:
    """
    Same as get_any_element_text() but reads the full text content,
    including hidden text, and trims whitespace and line breaks.
    """
    if is_editable_tag(element.get_tag_name()):
        return normalize_text(element.get_value())
    return normalize_text(element.get_inner_text())
