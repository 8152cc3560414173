import logging
from wrappers.smart_element import Condition, SmartElement, SmartElementsCollection

logger = logging.getLogger(__name__)


def check_appeared(page, timeout: int, hidden_condition=Condition.HIDDEN, check_block=None):
    """
    Verifies that the page is shown:
    - every primary element becomes visible,
    - every hidden element reaches hidden_condition,
    - every primary nested block passes check_block(block).
    Stops at the first element that does not reach its state in time.

    Raises:
        ElementTimeoutError: Element did not reach its state within timeout.
    """
    logger.debug("Checking page %s appeared", page.__class__.__name__)

    for element in page.get_primary_elements():
        element.wait_until(Condition.VISIBLE, timeout)

    for element in page.get_hidden_elements():
        element.wait_until(hidden_condition, timeout)

    if check_block is not None:
        for block in page.get_primary_blocks():
            check_block(block)


def check_disappeared(page, timeout: int, absent_condition=Condition.NOT_EXIST):
    """Verifies that every primary element of the page is gone. Nested blocks are not checked."""
    logger.debug("Checking page %s disappeared", page.__class__.__name__)

    for element in page.get_primary_elements():
        element.wait_until(absent_condition, timeout)


def flatten_handles(items) -> list:
    """Expands collections and lists of elements into single elements, keeping order."""
    elements = []

    for item in items:
        if isinstance(item, SmartElementsCollection):
            elements.extend(item.snapshot())
        elif isinstance(item, (list, tuple)):
            elements.extend(flatten_handles(item))
        else:
            elements.append(item)

    return elements


def wait_elements_until(condition, timeout: int, *elements):
    """
    Waits for the same condition with the same timeout on every element.

    Args:
        condition: Condition member or a predicate callable(element) -> bool.
        timeout: Maximum waiting time in milliseconds per element.
        elements: SmartElement, SmartElementsCollection or lists of SmartElement.
    """
    handles = flatten_handles(elements)

    for element in handles:
        if not isinstance(element, SmartElement):
            raise TypeError(f"Expected SmartElement, got {type(element).__name__}")

    for element in handles:
        element.wait_until(condition, timeout)
