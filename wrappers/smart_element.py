import logging
import time
from enum import Enum
from playwright.sync_api import Locator, TimeoutError as PlaywrightTimeoutError
from common.constants import POLLING_INTERVAL
from common.errors import ElementTimeoutError
from utils.config_utils import get_int_config_value, is_config_flag_on
from utils.web_utils import highlight_element, reset_element_style

logger = logging.getLogger(__name__)


class Condition(Enum):
    """
    Element states accepted by SmartElement.wait_until().
    Values are Playwright wait_for() states, except NOT_VISIBLE which is polled
    through is_visible() and tolerates elements staying attached to the DOM.
    """
    VISIBLE = "visible"
    HIDDEN = "hidden"
    EXIST = "attached"
    NOT_EXIST = "detached"
    NOT_VISIBLE = "not visible"


POLLED_CONDITIONS = {
    Condition.NOT_VISIBLE: lambda element: not element.is_visible(),
}


def get_condition_name(condition) -> str:
    if isinstance(condition, Condition):
        return condition.name.lower().replace("_", " ")
    return getattr(condition, "__name__", repr(condition))


class SmartHandle:
    """
    Common part of element handles: owner page, selector and label.
    The locator is resolved lazily against the owner's page or block root,
    unless the handle was created from a fixed locator (list members).
    """

    def _bind(self, owner, selector: str | None, label: str, locator: Locator = None):
        self.owner = owner
        self.selector = selector
        self.label = label
        self._fixed_locator = locator

    @classmethod
    def from_selector(cls, owner, selector: str, label: str):
        """Creates a handle resolved lazily by selector that is not declared as a page field."""
        handle = cls.__new__(cls)
        handle._bind(owner, selector, label)
        return handle

    @classmethod
    def from_locator(cls, owner, locator: Locator, label: str):
        """Creates a handle that is not declared as a page field."""
        handle = cls.__new__(cls)
        handle._bind(owner, None, label, locator)
        return handle

    @property
    def locator(self) -> Locator:
        if self._fixed_locator is not None:
            return self._fixed_locator
        return self.owner.locate(self.selector)

    @property
    def owner_name(self) -> str:
        return self.owner.__class__.__name__


class SmartElement(SmartHandle):
    """
    SmartElement is a page field bound to one UI control:
    - State checks and text extraction used by the page model.
    - Condition-based waiting with a timeout in milliseconds.
    - Transparent proxying of other Locator methods (e.g. .fill(), .click())
      with optional highlight and step delay.
    """

    def __init__(self, owner, selector: str, name: str = None,
                 hidden: bool = False, optional: bool = False):
        self._bind(owner, selector, name or selector)
        owner.declare_field(self, name=name, hidden=hidden, optional=optional)

    def exists(self) -> bool:
        return self.locator.count() > 0

    def is_visible(self) -> bool:
        return self.locator.is_visible()

    def get_text(self) -> str:
        return self.locator.inner_text()

    def get_inner_text(self) -> str | None:
        # Includes text of hidden descendants
        return self.locator.text_content()

    def get_value(self) -> str | None:
        return self.locator.input_value()

    def get_tag_name(self) -> str:
        return self.locator.evaluate("el => el.tagName.toLowerCase()")

    def wait_until(self, condition, timeout: int):
        """
        Waits until the element reaches the condition.

        Args:
            condition: Condition member or a predicate callable(element) -> bool.
            timeout: Maximum waiting time in milliseconds.

        Raises:
            ValueError: condition is neither a Condition member nor callable.
            ElementTimeoutError: The condition does not hold within the timeout.
        """
        if not isinstance(condition, Condition) and not callable(condition):
            raise ValueError(
                f"Element '{self.label}' on page {self.owner_name} got unsupported "
                f"wait condition {condition!r}, expected Condition or callable(element) -> bool")

        logger.debug("Waiting %s ms for %s to be %s",
                     timeout, self, get_condition_name(condition))

        if isinstance(condition, Condition) and condition not in POLLED_CONDITIONS:
            try:
                self.locator.wait_for(state=condition.value, timeout=timeout)
            except PlaywrightTimeoutError as e:
                raise ElementTimeoutError(self._timeout_message(condition, timeout)) from e
            return

        predicate = POLLED_CONDITIONS.get(condition, condition)
        deadline = time.monotonic() + timeout / 1000.0

        while not predicate(self):
            if time.monotonic() >= deadline:
                raise ElementTimeoutError(self._timeout_message(condition, timeout))
            time.sleep(POLLING_INTERVAL / 1000.0)

    def _timeout_message(self, condition, timeout: int) -> str:
        return (f"Element '{self.label}' on page {self.owner_name} "
                f"does not meet condition '{get_condition_name(condition)}' after {timeout} ms")

    def __getattr__(self, item):
        if item.startswith("_") or item in ("owner", "selector", "label", "locator"):
            raise AttributeError(item)

        target = getattr(self.locator, item)

        if callable(target):
            def wrapper(*args, **kwargs):
                highlighted, element_style = self._highlight_element_with_delay()
                try:
                    return target(*args, **kwargs)
                finally:
                    if highlighted:
                        reset_element_style(self.locator, element_style)
            return wrapper
        return target

    def _highlight_element_with_delay(self):
        config = self.owner.config
        step_delay_seconds = get_int_config_value("step_delay", config, 0) / 1000.0

        if is_config_flag_on("highlight", config):
            element_style = highlight_element(self.locator)
            time.sleep(step_delay_seconds)
            return True, element_style

        if step_delay_seconds > 0.0:
            time.sleep(step_delay_seconds)
        return False, None

    def __str__(self):
        return f"<SmartElement name='{self.label}' selector='{self.selector}'>"

    __repr__ = __str__


class SmartElementsCollection(SmartHandle):
    """
    Live collection of all controls matching one selector.
    Iterating or calling snapshot() resolves the members present right now.
    """

    def __init__(self, owner, selector: str, name: str = None,
                 hidden: bool = False, optional: bool = False):
        self._bind(owner, selector, name or selector)
        owner.declare_field(self, name=name, hidden=hidden, optional=optional)

    def count(self) -> int:
        return self.locator.count()

    def snapshot(self) -> list[SmartElement]:
        return [SmartElement.from_locator(self.owner, locator, f"{self.label}[{index}]")
                for index, locator in enumerate(self.locator.all())]

    def wait_until(self, condition, timeout: int):
        for element in self.snapshot():
            element.wait_until(condition, timeout)

    def __iter__(self):
        return iter(self.snapshot())

    def __len__(self):
        return self.count()

    def __getitem__(self, index: int) -> SmartElement:
        return SmartElement.from_locator(
            self.owner, self.locator.nth(index), f"{self.label}[{index}]")

    def __str__(self):
        return f"<{self.__class__.__name__} name='{self.label}' selector='{self.selector}'>"

    __repr__ = __str__


class SmartElementsList(SmartElementsCollection):
    """
    List field: bound to the member elements found at initialize()
    instead of the live collection.
    """
