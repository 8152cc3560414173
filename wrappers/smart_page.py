import logging
from playwright.sync_api import Locator, Page
from common.errors import ElementLookupError, PageConfigurationError, PageNotInitializedError
from helpers.categorization_builder import PageElements, build_page_elements
from helpers.field_scanner import FieldDeclaration, FieldDescriptor, FieldKind, scan_fields
from helpers.page_verifier import check_appeared, check_disappeared
from helpers.page_verifier import wait_elements_until as wait_handles_until
from utils.config_utils import get_waiting_appear_timeout
from utils.web_utils import get_any_element_inner_text
from utils.web_utils import get_any_element_text as get_handle_text
from wrappers.smart_element import Condition, SmartElement, SmartElementsCollection

logger = logging.getLogger(__name__)


def copy_value(value):
    # Cached lists are handed out as copies
    return list(value) if isinstance(value, list) else value


class SmartPage:
    """
    SmartPage is the base class of page models and blocks that provides:
    - Field declaration: SmartElement, SmartElementsList, SmartElementsCollection,
      SmartBlock and SmartBlocksList created in __init__ register themselves here.
    - initialize(): one-time validation and categorization of declared fields.
    - Lookup of elements, lists and nested blocks by field name.
    - appeared() / disappeared() checks over the whole page tree.
    - Transparent proxying of Playwright page methods (e.g. .goto(), .reload()).

    Example:
        class LoginPage(SmartPage):
            def __init__(self, page, config, root=None):
                super().__init__(page, config, root)
                self.login_button = SmartElement(self, "#login", name="Login")
                self.error = SmartElement(self, ".error", name="Error", hidden=True)

        LoginPage(page, config).initialize().appeared().get_element("Login").click()
    """

    # Name used by the page registry, set with @page_name decorator
    page_name = None

    def __init__(self, page: Page, config: dict, root: Locator = None):
        self.page = page
        self.config = config
        self.root = root
        self._field_declarations = []
        self._named_fields = {}
        self._elements = None

    def __getattr__(self, item):
        if item.startswith("_") or item in ("page", "config", "root"):
            raise AttributeError(item)
        return getattr(self.page, item)

    # -----------------------------------------------------------------
    # Field declaration
    # -----------------------------------------------------------------

    def declare_field(self, target, name: str = None, hidden: bool = False, optional: bool = False):
        if self._elements is not None:
            raise PageConfigurationError(
                f"Field '{name or target}' is declared on page {self.__class__.__name__} "
                f"after initialize()")

        self._field_declarations.append(FieldDeclaration(target, name, hidden, optional))
        return target

    def get_field_declarations(self) -> list[FieldDeclaration]:
        return list(self._field_declarations)

    def locate(self, selector: str) -> Locator:
        """Resolves selector inside the block root, or on the whole page."""
        if self.root is not None:
            return self.root.locator(selector)
        return self.page.locator(selector)

    def create_block(self, block_type, root: Locator = None):
        return block_type(self.page, self.config, root=root)

    @property
    def timeout(self) -> int:
        return get_waiting_appear_timeout(self.config)

    @property
    def is_initialized(self) -> bool:
        return self._elements is not None

    def initialize(self, registry=None):
        """
        Validates declared fields, resolves blocks and caches categorized elements.
        Repeated calls keep the first result.

        Args:
            registry: Block registry resolving nested blocks by type.
                A new PageRegistry for the same page and config is used when omitted.

        Raises:
            PageConfigurationError: Fields are declared incorrectly.
        """
        if self._elements is not None:
            return self

        if registry is None:
            from helpers.page_registry import PageRegistry
            registry = PageRegistry(self.page, self.config)

        descriptors = scan_fields(self)
        self._named_fields = {descriptor.name: descriptor
                              for descriptor in descriptors if descriptor.name is not None}
        self._elements = build_page_elements(self, descriptors, registry)

        logger.debug("Page %s initialized with %d fields", self.__class__.__name__, len(descriptors))
        return self

    @property
    def _page_elements(self) -> PageElements:
        if self._elements is None:
            raise PageNotInitializedError(
                f"Page {self.__class__.__name__} is not initialized, call initialize() first")
        return self._elements

    # -----------------------------------------------------------------
    # Categorized elements
    # -----------------------------------------------------------------

    def get_named_elements(self) -> dict:
        return {name: copy_value(value)
                for name, value in self._page_elements.named_elements.items()}

    def get_primary_elements(self) -> list[SmartElement]:
        """Elements of fields not marked as hidden or optional."""
        return list(self._page_elements.primary_elements)

    def get_hidden_elements(self) -> list[SmartElement]:
        return list(self._page_elements.hidden_elements)

    def get_primary_elements_collections(self) -> list[SmartElementsCollection]:
        return list(self._page_elements.primary_elements_collections)

    def get_primary_blocks(self) -> list:
        return list(self._page_elements.primary_blocks)

    # -----------------------------------------------------------------
    # Lookup by name
    # -----------------------------------------------------------------

    def _get_named_field(self, name: str, kinds: tuple, shape: str) -> tuple[FieldDescriptor, object]:
        named_elements = self._page_elements.named_elements

        if name not in named_elements:
            raise ElementLookupError(
                f"{shape.capitalize()} '{name}' is not declared on page {self.__class__.__name__}")

        descriptor = self._named_fields[name]
        if descriptor.kind not in kinds:
            raise ElementLookupError(
                f"Field '{name}' on page {self.__class__.__name__} is {descriptor.kind.value}, "
                f"not {shape}")

        return descriptor, copy_value(named_elements[name])

    def get_element(self, name: str) -> SmartElement:
        return self._get_named_field(name, (FieldKind.ELEMENT,), "element")[1]

    def get_block(self, name: str) -> "SmartPage":
        return self._get_named_field(name, (FieldKind.BLOCK,), "block")[1]

    def get_blocks_list(self, name: str) -> list["SmartPage"]:
        return list(self._get_named_field(name, (FieldKind.BLOCKS_LIST,), "blocks list")[1])

    def get_elements_list(self, name: str):
        """
        Returns the live collection of a list field, located again by its selector
        so the current order and number of elements are kept.
        List fields declared as a plain list of elements return a copy of that list.
        """
        descriptor, value = self._get_named_field(
            name, (FieldKind.ELEMENTS_LIST, FieldKind.ELEMENTS_COLLECTION), "elements list")

        if descriptor.selector is None:
            return list(value)
        return SmartElementsCollection.from_selector(self, descriptor.selector, name)

    def get_block_element(self, block_name: str, element_name: str) -> SmartElement:
        return self.get_block(block_name).get_element(element_name)

    def get_block_elements(self, block_name: str) -> list[SmartElement]:
        """Single elements of the block's named fields, in declaration order."""
        return [value for value in self.get_block(block_name).get_named_elements().values()
                if isinstance(value, SmartElement)]

    # -----------------------------------------------------------------
    # Texts
    # -----------------------------------------------------------------

    def get_any_element_text(self, element) -> str | None:
        """
        Value of an editable field (input, textarea) or text of a static element.

        Args:
            element: Field name or SmartElement.
        """
        if isinstance(element, str):
            element = self.get_element(element)
        return get_handle_text(element)

    def get_any_elements_list_texts(self, name: str) -> list:
        return [get_handle_text(element) for element in self.get_elements_list(name)]

    def get_any_elements_list_inner_texts(self, name: str) -> list[str]:
        """
        Same as get_any_elements_list_texts() but reads visible and hidden text,
        trimming line breaks and spaces at both ends.
        """
        return [get_any_element_inner_text(element) for element in self.get_elements_list(name)]

    @staticmethod
    def get_button_from_list_by_name(buttons, name: str) -> SmartElement:
        """
        Returns the first element whose text equals name.

        Raises:
            ElementLookupError: No element has this text.
        """
        texts = []
        for button in buttons:
            text = button.get_text()
            if text == name:
                return button
            texts.append(text)

        raise ElementLookupError(f"Button '{name}' is not found among {texts}")

    # -----------------------------------------------------------------
    # Appear / disappear checks
    # -----------------------------------------------------------------

    def appeared(self):
        """
        Wrapper over is_appeared() for call chaining.
        Example: LoginPage(page, config).initialize().appeared().get_element("Login")
        """
        self.is_appeared()
        return self

    def disappeared(self):
        self.is_disappeared()
        return self

    def ie_appeared(self):
        """Wrapper over is_appeared_in_ie(), for browsers keeping hidden elements attached."""
        self.is_appeared_in_ie()
        return self

    def ie_disappeared(self):
        self.is_disappeared_in_ie()
        return self

    def is_appeared(self):
        """
        Checks that fields not marked as optional are shown, fields marked as hidden
        are not, then runs the same check on every nested primary block.
        """
        check_appeared(self, self.timeout, Condition.HIDDEN,
                       lambda block: block.is_appeared())

    def is_disappeared(self):
        """Checks that elements of fields not marked as optional or hidden are gone."""
        check_disappeared(self, self.timeout, Condition.NOT_EXIST)

    def is_appeared_in_ie(self):
        check_appeared(self, self.timeout, Condition.NOT_VISIBLE,
                       lambda block: block.is_appeared_in_ie())

    def is_disappeared_in_ie(self):
        check_disappeared(self, self.timeout, Condition.NOT_VISIBLE)

    def wait_elements_until(self, condition, timeout: int, *elements):
        """
        Waits until every element reaches the condition within timeout (milliseconds).

        Args:
            elements: SmartElement, SmartElementsCollection, list of SmartElement
                or name of an element or list field of this page.
                All names are resolved before waiting starts.

        Raises:
            ElementLookupError: Name is not declared or is not an element field.
            ElementTimeoutError: Element did not reach the condition in time.
        """
        handles = [self._get_named_field(
                       item, (FieldKind.ELEMENT, FieldKind.ELEMENTS_LIST,
                              FieldKind.ELEMENTS_COLLECTION), "element")[1]
                   if isinstance(item, str) else item
                   for item in elements]
        wait_handles_until(condition, timeout, *handles)

    def __str__(self):
        return f"<SmartPage {self.__class__.__name__}>"

    __repr__ = __str__
