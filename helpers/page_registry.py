import logging
from playwright.sync_api import Page
from common.errors import ElementLookupError, PageConfigurationError
from wrappers.smart_page import SmartPage

logger = logging.getLogger(__name__)


def check_page_class(page_class):
    if not isinstance(page_class, type) or not issubclass(page_class, SmartPage):
        raise PageConfigurationError(
            f"Page class must be inherited from SmartPage, got {page_class!r}")


class PageRegistry:
    """
    Block registry: resolves a page model by registered name or by class
    and keeps one initialized instance per class for the same Playwright page.
    Passed to SmartPage.initialize() to build nested blocks.
    """

    def __init__(self, page: Page, config: dict):
        self.page = page
        self.config = config
        self._page_classes = {}
        self._instances = {}
        self._resolving = []

    def register(self, page_class, name: str = None):
        """
        Registers page class under name, @page_name value or class name.
        Returns the class, so it can be used as a decorator too.
        """
        check_page_class(page_class)
        name = name or page_class.page_name or page_class.__name__
        registered = self._page_classes.get(name)

        if registered is not None and registered is not page_class:
            raise PageConfigurationError(
                f"Page name '{name}' is already used by {registered.__name__}")

        self._page_classes[name] = page_class
        return page_class

    def get_page_names(self) -> list[str]:
        return list(self._page_classes)

    def resolve(self, name_or_type) -> SmartPage:
        """
        Returns the initialized page model for a registered name or a page class.

        Raises:
            ElementLookupError: Name is not registered.
            PageConfigurationError: Not a page class, or blocks reference each other in a cycle.
        """
        page_class = self._get_page_class(name_or_type)

        if page_class in self._instances:
            return self._instances[page_class]

        logger.debug("Creating page %s", page_class.__name__)
        instance = self._build(page_class, lambda: page_class(self.page, self.config))
        self._instances[page_class] = instance
        return instance

    def create_scoped(self, owner: SmartPage, block_type, root) -> SmartPage:
        """
        Creates a new initialized block scoped to root, e.g. one item of a blocks list
        or a block nested inside a scoped block. Scoped blocks are never cached.

        Raises:
            PageConfigurationError: Not a page class, or blocks reference each other in a cycle.
        """
        check_page_class(block_type)
        logger.debug("Creating block %s inside %s", block_type.__name__, owner)
        return self._build(block_type, lambda: owner.create_block(block_type, root))

    def _build(self, page_class, factory) -> SmartPage:
        if page_class in self._resolving:
            chain = " -> ".join(cls.__name__ for cls in self._resolving + [page_class])
            raise PageConfigurationError(f"Cyclic block reference: {chain}")

        self._resolving.append(page_class)
        try:
            return factory().initialize(self)
        finally:
            self._resolving.pop()

    def clear(self):
        """Forgets created instances, e.g. after navigation to another page."""
        self._instances.clear()

    def _get_page_class(self, name_or_type):
        if isinstance(name_or_type, str):
            if name_or_type not in self._page_classes:
                raise ElementLookupError(
                    f"Page '{name_or_type}' is not registered, known pages: {self.get_page_names()}")
            return self._page_classes[name_or_type]

        check_page_class(name_or_type)
        return name_or_type
