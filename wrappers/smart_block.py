from common.errors import PageNotInitializedError
from wrappers.smart_element import SmartElementsCollection


def get_type_name(block_type) -> str:
    return getattr(block_type, "__name__", repr(block_type))


class SmartBlock:
    """
    Page field holding a nested page model (block).
    The block instance is resolved through the block registry by type
    when the owner page is initialized; after that the field proxies
    attribute access to it (e.g. page.header.get_element("Logo")).
    """

    def __init__(self, owner, block_type, name: str = None,
                 hidden: bool = False, optional: bool = False):
        self.owner = owner
        self.block_type = block_type
        self.label = name or get_type_name(block_type)
        self._instance = None
        owner.declare_field(self, name=name, hidden=hidden, optional=optional)

    def bind(self, instance):
        self._instance = instance

    @property
    def instance(self):
        if self._instance is None:
            raise PageNotInitializedError(
                f"Block '{self.label}' on page {self.owner.__class__.__name__} "
                f"is not resolved, call initialize() first")
        return self._instance

    def __getattr__(self, item):
        if item.startswith("_") or item in ("owner", "block_type", "label", "instance"):
            raise AttributeError(item)
        return getattr(self.instance, item)

    def __str__(self):
        return f"<SmartBlock name='{self.label}' type='{get_type_name(self.block_type)}'>"

    __repr__ = __str__


class SmartBlocksList:
    """
    Page field holding one nested page model per container matched by selector.
    Each block instance is scoped to its container element.
    """

    def __init__(self, owner, block_type, selector: str, name: str = None,
                 hidden: bool = False, optional: bool = False):
        self.owner = owner
        self.block_type = block_type
        self.selector = selector
        self.label = name or selector
        self.containers = SmartElementsCollection.from_selector(owner, selector, self.label)
        self._instances = None
        owner.declare_field(self, name=name, hidden=hidden, optional=optional)

    def bind(self, instances: list):
        self._instances = list(instances)

    @property
    def instances(self) -> list:
        if self._instances is None:
            raise PageNotInitializedError(
                f"Blocks list '{self.label}' on page {self.owner.__class__.__name__} "
                f"is not resolved, call initialize() first")
        return list(self._instances)

    def __iter__(self):
        return iter(self.instances)

    def __len__(self):
        return len(self.instances)

    def __getitem__(self, index: int):
        return self.instances[index]

    def __str__(self):
        return (f"<SmartBlocksList name='{self.label}' "
                f"type='{get_type_name(self.block_type)}' selector='{self.selector}'>")

    __repr__ = __str__
