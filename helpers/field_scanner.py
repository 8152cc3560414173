from dataclasses import dataclass
from enum import Enum
from common.errors import PageConfigurationError
from utils.text_utils import find_duplicates, join_names
from wrappers.smart_block import SmartBlock, SmartBlocksList, get_type_name
from wrappers.smart_element import SmartElement, SmartElementsCollection, SmartElementsList

SUPPORTED_FIELD_TYPES = ("SmartElement, SmartElementsList, SmartElementsCollection, "
                         "list of SmartElement, SmartBlock or SmartBlocksList")


class FieldKind(Enum):
    ELEMENT = "element"
    ELEMENTS_LIST = "elements list"
    ELEMENTS_COLLECTION = "elements collection"
    BLOCK = "block"
    BLOCKS_LIST = "blocks list"


class Visibility(Enum):
    PRIMARY = "primary"
    HIDDEN = "hidden"
    OPTIONAL = "optional"


@dataclass(frozen=True)
class FieldDeclaration:
    """Raw field registration made by a page model constructor."""
    target: object
    name: str | None = None
    hidden: bool = False
    optional: bool = False


@dataclass(frozen=True)
class FieldDescriptor:
    target: object
    name: str | None
    kind: FieldKind
    visibility: Visibility

    @property
    def selector(self) -> str | None:
        return getattr(self.target, "selector", None)

    @property
    def block_type(self):
        return getattr(self.target, "block_type", None)

    @property
    def is_element_kind(self) -> bool:
        return self.kind in (FieldKind.ELEMENT, FieldKind.ELEMENTS_LIST,
                             FieldKind.ELEMENTS_COLLECTION)


def get_visibility(hidden: bool, optional: bool) -> Visibility:
    # Hidden wins when a field carries both tags
    if hidden:
        return Visibility.HIDDEN
    if optional:
        return Visibility.OPTIONAL
    return Visibility.PRIMARY


def get_field_kind(target) -> FieldKind | None:
    if isinstance(target, SmartElement):
        return FieldKind.ELEMENT
    if isinstance(target, SmartElementsList):
        return FieldKind.ELEMENTS_LIST
    if isinstance(target, SmartElementsCollection):
        return FieldKind.ELEMENTS_COLLECTION
    if isinstance(target, (list, tuple)) and all(isinstance(item, SmartElement) for item in target):
        return FieldKind.ELEMENTS_LIST
    if isinstance(target, SmartBlocksList):
        return FieldKind.BLOCKS_LIST
    if isinstance(target, SmartBlock):
        return FieldKind.BLOCK
    return None


def scan_fields(page) -> list[FieldDescriptor]:
    """
    Builds descriptors for all fields declared by the page model, in declaration order.

    Raises:
        PageConfigurationError: Duplicate field names or unsupported field type.
    """
    declarations = page.get_field_declarations()
    check_field_names(page, declarations)
    return [describe_field(page, declaration) for declaration in declarations]


def check_field_names(page, declarations: list[FieldDeclaration]):
    page_name = page.__class__.__name__
    names = [declaration.name for declaration in declarations if declaration.name is not None]

    for name in names:
        if not isinstance(name, str) or not name.strip():
            raise PageConfigurationError(
                f"Field name on page {page_name} must be a non-empty string, got {name!r}")

    duplicates = find_duplicates(names)
    if duplicates:
        raise PageConfigurationError(
            f"Several fields share the same name {join_names(duplicates)} in class {page_name}")


def describe_field(page, declaration: FieldDeclaration) -> FieldDescriptor:
    target = declaration.target
    label = declaration.name or repr(target)
    kind = get_field_kind(target)

    if kind is None:
        raise PageConfigurationError(
            f"Field '{label}' on page {page.__class__.__name__} must be {SUPPORTED_FIELD_TYPES}.\n"
            f"Found field with type {type(target).__name__}")

    if kind in (FieldKind.BLOCK, FieldKind.BLOCKS_LIST):
        check_block_type(page, label, target.block_type)

    return FieldDescriptor(target=target,
                           name=declaration.name,
                           kind=kind,
                           visibility=get_visibility(declaration.hidden, declaration.optional))


def check_block_type(page, label: str, block_type):
    from wrappers.smart_page import SmartPage

    if not isinstance(block_type, type) or not issubclass(block_type, SmartPage):
        raise PageConfigurationError(
            f"Block field '{label}' on page {page.__class__.__name__} must hold a class "
            f"inherited from SmartPage.\nFound block type {get_type_name(block_type)}")
