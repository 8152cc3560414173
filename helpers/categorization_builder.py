import logging
from dataclasses import dataclass, field
from helpers.field_scanner import FieldDescriptor, FieldKind, Visibility

logger = logging.getLogger(__name__)


@dataclass
class PageElements:
    """
    Page fields categorized once at initialize():
    - named_elements: field name -> element, elements, collection, block or blocks.
    - primary_elements: elements of fields neither Hidden nor Optional, lists flattened.
    - hidden_elements: elements of Hidden fields, lists flattened.
    - primary_elements_collections: collections neither Hidden nor Optional, not flattened.
    - primary_blocks: nested pages of block fields neither Hidden nor Optional.
    """
    named_elements: dict = field(default_factory=dict)
    primary_elements: list = field(default_factory=list)
    hidden_elements: list = field(default_factory=list)
    primary_elements_collections: list = field(default_factory=list)
    primary_blocks: list = field(default_factory=list)


def build_page_elements(page, descriptors: list[FieldDescriptor], registry) -> PageElements:
    elements = PageElements()

    for descriptor in descriptors:
        value = resolve_field_value(page, descriptor, registry)

        if descriptor.name is not None:
            elements.named_elements[descriptor.name] = value

        if descriptor.visibility is Visibility.PRIMARY:
            if descriptor.is_element_kind:
                elements.primary_elements.extend(flatten_elements(descriptor, value))
            else:
                elements.primary_blocks.extend(value if descriptor.kind is FieldKind.BLOCKS_LIST
                                               else [value])

            if descriptor.kind is FieldKind.ELEMENTS_COLLECTION:
                elements.primary_elements_collections.append(value)

        elif descriptor.visibility is Visibility.HIDDEN and descriptor.is_element_kind:
            elements.hidden_elements.extend(flatten_elements(descriptor, value))

    logger.debug("Page %s categorized: %d named, %d primary, %d hidden elements, %d blocks",
                 page.__class__.__name__, len(elements.named_elements),
                 len(elements.primary_elements), len(elements.hidden_elements),
                 len(elements.primary_blocks))
    return elements


def resolve_field_value(page, descriptor: FieldDescriptor, registry):
    target = descriptor.target

    if descriptor.kind is FieldKind.ELEMENT:
        return target

    if descriptor.kind is FieldKind.ELEMENTS_LIST:
        if isinstance(target, (list, tuple)):
            return list(target)
        return target.snapshot()

    if descriptor.kind is FieldKind.ELEMENTS_COLLECTION:
        return target

    if descriptor.kind is FieldKind.BLOCK:
        # Blocks of a scoped page stay inside its root
        if page.root is not None:
            block = registry.create_scoped(page, target.block_type, page.root)
        else:
            block = registry.resolve(target.block_type)
        target.bind(block)
        return block

    blocks = [registry.create_scoped(page, target.block_type, container.locator)
              for container in target.containers.snapshot()]
    target.bind(blocks)
    return blocks


def flatten_elements(descriptor: FieldDescriptor, value) -> list:
    if descriptor.kind is FieldKind.ELEMENTS_COLLECTION:
        return value.snapshot()
    if descriptor.kind is FieldKind.ELEMENTS_LIST:
        return list(value)
    return [value]
