"""Generic DOM traversal, element visiting and element matchers."""

from .matchers import AttributeValueMatcher, ElementMatcher
from .namespace import NamespaceStrippingStage
from .traversal import (
    DOMTraversalStage,
    TraversalContext,
    add_error,
    ancestor_entity,
    traverse,
    traverse_item,
)
from .visiting import ElementVisitingStage

__all__ = [
    "AttributeValueMatcher",
    "DOMTraversalStage",
    "ElementMatcher",
    "ElementVisitingStage",
    "NamespaceStrippingStage",
    "TraversalContext",
    "add_error",
    "ancestor_entity",
    "traverse",
    "traverse_item",
]
