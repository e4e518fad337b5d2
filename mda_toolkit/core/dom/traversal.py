from __future__ import annotations

"""Depth-first, mutation-tolerant DOM traversal.

The walk is post-order: an element is offered to the visitor only after all
of its descendants.  Each element's children are snapshotted when the walk
reaches it, so a visitor may remove or reorder the element it is given (or
its siblings) without disturbing the rest of the traversal.
"""

import logging
from typing import Callable, List, MutableSequence, Optional, Tuple, Iterator

from lxml import etree as ET

from mda_toolkit.core.component import BaseStage
from mda_toolkit.core.exceptions import ComponentInitializationError
from mda_toolkit.core.models import ClassToInstanceMultiMap, DOMElementItem, ErrorStatus
from mda_toolkit.core.utils import child_elements, is_entities_descriptor, is_entity_descriptor

__all__ = [
    "TraversalContext",
    "Applicable",
    "Visit",
    "traverse",
    "traverse_item",
    "ancestor_entity",
    "add_error",
    "DOMTraversalStage",
]

logger = logging.getLogger(__name__)


class TraversalContext:
    """State for one traversal of one item.

    ``stash`` is a scratchpad distinct from the item's own metadata; visitors
    may accumulate values in it across calls within the same traversal.  The
    context is discarded when the traversal returns.
    """

    __slots__ = ("item", "stash")

    def __init__(self, item: DOMElementItem) -> None:
        self.item = item
        self.stash = ClassToInstanceMultiMap()


Applicable = Callable[[ET._Element], bool]
Visit = Callable[[ET._Element, TraversalContext], None]


def traverse(root: ET._Element, applicable: Applicable, visit: Visit,
             context: TraversalContext) -> None:
    """Walk the tree under *root* in post-order, visiting applicable elements."""
    stack: List[Tuple[ET._Element, Iterator[ET._Element]]] = [
        (root, iter(child_elements(root)))
    ]
    while stack:
        element, children = stack[-1]
        child = next(children, None)
        if child is not None:
            stack.append((child, iter(child_elements(child))))
            continue
        stack.pop()
        if applicable(element):
            visit(element, context)


def traverse_item(item: DOMElementItem, applicable: Applicable, visit: Visit) -> TraversalContext:
    """Traverse the document wrapped by *item*; return the finished context."""
    context = TraversalContext(item)
    traverse(item.unwrap(), applicable, visit, context)
    return context


def ancestor_entity(element: ET._Element) -> Optional[ET._Element]:
    """Closest ``md:EntityDescriptor`` at or above *element*, or None."""
    node: Optional[ET._Element] = element
    while node is not None:
        if is_entity_descriptor(node):
            return node
        node = node.getparent()
    return None


def add_error(item: DOMElementItem, element: ET._Element, component_id: str, message: str) -> None:
    """Record an :class:`ErrorStatus` on *item* concerning *element*.

    When the item is an aggregate, the message is prefixed with the ``ID``
    (or failing that the ``entityID``) of the entity containing *element*
    so that the error can be traced to one entity.
    """
    prefix = ""
    if is_entities_descriptor(item.unwrap()):
        entity = ancestor_entity(element)
        if entity is not None:
            ident = entity.get("ID")
            if ident is None:
                ident = entity.get("entityID")
            if ident is not None:
                prefix = ident + ": "
    item.metadata.put(ErrorStatus(component_id, prefix + message))


class DOMTraversalStage(BaseStage):
    """Stage applying a visitor to every applicable element of each item.

    The test and the action are either injected as callables or supplied by
    overriding :meth:`applicable` and :meth:`visit` in a subclass.
    """

    def __init__(self, component_id: Optional[str] = None,
                 applicable: Optional[Applicable] = None,
                 visit: Optional[Visit] = None) -> None:
        super().__init__(component_id)
        self._applicable = applicable
        self._visit = visit

    def applicable(self, element: ET._Element) -> bool:
        return self._applicable(element)

    def visit(self, element: ET._Element, context: TraversalContext) -> None:
        self._visit(element, context)

    def add_error(self, item: DOMElementItem, element: ET._Element, message: str) -> None:
        add_error(item, element, self.id, message)

    def do_initialize(self) -> None:
        super().do_initialize()
        cls = type(self)
        if self._applicable is None and cls.applicable is DOMTraversalStage.applicable:
            raise ComponentInitializationError("no applicability test configured", self.id)
        if self._visit is None and cls.visit is DOMTraversalStage.visit:
            raise ComponentInitializationError("no visitor configured", self.id)

    def do_destroy(self) -> None:
        self._applicable = None
        self._visit = None
        super().do_destroy()

    def do_execute(self, items: MutableSequence[DOMElementItem]) -> None:
        for item in items:
            traverse_item(item, self.applicable, self.visit)
