from __future__ import annotations

"""Removal of all content belonging to one XML namespace."""

from typing import Optional

from lxml import etree as ET

from mda_toolkit.core.component import require
from mda_toolkit.core.dom.traversal import DOMTraversalStage, TraversalContext

__all__ = ["NamespaceStrippingStage"]


class NamespaceStrippingStage(DOMTraversalStage):
    """Remove elements and attributes in :attr:`namespace` from each item.

    A root element in the namespace is kept (an item always has a root) but
    its attributes in the namespace are still removed.  Unused namespace
    declarations are dropped afterwards.
    """

    def __init__(self, component_id: Optional[str] = None) -> None:
        super().__init__(component_id)
        self._namespace: Optional[str] = None

    @property
    def namespace(self) -> Optional[str]:
        return self._namespace

    @namespace.setter
    def namespace(self, namespace: str) -> None:
        self._check_modifiable()
        self._namespace = namespace
        self._mark_configured()

    def do_initialize(self) -> None:
        super().do_initialize()
        require(self._namespace, "namespace may not be null", self.id)

    def applicable(self, element: ET._Element) -> bool:
        return True

    def visit(self, element: ET._Element, context: TraversalContext) -> None:
        parent = element.getparent()
        if parent is not None and ET.QName(element).namespace == self._namespace:
            parent.remove(element)
            return
        prefix = "{%s}" % self._namespace
        for name in [a for a in element.attrib if a.startswith(prefix)]:
            del element.attrib[name]
        if element is context.item.unwrap():
            ET.cleanup_namespaces(element)
