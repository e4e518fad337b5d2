from __future__ import annotations

"""Stage applying a visitor to elements selected by qualified name."""

from typing import Callable, Collection, FrozenSet, Optional

from lxml import etree as ET

from mda_toolkit.core.dom.traversal import DOMTraversalStage, TraversalContext
from mda_toolkit.core.exceptions import ComponentInitializationError
from mda_toolkit.core.models import DOMElementItem

__all__ = ["ElementVisitor", "ElementVisitingStage"]

ElementVisitor = Callable[[ET._Element, DOMElementItem], None]


def _as_qname(name) -> ET.QName:
    return name if isinstance(name, ET.QName) else ET.QName(name)


class ElementVisitingStage(DOMTraversalStage):
    """Visit every element whose qualified name is in :attr:`element_names`.

    A single name (string or QName) is accepted in place of a collection.
    An empty name set means the visitor is never applied.  The visitor is
    called as ``visitor(element, item)``; subclasses may instead override
    :meth:`visit_element`.
    """

    def __init__(self, component_id: Optional[str] = None,
                 visitor: Optional[ElementVisitor] = None) -> None:
        super().__init__(component_id)
        self._visitor = visitor
        self._element_names: FrozenSet[ET.QName] = frozenset()

    @property
    def element_names(self) -> FrozenSet[ET.QName]:
        self._check_not_destroyed()
        return self._element_names

    @element_names.setter
    def element_names(self, names: Collection) -> None:
        self._check_modifiable()
        if names is None:
            raise ValueError("element_names may not be None")
        if isinstance(names, (str, ET.QName)):
            names = [names]
        self._element_names = frozenset(_as_qname(n) for n in names)
        self._mark_configured()

    def _set_element_name(self, name) -> None:
        if name is None:
            raise ValueError("element_name may not be None")
        self.element_names = [name]

    element_name = property(None, _set_element_name,
                            doc="Write-only shorthand for a single-name :attr:`element_names`.")

    def visit_element(self, element: ET._Element, item: DOMElementItem) -> None:
        self._visitor(element, item)

    # ------------------------------------------------------------------
    # DOMTraversalStage hooks
    # ------------------------------------------------------------------
    def applicable(self, element: ET._Element) -> bool:
        return ET.QName(element) in self._element_names

    def visit(self, element: ET._Element, context: TraversalContext) -> None:
        self.visit_element(element, context.item)

    def do_initialize(self) -> None:
        super().do_initialize()
        if self._visitor is None and type(self).visit_element is ElementVisitingStage.visit_element:
            raise ComponentInitializationError("no element visitor configured", self.id)

    def do_destroy(self) -> None:
        self._visitor = None
        self._element_names = frozenset()
        super().do_destroy()
