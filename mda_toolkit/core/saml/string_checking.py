from __future__ import annotations

"""Checks on SAML string-typed elements (names, display names, URLs)."""

from lxml import etree as ET

from mda_toolkit.core.dom.visiting import ElementVisitingStage
from mda_toolkit.core.models import DOMElementItem
from mda_toolkit.core.utils import text_content

__all__ = ["SAMLStringElementCheckingStage"]


class SAMLStringElementCheckingStage(ElementVisitingStage):
    """Flag string elements that are empty or carry surrounding whitespace.

    Configure the elements to check with :attr:`element_names`.  Each
    problem is recorded as an :class:`~mda_toolkit.core.models.ErrorStatus`
    on the item; processing always continues.
    """

    def visit_element(self, element: ET._Element, item: DOMElementItem) -> None:
        text = text_content(element)
        name = ET.QName(element).localname
        if not text.strip():
            self.add_error(item, element, f"{name} element must not be empty")
        elif text != text.strip():
            self.add_error(item, element, f"{name} element has leading or trailing whitespace")
