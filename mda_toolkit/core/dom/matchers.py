"""Predicates over DOM elements."""

from lxml import etree as ET

from mda_toolkit.core import constants as C
from mda_toolkit.core.utils import is_element_named, text_content

__all__ = ["ElementMatcher", "AttributeValueMatcher"]


class ElementMatcher:
    """Matches elements with a given qualified name."""

    def __init__(self, qname) -> None:
        if qname is None:
            raise ValueError("qname may not be None")
        self.qname = qname if isinstance(qname, ET.QName) else ET.QName(qname)

    def __call__(self, element: ET._Element) -> bool:
        return is_element_named(element, self.qname)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.qname.text!r})"


class AttributeValueMatcher(ElementMatcher):
    """Matches ``saml:AttributeValue`` elements whose text is exactly *value*.

    No whitespace normalisation is applied to the element's text.
    """

    def __init__(self, value: str) -> None:
        super().__init__(C.ATTRIBUTE_VALUE)
        if value is None:
            raise ValueError("value may not be None")
        self.value = value

    def __call__(self, element: ET._Element) -> bool:
        return super().__call__(element) and text_content(element) == self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"
