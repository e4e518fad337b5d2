from __future__ import annotations

"""DOM helper functions shared by the stages and serializers.

These helpers are side-effect-free apart from :func:`parse_item` and
:func:`item_from_string`, which only read their input.
"""

from typing import IO, List, Optional, Union
import logging
import os

from lxml import etree as ET

from mda_toolkit.core import constants as C
from mda_toolkit.core.models import DOMElementItem

__all__ = [
    "qname_of",
    "is_element_named",
    "child_elements",
    "first_child_element",
    "text_content",
    "xml_lang",
    "is_entity_descriptor",
    "is_entities_descriptor",
    "descriptor_extension",
    "registration_authority",
    "parse_item",
    "item_from_string",
]

logger = logging.getLogger(__name__)


def qname_of(element: ET._Element) -> ET.QName:
    """Return the namespace-qualified name of *element* (prefix ignored)."""
    return ET.QName(element)


def is_element_named(element: ET._Element, qname: ET.QName) -> bool:
    return isinstance(element.tag, str) and element.tag == qname.text


def child_elements(element: ET._Element, qname: Optional[ET.QName] = None) -> List[ET._Element]:
    """Return a snapshot list of the element children of *element*.

    Comments, processing instructions and text are skipped.  When *qname* is
    given only children with that name are returned.
    """
    if qname is None:
        return [child for child in element if isinstance(child.tag, str)]
    return list(element.iterchildren(qname.text))


def first_child_element(element: ET._Element, qname: ET.QName) -> Optional[ET._Element]:
    for child in element.iterchildren(qname.text):
        return child
    return None


def text_content(element: ET._Element) -> str:
    """Concatenated text of *element* and all descendants, excluding comments."""
    return ET.tostring(element, method="text", encoding="unicode", with_tail=False)


def xml_lang(element: ET._Element) -> Optional[str]:
    """Value of the ``xml:lang`` attribute, or None when absent."""
    return element.get(C.XML_LANG)


def is_entity_descriptor(element: ET._Element) -> bool:
    return is_element_named(element, C.ENTITY_DESCRIPTOR)


def is_entities_descriptor(element: ET._Element) -> bool:
    return is_element_named(element, C.ENTITIES_DESCRIPTOR)


def descriptor_extension(descriptor: ET._Element, qname: ET.QName) -> Optional[ET._Element]:
    """Find the first *qname* child of the descriptor's ``md:Extensions``.

    Works for entity and role descriptors alike.
    """
    extensions = first_child_element(descriptor, C.EXTENSIONS)
    if extensions is None:
        return None
    return first_child_element(extensions, qname)


def registration_authority(entity: ET._Element) -> Optional[str]:
    """Registration authority of *entity*, or None if it has no RegistrationInfo."""
    info = descriptor_extension(entity, C.REGISTRATION_INFO)
    if info is None:
        return None
    return info.get("registrationAuthority")


# ---------------------------------------------------------------------------
# Item construction
# ---------------------------------------------------------------------------

def _parser() -> ET.XMLParser:
    # Metadata is untrusted input: no entity expansion, no network access.
    return ET.XMLParser(resolve_entities=False, no_network=True, remove_comments=False)


def parse_item(source: Union[str, os.PathLike, IO[bytes]]) -> DOMElementItem:
    """Parse an XML document from a path or binary file object into an item."""
    if isinstance(source, os.PathLike):
        source = os.fspath(source)
    tree = ET.parse(source, _parser())
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Parsed item root=%s", tree.getroot().tag)
    return DOMElementItem(tree.getroot())


def item_from_string(text: Union[str, bytes]) -> DOMElementItem:
    """Parse an XML document held in memory into an item."""
    if isinstance(text, str):
        text = text.encode("utf-8")
    return DOMElementItem(ET.fromstring(text, _parser()))
