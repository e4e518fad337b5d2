from __future__ import annotations

"""Stages dealing with ``md:Extensions`` content."""

import logging
from typing import MutableSequence

from lxml import etree as ET

from mda_toolkit.core import constants as C
from mda_toolkit.core.component import BaseStage
from mda_toolkit.core.dom.traversal import DOMTraversalStage, TraversalContext
from mda_toolkit.core.models import DOMElementItem, RegistrationAuthority
from mda_toolkit.core.utils import (
    child_elements,
    is_element_named,
    is_entity_descriptor,
    registration_authority,
)

__all__ = ["RemoveEmptyExtensionsStage", "RegistrationAuthorityPopulationStage"]

logger = logging.getLogger(__name__)


class RemoveEmptyExtensionsStage(DOMTraversalStage):
    """Remove every ``md:Extensions`` element that has no element children.

    Because the traversal is post-order, an ``md:Extensions`` emptied by an
    earlier visit inside it is still seen as empty.
    """

    def applicable(self, element: ET._Element) -> bool:
        return is_element_named(element, C.EXTENSIONS) and not child_elements(element)

    def visit(self, element: ET._Element, context: TraversalContext) -> None:
        parent = element.getparent()
        if parent is not None:
            parent.remove(element)


class RegistrationAuthorityPopulationStage(BaseStage):
    """Record each entity's registration authority in the item metadata."""

    def do_execute(self, items: MutableSequence[DOMElementItem]) -> None:
        for item in items:
            entity = item.unwrap()
            if not is_entity_descriptor(entity):
                continue
            authority = registration_authority(entity)
            if authority is not None:
                item.metadata.put(RegistrationAuthority(authority))
                logger.debug("Stage %s: %s registered by %s",
                             self.id, entity.get("entityID"), authority)
