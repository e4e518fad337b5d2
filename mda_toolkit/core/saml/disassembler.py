from __future__ import annotations

"""Split aggregates into one item per entity."""

import logging
from copy import deepcopy
from typing import List, MutableSequence

from lxml import etree as ET

from mda_toolkit.core import constants as C
from mda_toolkit.core.component import BaseStage
from mda_toolkit.core.models import DOMElementItem
from mda_toolkit.core.utils import is_entities_descriptor

__all__ = ["EntitiesDescriptorDisassemblerStage"]

logger = logging.getLogger(__name__)


class EntitiesDescriptorDisassemblerStage(BaseStage):
    """Replace each ``md:EntitiesDescriptor`` item with its entities.

    Entities in nested groups are included, in document order.  Each new
    item wraps a copy of the entity as its own document; the aggregate's
    metadata is not carried over.  Other items keep their position.
    """

    def do_execute(self, items: MutableSequence[DOMElementItem]) -> None:
        result: List[DOMElementItem] = []
        for item in items:
            root = item.unwrap()
            if not is_entities_descriptor(root):
                result.append(item)
                continue
            entities = [DOMElementItem(_detach(entity))
                        for entity in root.iter(C.ENTITY_DESCRIPTOR.text)]
            logger.debug("Stage %s: disassembled %d entities", self.id, len(entities))
            result.extend(entities)
        items[:] = result


def _detach(entity: ET._Element) -> ET._Element:
    copy = deepcopy(entity)
    copy.tail = None
    return copy
