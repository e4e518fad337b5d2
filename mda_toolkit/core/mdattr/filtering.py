from __future__ import annotations

"""Filter the entity attributes of entity descriptors against a rule list.

Only ``saml:AttributeValue`` elements inside
``md:Extensions/mdattr:EntityAttributes/saml:Attribute`` are considered.
Attributes left without values are removed, and so is an
``mdattr:EntityAttributes`` left without attributes.  An emptied
``md:Extensions`` is left in place for :class:`RemoveEmptyExtensionsStage`.
"""

import logging
from typing import Any, Dict, List, MutableSequence, Optional, Sequence

from lxml import etree as ET

from mda_toolkit.core import constants as C
from mda_toolkit.core.component import BaseStage
from mda_toolkit.core.mdattr.context import EntityAttributeContext, Rule
from mda_toolkit.core.mdattr.rules import build_rules
from mda_toolkit.core.models import DOMElementItem
from mda_toolkit.core.utils import (
    child_elements,
    descriptor_extension,
    is_entity_descriptor,
    registration_authority,
    text_content,
)

__all__ = ["EntityAttributeFilteringStage"]

logger = logging.getLogger(__name__)


class EntityAttributeFilteringStage(BaseStage):
    """Keep or drop entity attribute values according to :attr:`rules`.

    With ``whitelisting`` (the default) a value is kept when at least one
    rule matches its context; otherwise it is kept only when no rule
    matches.  With no rules, whitelisting drops every value.  Items that are
    not ``md:EntityDescriptor`` documents are left untouched.
    """

    def __init__(self, component_id: Optional[str] = None) -> None:
        super().__init__(component_id)
        self._rules: List[Rule] = []
        self._whitelisting = True

    @classmethod
    def from_config(cls, section: Dict[str, Any],
                    component_id: Optional[str] = None) -> "EntityAttributeFilteringStage":
        """Build an uninitialized stage from a configuration section.

        See :func:`mda_toolkit.core.mdattr.rules.build_rules` for the rule format.
        """
        stage = cls(component_id)
        stage.whitelisting = bool(section.get("whitelisting", True))
        stage.rules = build_rules(section.get("rules") or [], component_id)
        return stage

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    @property
    def rules(self) -> List[Rule]:
        self._check_not_destroyed()
        return list(self._rules)

    @rules.setter
    def rules(self, rules: Sequence[Rule]) -> None:
        self._check_modifiable()
        if rules is None:
            raise ValueError("rules may not be None")
        self._rules = [rule for rule in rules if rule is not None]
        self._mark_configured()

    @property
    def whitelisting(self) -> bool:
        return self._whitelisting

    @whitelisting.setter
    def whitelisting(self, whitelisting: bool) -> None:
        self._check_modifiable()
        self._whitelisting = whitelisting
        self._mark_configured()

    # ------------------------------------------------------------------
    # Processing
    # ------------------------------------------------------------------
    def keep(self, context: EntityAttributeContext) -> bool:
        """Decide whether the value described by *context* survives."""
        matched = any(rule(context) for rule in self._rules)
        return matched if self._whitelisting else not matched

    def filter_entity(self, entity: ET._Element) -> int:
        """Filter one entity descriptor in place; return the number of values removed."""
        entity_attributes = descriptor_extension(entity, C.ENTITY_ATTRIBUTES)
        if entity_attributes is None:
            return 0

        authority = registration_authority(entity)
        removed = 0
        for attribute in child_elements(entity_attributes, C.ATTRIBUTE):
            name = attribute.get("Name", "")
            name_format = attribute.get("NameFormat", "")
            for value in child_elements(attribute, C.ATTRIBUTE_VALUE):
                context = EntityAttributeContext(text_content(value), name, name_format, authority)
                if not self.keep(context):
                    attribute.remove(value)
                    removed += 1
            if not child_elements(attribute, C.ATTRIBUTE_VALUE):
                entity_attributes.remove(attribute)

        if not child_elements(entity_attributes, C.ATTRIBUTE):
            entity_attributes.getparent().remove(entity_attributes)
        return removed

    def do_execute(self, items: MutableSequence[DOMElementItem]) -> None:
        for item in items:
            entity = item.unwrap()
            if not is_entity_descriptor(entity):
                continue
            removed = self.filter_entity(entity)
            if removed and logger.isEnabledFor(logging.DEBUG):
                logger.debug("Stage %s: removed %d value(s) from %s",
                             self.id, removed, entity.get("entityID"))

    def do_destroy(self) -> None:
        self._rules = []
        super().do_destroy()
