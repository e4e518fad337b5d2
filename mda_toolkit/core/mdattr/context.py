"""The unit of matching for entity attribute rules."""

from dataclasses import dataclass
from typing import Callable, Optional

__all__ = ["EntityAttributeContext", "Rule"]


@dataclass(frozen=True)
class EntityAttributeContext:
    """One entity attribute value together with where it came from.

    Attributes
    ----------
    value
        Text content of the ``saml:AttributeValue``.
    name
        ``Name`` of the enclosing ``saml:Attribute`` (empty if missing).
    name_format
        ``NameFormat`` of the enclosing ``saml:Attribute`` exactly as written
        (empty if missing; no default is substituted).
    registration_authority
        The entity's registration authority, or None if it has none.
    """

    value: str
    name: str
    name_format: str
    registration_authority: Optional[str] = None


Rule = Callable[[EntityAttributeContext], bool]
