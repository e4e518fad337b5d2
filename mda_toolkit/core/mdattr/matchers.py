from __future__ import annotations

"""Rule predicates over :class:`EntityAttributeContext`.

A rule is any callable taking a context and returning a bool.  The classes
here cover the common cases; each one tests the four context components
independently and matches only when all four tests pass.
"""

import re
from typing import Callable, Optional, Pattern, Union

from mda_toolkit.core import constants as C
from mda_toolkit.core.mdattr.context import EntityAttributeContext

__all__ = [
    "StringPredicate",
    "always_true",
    "equal_to",
    "contains_pattern",
    "is_none",
    "AbstractEntityAttributeMatcher",
    "AttributeValueMatcher",
    "AttributeNameMatcher",
    "AttributeNameFormatMatcher",
    "RegistrationAuthorityMatcher",
    "EntityCategoryMatcher",
    "EntityCategorySupportMatcher",
    "AssuranceCertificationMatcher",
    "MultiPredicateMatcher",
]

StringPredicate = Callable[[Optional[str]], bool]


# ---------------------------------------------------------------------------
# String predicates
# ---------------------------------------------------------------------------

def always_true(_value: Optional[str] = None) -> bool:
    return True


def equal_to(expected: Optional[str]) -> StringPredicate:
    """Predicate true when the tested string equals *expected*."""
    def _predicate(value: Optional[str]) -> bool:
        return value == expected
    return _predicate


def contains_pattern(pattern: Union[str, Pattern[str]]) -> StringPredicate:
    """Predicate true when *pattern* is found anywhere in the tested string.

    An absent (None) string never matches.
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def _predicate(value: Optional[str]) -> bool:
        return value is not None and compiled.search(value) is not None
    return _predicate


def is_none() -> StringPredicate:
    return equal_to(None)


# ---------------------------------------------------------------------------
# Context matchers
# ---------------------------------------------------------------------------

class AbstractEntityAttributeMatcher:
    """Base matcher: true when all four component tests pass.

    Subclasses override the ``match_*`` methods they care about; the
    defaults accept anything.
    """

    def match_attribute_value(self, context: EntityAttributeContext) -> bool:
        return True

    def match_attribute_name(self, context: EntityAttributeContext) -> bool:
        return True

    def match_attribute_name_format(self, context: EntityAttributeContext) -> bool:
        return True

    def match_registration_authority(self, context: EntityAttributeContext) -> bool:
        return True

    def __call__(self, context: EntityAttributeContext) -> bool:
        return (self.match_attribute_value(context)
                and self.match_attribute_name(context)
                and self.match_attribute_name_format(context)
                and self.match_registration_authority(context))


class AttributeValueMatcher(AbstractEntityAttributeMatcher):
    def __init__(self, value: str) -> None:
        self.value = value

    def match_attribute_value(self, context: EntityAttributeContext) -> bool:
        return context.value == self.value


class AttributeNameMatcher(AbstractEntityAttributeMatcher):
    def __init__(self, name: str) -> None:
        self.name = name

    def match_attribute_name(self, context: EntityAttributeContext) -> bool:
        return context.name == self.name


class AttributeNameFormatMatcher(AbstractEntityAttributeMatcher):
    def __init__(self, name_format: str) -> None:
        self.name_format = name_format

    def match_attribute_name_format(self, context: EntityAttributeContext) -> bool:
        return context.name_format == self.name_format


class RegistrationAuthorityMatcher(AbstractEntityAttributeMatcher):
    """Matches on registration authority.

    ``RegistrationAuthorityMatcher(None)`` matches exactly the contexts that
    have no registration authority.
    """

    def __init__(self, registrar: Optional[str]) -> None:
        self.registrar = registrar

    def match_registration_authority(self, context: EntityAttributeContext) -> bool:
        return context.registration_authority == self.registrar


class _UriAttributeMatcher(AbstractEntityAttributeMatcher):
    """A URI-format attribute of a fixed name with a given value.

    When *registrar* is given the entity must also have been registered by it.
    """

    attribute_name: str = ""

    def __init__(self, value: str, registrar: Optional[str] = None) -> None:
        self.value = value
        self.registrar = registrar

    def match_attribute_value(self, context: EntityAttributeContext) -> bool:
        return context.value == self.value

    def match_attribute_name(self, context: EntityAttributeContext) -> bool:
        return context.name == self.attribute_name

    def match_attribute_name_format(self, context: EntityAttributeContext) -> bool:
        return context.name_format == C.NAME_FORMAT_URI

    def match_registration_authority(self, context: EntityAttributeContext) -> bool:
        return self.registrar is None or context.registration_authority == self.registrar

    def __repr__(self) -> str:
        if self.registrar is None:
            return f"{type(self).__name__}({self.value!r})"
        return f"{type(self).__name__}({self.value!r}, {self.registrar!r})"


class EntityCategoryMatcher(_UriAttributeMatcher):
    attribute_name = C.ENTITY_CATEGORY


class EntityCategorySupportMatcher(_UriAttributeMatcher):
    attribute_name = C.ENTITY_CATEGORY_SUPPORT


class AssuranceCertificationMatcher(_UriAttributeMatcher):
    attribute_name = C.ASSURANCE_CERTIFICATION


class MultiPredicateMatcher(AbstractEntityAttributeMatcher):
    """Matcher built from one string predicate per context component.

    Every predicate defaults to :func:`always_true`.  The registration
    authority predicate receives None when the entity has no registration
    authority.
    """

    def __init__(self, value_predicate: StringPredicate = always_true,
                 name_predicate: StringPredicate = always_true,
                 name_format_predicate: StringPredicate = always_true,
                 registration_authority_predicate: StringPredicate = always_true) -> None:
        self.value_predicate = value_predicate
        self.name_predicate = name_predicate
        self.name_format_predicate = name_format_predicate
        self.registration_authority_predicate = registration_authority_predicate

    def __setattr__(self, key, value) -> None:
        if key.endswith("_predicate") and value is None:
            raise ValueError(f"{key.replace('_', ' ')} may not be None")
        super().__setattr__(key, value)

    def match_attribute_value(self, context: EntityAttributeContext) -> bool:
        return self.value_predicate(context.value)

    def match_attribute_name(self, context: EntityAttributeContext) -> bool:
        return self.name_predicate(context.name)

    def match_attribute_name_format(self, context: EntityAttributeContext) -> bool:
        return self.name_format_predicate(context.name_format)

    def match_registration_authority(self, context: EntityAttributeContext) -> bool:
        return self.registration_authority_predicate(context.registration_authority)
