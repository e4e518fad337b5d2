"""Entity attribute contexts, matchers and the entity attribute filter."""

from .context import EntityAttributeContext
from .filtering import EntityAttributeFilteringStage
from .matchers import (
    AbstractEntityAttributeMatcher,
    AssuranceCertificationMatcher,
    AttributeNameFormatMatcher,
    AttributeNameMatcher,
    AttributeValueMatcher,
    EntityCategoryMatcher,
    EntityCategorySupportMatcher,
    MultiPredicateMatcher,
    RegistrationAuthorityMatcher,
    always_true,
    contains_pattern,
    equal_to,
    is_none,
)
from .rules import build_rule, build_rules

__all__ = [
    "AbstractEntityAttributeMatcher",
    "AssuranceCertificationMatcher",
    "AttributeNameFormatMatcher",
    "AttributeNameMatcher",
    "AttributeValueMatcher",
    "EntityAttributeContext",
    "EntityAttributeFilteringStage",
    "EntityCategoryMatcher",
    "EntityCategorySupportMatcher",
    "MultiPredicateMatcher",
    "RegistrationAuthorityMatcher",
    "always_true",
    "build_rule",
    "build_rules",
    "contains_pattern",
    "equal_to",
    "is_none",
]
