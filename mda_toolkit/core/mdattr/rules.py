from __future__ import annotations

"""Build entity attribute rules from declarative mappings.

Used to drive :class:`EntityAttributeFilteringStage` from YAML, e.g.::

    rules:
      - type: entity_category
        category: http://refeds.org/category/research-and-scholarship
        registrar: http://ukfederation.org.uk
      - type: multi
        name: http://macedir.org/entity-category
        value: {pattern: "^https://refeds\\.org/"}
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from mda_toolkit.core.exceptions import ComponentInitializationError
from mda_toolkit.core.mdattr import matchers as M
from mda_toolkit.core.mdattr.context import Rule

__all__ = ["build_rule", "build_rules"]


def _required(spec: Mapping[str, Any], key: str, component_id: Optional[str]) -> Any:
    if key not in spec:
        raise ComponentInitializationError(
            f"rule of type '{spec.get('type')}' requires '{key}'", component_id)
    return spec[key]


def _string_predicate(spec: Any, component_id: Optional[str]) -> M.StringPredicate:
    """A plain value means equality, ``{pattern: regex}`` means regex search."""
    if isinstance(spec, Mapping):
        if "pattern" not in spec:
            raise ComponentInitializationError(
                f"predicate mapping requires 'pattern': {dict(spec)!r}", component_id)
        return M.contains_pattern(str(spec["pattern"]))
    return M.equal_to(spec)


def _uri_matcher(cls, value_key: str):
    def _build(spec: Mapping[str, Any], component_id: Optional[str]) -> Rule:
        return cls(_required(spec, value_key, component_id), spec.get("registrar"))
    return _build


def _multi(spec: Mapping[str, Any], component_id: Optional[str]) -> Rule:
    predicates: Dict[str, M.StringPredicate] = {}
    for key in ("value", "name", "name_format", "registration_authority"):
        if key in spec:
            predicates[f"{key}_predicate"] = _string_predicate(spec[key], component_id)
    return M.MultiPredicateMatcher(**predicates)


_BUILDERS = {
    "entity_category": _uri_matcher(M.EntityCategoryMatcher, "category"),
    "entity_category_support": _uri_matcher(M.EntityCategorySupportMatcher, "category"),
    "assurance_certification": _uri_matcher(M.AssuranceCertificationMatcher, "certification"),
    "registration_authority":
        lambda spec, cid: M.RegistrationAuthorityMatcher(_required(spec, "registrar", cid)),
    "attribute_value": lambda spec, cid: M.AttributeValueMatcher(_required(spec, "value", cid)),
    "attribute_name": lambda spec, cid: M.AttributeNameMatcher(_required(spec, "name", cid)),
    "attribute_name_format":
        lambda spec, cid: M.AttributeNameFormatMatcher(_required(spec, "name_format", cid)),
    "multi": _multi,
    "any": lambda spec, cid: M.MultiPredicateMatcher(),
}


def build_rule(spec: Mapping[str, Any], component_id: Optional[str] = None) -> Rule:
    """Build a single rule from a mapping with a ``type`` key."""
    if not isinstance(spec, Mapping):
        raise ComponentInitializationError(f"rule must be a mapping, got {spec!r}", component_id)
    rule_type = spec.get("type")
    builder = _BUILDERS.get(rule_type)
    if builder is None:
        raise ComponentInitializationError(f"unknown rule type '{rule_type}'", component_id)
    return builder(spec, component_id)


def build_rules(specs: Iterable[Mapping[str, Any]], component_id: Optional[str] = None) -> List[Rule]:
    return [build_rule(spec, component_id) for spec in specs]
