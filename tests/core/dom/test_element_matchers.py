import pytest
from lxml import etree as ET

from mda_toolkit.core import constants as C
from mda_toolkit.core.dom import AttributeValueMatcher, ElementMatcher

SAML = C.NS["saml"]


class TestElementMatcher:
    def test_matches_by_namespace_and_local_name(self):
        matcher = ElementMatcher(C.ATTRIBUTE)
        assert matcher(ET.fromstring('<s:Attribute xmlns:s="%s"/>' % SAML))
        assert matcher(ET.fromstring('<Attribute xmlns="%s"/>' % SAML))
        assert not matcher(ET.fromstring("<Attribute/>"))

    def test_accepts_clark_notation(self):
        matcher = ElementMatcher("{%s}Attribute" % SAML)
        assert matcher.qname == C.ATTRIBUTE

    def test_comments_never_match(self):
        assert not ElementMatcher(C.ATTRIBUTE)(ET.Comment("Attribute"))

    def test_none_rejected(self):
        with pytest.raises(ValueError):
            ElementMatcher(None)


class TestAttributeValueMatcher:
    """Exact text match on saml:AttributeValue."""

    def _value(self, text):
        return ET.fromstring('<s:AttributeValue xmlns:s="%s">%s</s:AttributeValue>' % (SAML, text))

    def test_exact_text(self):
        matcher = AttributeValueMatcher("http://refeds.org/category/research-and-scholarship")
        assert matcher(self._value("http://refeds.org/category/research-and-scholarship"))
        assert not matcher(self._value("http://refeds.org/category/hide-from-discovery"))

    def test_whitespace_is_significant(self):
        assert not AttributeValueMatcher("value")(self._value(" value "))

    def test_other_elements_do_not_match(self):
        element = ET.fromstring('<s:Attribute xmlns:s="%s">value</s:Attribute>' % SAML)
        assert not AttributeValueMatcher("value")(element)

    def test_none_rejected(self):
        with pytest.raises(ValueError):
            AttributeValueMatcher(None)
