import pytest

from mda_toolkit.core.dom import NamespaceStrippingStage
from mda_toolkit.core.exceptions import ComponentInitializationError

MD = "urn:oasis:names:tc:SAML:2.0:metadata"
JUNK = "urn:example:junk"


def _stage(namespace=JUNK):
    stage = NamespaceStrippingStage("strip")
    if namespace is not None:
        stage.namespace = namespace
    return stage


class TestNamespaceStrippingStage:
    """Elements and attributes in one namespace are removed."""

    def test_removes_elements_and_attributes(self, make_item, assert_xml_equal):
        item = make_item(
            '<md:EntityDescriptor xmlns:md="%s" xmlns:j="%s" entityID="e" j:flag="1">'
            '<md:Extensions><j:Thing><md:Organization/></j:Thing></md:Extensions>'
            '<md:Organization j:note="x"/>'
            '</md:EntityDescriptor>' % (MD, JUNK))
        stage = _stage()
        stage.initialize()
        stage.execute([item])

        expected = make_item(
            '<md:EntityDescriptor xmlns:md="%s" entityID="e">'
            '<md:Extensions/><md:Organization/></md:EntityDescriptor>' % MD)
        assert_xml_equal(expected, item)
        assert "urn:example:junk" not in item.unwrap().nsmap.values()

    def test_root_in_namespace_is_kept(self, make_item):
        item = make_item('<j:Root xmlns:j="%s" j:a="1" b="2"><j:Child/></j:Root>' % JUNK)
        stage = _stage()
        stage.initialize()
        stage.execute([item])
        root = item.unwrap()
        assert root.tag == "{%s}Root" % JUNK
        assert len(root) == 0
        assert dict(root.attrib) == {"b": "2"}

    def test_other_namespaces_untouched(self, make_item, assert_xml_equal):
        text = '<md:EntityDescriptor xmlns:md="%s" entityID="e"><md:Organization/></md:EntityDescriptor>' % MD
        item = make_item(text)
        stage = _stage()
        stage.initialize()
        stage.execute([item])
        assert_xml_equal(make_item(text), item)

    def test_namespace_required(self):
        with pytest.raises(ComponentInitializationError):
            _stage(namespace=None).initialize()
