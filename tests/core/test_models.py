import pytest

from mda_toolkit.core.models import (
    ClassToInstanceMultiMap,
    DOMElementItem,
    ErrorStatus,
    RegistrationAuthority,
    WarningStatus,
)


class TestClassToInstanceMultiMap:
    """Values are filed under their concrete class, in insertion order."""

    def test_get_returns_values_in_order(self):
        bag = ClassToInstanceMultiMap()
        bag.put(ErrorStatus("a", "first"))
        bag.put(WarningStatus("a", "warn"))
        bag.put(ErrorStatus("b", "second"))

        assert bag.get(ErrorStatus) == [ErrorStatus("a", "first"), ErrorStatus("b", "second")]
        assert bag.get(WarningStatus) == [WarningStatus("a", "warn")]
        assert len(bag) == 3

    def test_missing_key_gives_empty_list(self):
        bag = ClassToInstanceMultiMap()
        assert bag.get(ErrorStatus) == []
        assert not bag.contains_key(ErrorStatus)

    def test_not_indexed_under_base_class(self):
        from mda_toolkit.core.models import StatusMetadata

        bag = ClassToInstanceMultiMap()
        bag.put(ErrorStatus("a", "msg"))
        assert bag.get(StatusMetadata) == []
        assert bag.keys() == [ErrorStatus]

    def test_get_returns_a_copy(self):
        bag = ClassToInstanceMultiMap()
        bag.put(RegistrationAuthority("http://ukfederation.org.uk"))
        bag.get(RegistrationAuthority).clear()
        assert len(bag.get(RegistrationAuthority)) == 1

    def test_remove_and_clear(self):
        bag = ClassToInstanceMultiMap()
        status = ErrorStatus("a", "msg")
        bag.put(status)
        assert bag.remove(status) is True
        assert bag.remove(status) is False
        assert not bag.contains_key(ErrorStatus)

        bag.put(status)
        bag.clear()
        assert len(bag) == 0


class TestStatusMetadata:
    def test_equality_is_by_class_and_fields(self):
        assert ErrorStatus("id", "msg") == ErrorStatus("id", "msg")
        assert ErrorStatus("id", "msg") != WarningStatus("id", "msg")

    def test_immutable(self):
        status = ErrorStatus("id", "msg")
        with pytest.raises(Exception):
            status.message = "changed"


class TestDOMElementItem:
    def test_wraps_element(self, make_item):
        item = make_item("<root/>")
        assert item.unwrap().tag == "root"
        assert item.get_item_metadata() is item.metadata
        assert len(item.metadata) == 0

    def test_accepts_element_tree(self):
        from lxml import etree as ET

        tree = ET.ElementTree(ET.fromstring("<root><child/></root>"))
        item = DOMElementItem(tree)
        assert item.unwrap().tag == "root"

    def test_rejects_none(self):
        with pytest.raises(ValueError):
            DOMElementItem(None)
