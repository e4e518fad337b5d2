from mda_toolkit.core.models import ErrorStatus
from mda_toolkit.core.saml import EntitiesDescriptorDisassemblerStage

MD = "urn:oasis:names:tc:SAML:2.0:metadata"

AGGREGATE = """
<md:EntitiesDescriptor xmlns:md="%s" Name="outer">
  <md:EntityDescriptor entityID="https://one.example.org/"/>
  <md:EntitiesDescriptor Name="inner">
    <md:EntityDescriptor entityID="https://two.example.org/"/>
  </md:EntitiesDescriptor>
  <md:EntityDescriptor entityID="https://three.example.org/"/>
</md:EntitiesDescriptor>
""" % MD


class TestEntitiesDescriptorDisassemblerStage:
    """Aggregates become one item per entity, in document order."""

    def test_splits_nested_groups(self, make_item):
        aggregate = make_item(AGGREGATE)
        aggregate.metadata.put(ErrorStatus("loader", "not carried over"))
        before = make_item('<md:EntityDescriptor xmlns:md="%s" entityID="first"/>' % MD)
        items = [before, aggregate]

        stage = EntitiesDescriptorDisassemblerStage("disassemble")
        stage.initialize()
        stage.execute(items)

        assert items[0] is before
        assert [i.unwrap().get("entityID") for i in items] == [
            "first",
            "https://one.example.org/",
            "https://two.example.org/",
            "https://three.example.org/",
        ]
        for item in items[1:]:
            assert item.unwrap().getparent() is None
            assert item.unwrap().tail is None
            assert len(item.metadata) == 0

    def test_empty_aggregate_yields_nothing(self, make_item):
        items = [make_item('<md:EntitiesDescriptor xmlns:md="%s"/>' % MD)]
        stage = EntitiesDescriptorDisassemblerStage("disassemble")
        stage.initialize()
        stage.execute(items)
        assert items == []
