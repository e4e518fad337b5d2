"""Test configuration and shared fixtures for the toolkit test suite.

Fixtures here load XML documents from ``tests/fixtures/data`` as items and
compare element trees structurally, ignoring whitespace-only text, comments
and namespace prefixes.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from lxml import etree as ET

from mda_toolkit.config import ConfigManager
from mda_toolkit.core.models import DOMElementItem
from mda_toolkit.core.utils import item_from_string, parse_item

# Configure test logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def _normalize(element):
    """Reduce *element* to nested tuples suitable for equality checks."""
    children = [c for c in element if isinstance(c.tag, str)]
    text = (element.text or "").strip()
    tails = tuple((c.tail or "").strip() for c in children)
    return (
        element.tag,
        tuple(sorted(element.attrib.items())),
        text,
        tails,
        tuple(_normalize(c) for c in children),
    )


@pytest.fixture(scope="session")
def test_data_dir():
    """Provides path to test data directory."""
    return Path(__file__).parent / "fixtures" / "data"


@pytest.fixture
def read_item(test_data_dir):
    """Returns a loader: ``read_item("mdattr/input.xml")`` -> DOMElementItem."""
    def _read(name: str) -> DOMElementItem:
        return parse_item(test_data_dir / name)
    return _read


@pytest.fixture
def make_item():
    """Returns a loader building an item from an XML string."""
    return item_from_string


@pytest.fixture
def assert_xml_equal():
    """Returns an assertion helper comparing two element trees."""
    def _assert(expected, actual):
        if isinstance(expected, DOMElementItem):
            expected = expected.unwrap()
        if isinstance(actual, DOMElementItem):
            actual = actual.unwrap()
        assert _normalize(actual) == _normalize(expected), (
            "XML differs:\nexpected:\n%s\nactual:\n%s" % (
                ET.tostring(expected, encoding="unicode"),
                ET.tostring(actual, encoding="unicode"),
            )
        )
    return _assert


@pytest.fixture
def fresh_config(tmp_path, monkeypatch):
    """Provides a ConfigManager reading user overrides from a temp directory."""
    monkeypatch.setenv("MDA_CONFIG_DIR", str(tmp_path))
    ConfigManager.reset()
    yield tmp_path
    ConfigManager.reset()
