from __future__ import annotations

"""Serialize a collection of entities as a Shibboleth-style discovery feed.

The output is a UTF-8 JSON array with one object per identity provider::

    [{"entityID": "...",
      "DisplayNames": [{"value": "...", "lang": "en"}],
      "Logos": [{"value": "...", "height": "16", "width": "16"}],
      ...}]

Keys other than ``entityID`` are only written when there is something to
put in them.  Display information comes from the first ``mdui:UIInfo``
found in the entity's ``md:IDPSSODescriptor`` extensions.
"""

import io
import json
import logging
from typing import IO, Any, Dict, Iterable, List, Optional

from lxml import etree as ET

from mda_toolkit.core import constants as C
from mda_toolkit.core.component import BaseComponent
from mda_toolkit.core.models import DOMElementItem
from mda_toolkit.core.utils import (
    child_elements,
    descriptor_extension,
    first_child_element,
    is_entity_descriptor,
    text_content,
    xml_lang,
)

__all__ = ["DiscoFeedCollectionSerializer"]

logger = logging.getLogger(__name__)

# (element name, feed key) pairs written from the chosen UIInfo, after DisplayNames
_UIINFO_LISTS = (
    (C.DESCRIPTION, "Descriptions"),
    (C.KEYWORDS, "Keywords"),
    (C.INFORMATION_URL, "InformationURLs"),
    (C.PRIVACY_STATEMENT_URL, "PrivacyStatementURLs"),
)


def _value_lang_list(elements: List[ET._Element]) -> List[Dict[str, str]]:
    return [{"value": text_content(e), "lang": xml_lang(e) or ""} for e in elements]


class DiscoFeedCollectionSerializer(BaseComponent):
    """Render identity provider entities as a discovery feed.

    Settings (frozen by ``initialize()``):

    pretty_printing
        Indent the output by two spaces. Default False.
    including_legacy_display_names
        Fall back to ``md:OrganizationDisplayName`` when no
        ``mdui:DisplayName`` is available. Default False.
    including_entity_attributes
        Add an ``EntityAttributes`` list. Default False.
    """

    def __init__(self) -> None:
        super().__init__()
        self._pretty_printing = False
        self._including_legacy_display_names = False
        self._including_entity_attributes = False
        self._encoder: Optional[json.JSONEncoder] = None

    @classmethod
    def from_config(cls, section: Dict[str, Any]) -> "DiscoFeedCollectionSerializer":
        """Build an uninitialized serializer from a ``disco_feed`` config section."""
        return cls().configure(**{k: bool(v) for k, v in section.items()})

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    @property
    def pretty_printing(self) -> bool:
        return self._pretty_printing

    @pretty_printing.setter
    def pretty_printing(self, pretty: bool) -> None:
        self._check_modifiable()
        self._pretty_printing = pretty
        self._mark_configured()

    @property
    def including_legacy_display_names(self) -> bool:
        return self._including_legacy_display_names

    @including_legacy_display_names.setter
    def including_legacy_display_names(self, include: bool) -> None:
        self._check_modifiable()
        self._including_legacy_display_names = include
        self._mark_configured()

    @property
    def including_entity_attributes(self) -> bool:
        return self._including_entity_attributes

    @including_entity_attributes.setter
    def including_entity_attributes(self, include: bool) -> None:
        self._check_modifiable()
        self._including_entity_attributes = include
        self._mark_configured()

    def do_initialize(self) -> None:
        super().do_initialize()
        if self._pretty_printing:
            self._encoder = json.JSONEncoder(ensure_ascii=False, indent=2)
        else:
            self._encoder = json.JSONEncoder(ensure_ascii=False, separators=(",", ":"))

    def do_destroy(self) -> None:
        self._encoder = None
        super().do_destroy()

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def serialize_collection(self, items: Iterable[DOMElementItem], output: IO[bytes]) -> None:
        """Write the feed for *items* to the binary stream *output*.

        Errors raised by *output* propagate to the caller.
        """
        self._check_initialized()
        feed = [record for record in (self.entity_record(item.unwrap()) for item in items)
                if record is not None]
        logger.debug("Disco feed: %d identity provider(s)", len(feed))
        for chunk in self._encoder.iterencode(feed):
            output.write(chunk.encode("utf-8"))
        if self._pretty_printing:
            output.write(b"\n")

    def serialize_to_bytes(self, items: Iterable[DOMElementItem]) -> bytes:
        buffer = io.BytesIO()
        self.serialize_collection(items, buffer)
        return buffer.getvalue()

    def entity_record(self, entity: ET._Element) -> Optional[Dict[str, Any]]:
        """Feed object for *entity*, or None if it is not an identity provider."""
        if not is_entity_descriptor(entity):
            return None
        idp_descriptors = child_elements(entity, C.IDP_SSO_DESCRIPTOR)
        if not idp_descriptors:
            return None

        record: Dict[str, Any] = {"entityID": entity.get("entityID", "")}
        ui_info = self._first_ui_info(idp_descriptors)

        display_names = self._display_names(entity, ui_info)
        if display_names:
            record["DisplayNames"] = _value_lang_list(display_names)

        if ui_info is not None:
            for qname, key in _UIINFO_LISTS:
                elements = child_elements(ui_info, qname)
                if elements:
                    record[key] = _value_lang_list(elements)
            logos = self._logos(ui_info)
            if logos:
                record["Logos"] = logos

        if self._including_entity_attributes:
            attributes = self._entity_attributes(entity)
            if attributes:
                record["EntityAttributes"] = attributes
        return record

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _first_ui_info(idp_descriptors: List[ET._Element]) -> Optional[ET._Element]:
        for descriptor in idp_descriptors:
            ui_info = descriptor_extension(descriptor, C.UIINFO)
            if ui_info is not None:
                return ui_info
        return None

    def _display_names(self, entity: ET._Element,
                       ui_info: Optional[ET._Element]) -> List[ET._Element]:
        if ui_info is not None:
            display_names = child_elements(ui_info, C.DISPLAY_NAME)
            if display_names:
                return display_names
        if self._including_legacy_display_names:
            organization = first_child_element(entity, C.ORGANIZATION)
            if organization is not None:
                return child_elements(organization, C.ORGANIZATION_DISPLAY_NAME)
        return []

    @staticmethod
    def _logos(ui_info: ET._Element) -> List[Dict[str, str]]:
        logos = []
        for logo in child_elements(ui_info, C.LOGO):
            record = {
                "value": text_content(logo),
                "height": logo.get("height", ""),
                "width": logo.get("width", ""),
            }
            # xml:lang is optional on mdui:Logo
            lang = xml_lang(logo)
            if lang is not None:
                record["lang"] = lang
            logos.append(record)
        return logos

    @staticmethod
    def _entity_attributes(entity: ET._Element) -> List[Dict[str, Any]]:
        extension = descriptor_extension(entity, C.ENTITY_ATTRIBUTES)
        if extension is None:
            return []
        attributes = []
        for attribute in child_elements(extension, C.ATTRIBUTE):
            values = child_elements(attribute, C.ATTRIBUTE_VALUE)
            if values:
                attributes.append({
                    "name": attribute.get("Name", ""),
                    "values": [text_content(v) for v in values],
                })
        return attributes
