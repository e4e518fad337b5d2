"""Namespace URIs and qualified names used across the toolkit."""

from lxml import etree as ET

NS = {
    "md": "urn:oasis:names:tc:SAML:2.0:metadata",
    "saml": "urn:oasis:names:tc:SAML:2.0:assertion",
    "mdui": "urn:oasis:names:tc:SAML:metadata:ui",
    "mdattr": "urn:oasis:names:tc:SAML:metadata:attribute",
    "mdrpi": "urn:oasis:names:tc:SAML:metadata:rpi",
    "xml": "http://www.w3.org/XML/1998/namespace",
}

XML_LANG = "{%s}lang" % NS["xml"]

# md
ENTITY_DESCRIPTOR = ET.QName(NS["md"], "EntityDescriptor")
ENTITIES_DESCRIPTOR = ET.QName(NS["md"], "EntitiesDescriptor")
EXTENSIONS = ET.QName(NS["md"], "Extensions")
IDP_SSO_DESCRIPTOR = ET.QName(NS["md"], "IDPSSODescriptor")
ORGANIZATION = ET.QName(NS["md"], "Organization")
ORGANIZATION_NAME = ET.QName(NS["md"], "OrganizationName")
ORGANIZATION_DISPLAY_NAME = ET.QName(NS["md"], "OrganizationDisplayName")
ORGANIZATION_URL = ET.QName(NS["md"], "OrganizationURL")

# saml
ATTRIBUTE = ET.QName(NS["saml"], "Attribute")
ATTRIBUTE_VALUE = ET.QName(NS["saml"], "AttributeValue")

# mdui
UIINFO = ET.QName(NS["mdui"], "UIInfo")
DISPLAY_NAME = ET.QName(NS["mdui"], "DisplayName")
DESCRIPTION = ET.QName(NS["mdui"], "Description")
KEYWORDS = ET.QName(NS["mdui"], "Keywords")
INFORMATION_URL = ET.QName(NS["mdui"], "InformationURL")
PRIVACY_STATEMENT_URL = ET.QName(NS["mdui"], "PrivacyStatementURL")
LOGO = ET.QName(NS["mdui"], "Logo")

# mdattr / mdrpi
ENTITY_ATTRIBUTES = ET.QName(NS["mdattr"], "EntityAttributes")
REGISTRATION_INFO = ET.QName(NS["mdrpi"], "RegistrationInfo")

# Attribute name formats and well-known entity attribute names
NAME_FORMAT_URI = "urn:oasis:names:tc:SAML:2.0:attrname-format:uri"
NAME_FORMAT_UNSPECIFIED = "urn:oasis:names:tc:SAML:2.0:attrname-format:unspecified"
ENTITY_CATEGORY = "http://macedir.org/entity-category"
ENTITY_CATEGORY_SUPPORT = "http://macedir.org/entity-category-support"
ASSURANCE_CERTIFICATION = "urn:oasis:names:tc:SAML:attribute:assurance-certification"
