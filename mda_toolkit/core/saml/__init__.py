"""Stages specific to SAML metadata documents."""

from .disassembler import EntitiesDescriptorDisassemblerStage
from .extensions import RegistrationAuthorityPopulationStage, RemoveEmptyExtensionsStage
from .string_checking import SAMLStringElementCheckingStage

__all__ = [
    "EntitiesDescriptorDisassemblerStage",
    "RegistrationAuthorityPopulationStage",
    "RemoveEmptyExtensionsStage",
    "SAMLStringElementCheckingStage",
]
