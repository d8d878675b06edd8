"""Synthetic input generators for registry scenarios."""

from deed_registry.generators.principal import PrincipalGenerator
from deed_registry.generators.property import (
    DocumentDraft,
    DocumentGenerator,
    PropertyDraft,
    PropertyGenerator,
)

__all__ = [
    "DocumentDraft",
    "DocumentGenerator",
    "PrincipalGenerator",
    "PropertyDraft",
    "PropertyGenerator",
]
