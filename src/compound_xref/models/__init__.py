"""Data models for compound_xref."""

from compound_xref.models.model_interaction import (
    Attribute,
    InteractionClaim,
    InteractionRecord,
)
from compound_xref.models.model_unichem import CompoundIDs, Resolution, UniChemMapping

__all__ = [
    "Attribute",
    "InteractionClaim",
    "InteractionRecord",
    "CompoundIDs",
    "Resolution",
    "UniChemMapping",
]
