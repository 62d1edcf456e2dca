"""
EvoFit Catalog Layer

Static knowledge bases loaded once at import:
- Ailment catalog: 25 client health conditions in 9 categories, each with
  nutritional guidance for meal planning
- Protocol catalog: 4 phased cleanse protocols with herbs, supplements,
  dietary guidelines and regional availability

Both catalogs are immutable and shared across all sessions.

Version: catalog_v1
"""

from .models import (
    Ailment,
    AilmentCategory,
    AilmentCategoryInfo,
    NutritionalSupport,
    Severity,
    Protocol,
    ProtocolType,
    Intensity,
    EvidenceLevel,
    Region,
    Phase,
    HerbComponent,
)
from .ailments import AilmentCatalog, AILMENT_CATALOG
from .protocols import ProtocolCatalog, PROTOCOL_CATALOG

__all__ = [
    "Ailment",
    "AilmentCategory",
    "AilmentCategoryInfo",
    "NutritionalSupport",
    "Severity",
    "Protocol",
    "ProtocolType",
    "Intensity",
    "EvidenceLevel",
    "Region",
    "Phase",
    "HerbComponent",
    "AilmentCatalog",
    "AILMENT_CATALOG",
    "ProtocolCatalog",
    "PROTOCOL_CATALOG",
]

__version__ = "catalog_v1"
