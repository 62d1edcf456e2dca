"""
Protocol Catalog

Read-only index over the cleanse protocol table plus the simple
predicate filters used by the catalog API. Every filter preserves
catalog order and returns an empty list for unknown values.

Version: catalog_v1
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .models import Intensity, Protocol, ProtocolType, Region
from .protocols_data import CLEANSE_PROTOCOLS

logger = logging.getLogger(__name__)


class ProtocolCatalog:

    def __init__(self, protocols: Iterable[Protocol]):
        self._protocols: Tuple[Protocol, ...] = tuple(protocols)
        self._by_id: Dict[str, Protocol] = {}
        for protocol in self._protocols:
            if protocol.id in self._by_id:
                raise ValueError(f"Duplicate protocol id: {protocol.id}")
            self._by_id[protocol.id] = protocol

    @classmethod
    def from_table(cls, rows: List[dict]) -> "ProtocolCatalog":
        return cls(Protocol.model_validate(row) for row in rows)

    def __len__(self) -> int:
        return len(self._protocols)

    def __contains__(self, protocol_id: object) -> bool:
        return protocol_id in self._by_id

    def all(self) -> List[Protocol]:
        return list(self._protocols)

    def lookup(self, protocol_id: str) -> Optional[Protocol]:
        return self._by_id.get(protocol_id)

    def by_intensity(self, level: Intensity) -> List[Protocol]:
        try:
            level = Intensity(level)
        except ValueError:
            return []
        return [p for p in self._protocols if p.intensity == level]

    def by_type(self, protocol_type: ProtocolType) -> List[Protocol]:
        try:
            protocol_type = ProtocolType(protocol_type)
        except ValueError:
            return []
        return [p for p in self._protocols if p.type == protocol_type]

    def by_region(self, region: Region) -> List[Protocol]:
        try:
            region = Region(region)
        except ValueError:
            return []
        return [p for p in self._protocols if p.regional_availability.is_available_in(region)]

    def by_target_ailments(self, ailment_ids: Iterable[str]) -> List[Protocol]:
        """
        Protocols whose target_ailments tags intersect ailment_ids.

        Independent of recommendation scoring, which uses the curated
        ailment-to-protocol mapping only.
        """
        wanted = set(ailment_ids)
        return [p for p in self._protocols if wanted.intersection(p.target_ailments)]


def load_protocol_catalog() -> ProtocolCatalog:
    catalog = ProtocolCatalog.from_table(CLEANSE_PROTOCOLS)
    logger.debug(f"Loaded protocol catalog: {len(catalog)} protocols")
    return catalog


PROTOCOL_CATALOG = load_protocol_catalog()
