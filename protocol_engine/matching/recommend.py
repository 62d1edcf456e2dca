"""
Protocol Recommender

Scores cleanse protocols against a set of selected ailments using the
curated AILMENT_TO_PROTOCOL_MAPPING hint table.

Scoring:
    match_score = round(matches / total_selected * 100)

Rounding is half-up (12.5 -> 13), not Python's round-half-even.
Ties keep first-discovered order: input ailment order, then the order
of protocol ids in the hint table.

Protocol.target_ailments is deliberately NOT consulted here. Use
ProtocolCatalog.by_target_ailments for that view.

Version: matching_layer_v1
"""

import math
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from ..catalog.protocols import PROTOCOL_CATALOG, ProtocolCatalog
from ..catalog.protocols_data import AILMENT_TO_PROTOCOL_MAPPING
from .models import ProtocolRecommendation


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_match_score(matches: int, total_selected: int) -> int:
    if total_selected <= 0:
        return 0
    return round_half_up(matches / total_selected * 100)


def format_reasoning(matches: int, total_selected: int, ailment_ids: Sequence[str]) -> str:
    return f"Matches {matches}/{total_selected} selected conditions: {', '.join(ailment_ids)}"


def _distinct(ids: Iterable[str]) -> List[str]:
    seen = set()
    ordered = []
    for item in ids:
        if item not in seen:
            seen.add(item)
            ordered.append(item)
    return ordered


def recommend(
    ailment_ids: Iterable[str],
    catalog: Optional[ProtocolCatalog] = None,
    mapping: Optional[Mapping[str, Sequence[str]]] = None,
) -> List[ProtocolRecommendation]:
    """
    Rank protocols by the share of selected ailments that recommend them.

    Repeated ailment ids count once. Protocol ids in the hint table that
    do not resolve in the catalog are skipped. Empty input, or input with
    no hint-table entries, gives an empty list.
    """
    catalog = PROTOCOL_CATALOG if catalog is None else catalog
    mapping = AILMENT_TO_PROTOCOL_MAPPING if mapping is None else mapping

    selected = _distinct(ailment_ids)
    if not selected:
        return []

    total = len(selected)
    # protocol_id -> matched ailment ids; dict order is discovery order
    matched: Dict[str, List[str]] = {}

    for ailment_id in selected:
        for protocol_id in _distinct(mapping.get(ailment_id, ())):
            if protocol_id not in catalog:
                continue
            matched.setdefault(protocol_id, []).append(ailment_id)

    recommendations = [
        ProtocolRecommendation(
            protocol=catalog.lookup(protocol_id),
            match_score=calculate_match_score(len(ailments), total),
            matched_ailments=tuple(ailments),
            reasoning=format_reasoning(len(ailments), total, ailments),
        )
        for protocol_id, ailments in matched.items()
    ]

    # sorted() is stable
    return sorted(recommendations, key=lambda r: r.match_score, reverse=True)
