"""
Nutritional Aggregator

Merges the nutritional guidance of several selected ailments into one
de-duplicated NutritionalFocus.

Unknown ailment ids are skipped, not raised. Stale ids in a saved
selection must not break aggregation.

Version: matching_layer_v1
"""

from typing import Dict, Iterable, List, Optional

from ..catalog.ailments import AILMENT_CATALOG, AilmentCatalog
from ..catalog.models import Ailment
from .models import NutritionalFocus

GUIDANCE_FIELDS = ("beneficial_foods", "avoid_foods", "key_nutrients", "meal_plan_focus")


def resolve_ailments(ailment_ids: Iterable[str], catalog: Optional[AilmentCatalog] = None) -> List[Ailment]:
    """Resolve ids in the order given, dropping the ones the catalog does not know."""
    catalog = AILMENT_CATALOG if catalog is None else catalog
    resolved = []
    for ailment_id in ailment_ids:
        ailment = catalog.lookup(ailment_id)
        if ailment is not None:
            resolved.append(ailment)
    return resolved


def aggregate(ailment_ids: Iterable[str], catalog: Optional[AilmentCatalog] = None) -> NutritionalFocus:
    """
    Union the four guidance fields across the resolved ailments.

    Ailments are walked in catalog order, whatever order the ids were
    selected in, so the same set of ids always gives the same focus.
    Empty input gives an empty NutritionalFocus, never None.
    """
    catalog = AILMENT_CATALOG if catalog is None else catalog
    wanted = set(ailment_ids)
    # dict keys keep first-insertion order
    combined: Dict[str, Dict[str, None]] = {field: {} for field in GUIDANCE_FIELDS}

    for ailment in catalog.all():
        if ailment.id not in wanted:
            continue
        support = ailment.nutritional_support
        for field in GUIDANCE_FIELDS:
            for item in getattr(support, field):
                combined[field].setdefault(item, None)

    return NutritionalFocus(**{field: tuple(items) for field, items in combined.items()})
