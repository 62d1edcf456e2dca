"""
EvoFit Matching Layer

Ailment selection -> guidance and protocol ranking.

- aggregate(): union of the nutritional guidance of the selected ailments
- recommend(): protocols ranked by the share of selected ailments that
  recommend them in the curated hint table

Both are pure functions over the read-only catalogs.

Version: matching_layer_v1
"""

from .models import NutritionalFocus, ProtocolRecommendation
from .aggregate import aggregate, resolve_ailments
from .recommend import recommend, calculate_match_score, round_half_up

__all__ = [
    "NutritionalFocus",
    "ProtocolRecommendation",
    "aggregate",
    "resolve_ailments",
    "recommend",
    "calculate_match_score",
    "round_half_up",
]

__version__ = "matching_layer_v1"
