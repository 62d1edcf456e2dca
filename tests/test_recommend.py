"""
Protocol Recommendation Tests

Tests validate:
- Empty / unmapped input gives no recommendations
- Match score = round-half-up(matches / selected * 100)
- Ranking by score, ties keep discovery order
- Reasoning text
- Duplicate ids and unresolvable protocol ids
"""

import pytest

from protocol_engine.matching.recommend import calculate_match_score, recommend, round_half_up


# ============================================================================
# Scoring
# ============================================================================

class TestMatchScore:

    @pytest.mark.parametrize("matches,total,expected", [
        (1, 1, 100),
        (1, 2, 50),
        (1, 3, 33),
        (2, 3, 67),
        (1, 8, 13),
        (3, 8, 38),
        (0, 4, 0),
    ])
    def test_rounding(self, matches, total, expected):
        assert calculate_match_score(matches, total) == expected

    def test_zero_total_scores_zero(self):
        assert calculate_match_score(0, 0) == 0

    def test_round_half_up_rounds_halves_away_from_even(self):
        assert round_half_up(12.5) == 13
        assert round_half_up(2.5) == 3
        assert round_half_up(2.4999) == 2


# ============================================================================
# Ranking
# ============================================================================

class TestRecommend:

    def test_empty_selection(self):
        assert recommend([]) == []

    def test_unmapped_ailments_give_nothing(self):
        assert recommend(["anxiety", "not_real"]) == []

    def test_single_ailment(self):
        results = recommend(["ibs"])
        assert [r.protocol.id for r in results] == ["modern_integrative", "gentle_digestive_cleanse"]
        assert all(r.match_score == 100 for r in results)
        assert results[0].reasoning == "Matches 1/1 selected conditions: ibs"

    def test_ranked_by_score_then_discovery_order(self):
        results = recommend(["ibs", "bloating"])
        assert [(r.protocol.id, r.match_score) for r in results] == [
            ("gentle_digestive_cleanse", 100),
            ("modern_integrative", 50),
            ("ayurvedic_comprehensive", 50),
        ]
        assert results[0].matched_ailments == ("ibs", "bloating")
        assert results[0].reasoning == "Matches 2/2 selected conditions: ibs, bloating"

    def test_unmapped_ailments_still_count_in_total(self):
        results = recommend(["ibs", "anxiety"])
        assert {r.match_score for r in results} == {50}
        assert results[0].reasoning == "Matches 1/2 selected conditions: ibs"

    def test_scores_are_non_increasing(self):
        results = recommend(["ibs", "bloating", "chronic_fatigue", "brain_fog", "constipation"])
        scores = [r.match_score for r in results]
        assert scores == sorted(scores, reverse=True)
        assert all(0 <= s <= 100 for s in scores)

    def test_each_protocol_appears_once(self):
        results = recommend(["bloating", "constipation", "acid_reflux"])
        ids = [r.protocol.id for r in results]
        assert len(ids) == len(set(ids))

    def test_duplicate_selection_counts_once(self):
        results = recommend(["ibs", "ibs"])
        assert all(r.match_score == 100 for r in results)
        assert results[0].reasoning == "Matches 1/1 selected conditions: ibs"

    def test_unknown_protocol_ids_in_mapping_are_skipped(self):
        mapping = {"custom": ["ghost_protocol", "gentle_digestive_cleanse"]}
        results = recommend(["custom"], mapping=mapping)
        assert [r.protocol.id for r in results] == ["gentle_digestive_cleanse"]
