"""
tests/test_risk_classifier.py
-----------------------------
Unit tests for timeline bucketing and RiskProfileClassifier.

Test coverage:
    Timeline label bucketing
    Concrete selection scenarios
    Totality over every score, experience and timeline
    Band boundary exactness
    Beginner moderation above 75
    Boundary coercion (clamping, experience strings)
"""

import unittest

from allocator import constants as C
from allocator.enums import ExperienceLevel, RiskBand, TimelineBucket
from allocator.risk_classifier import (
    RiskProfileClassifier,
    bucket_timeline,
    clamp_risk_score,
    risk_band,
    select_strategy,
)
from allocator.strategy_catalog import default_catalog


_TIMELINE_LABELS = [
    "", "1-2 years", "Less than 3 years", "3-5 years", "5-10 years",
    "6-10 years", "10+ years", "20+ years", "whenever",
]


def _select_id(score, experience=ExperienceLevel.INTERMEDIATE, timeline=TimelineBucket.MEDIUM):
    return RiskProfileClassifier.select_id(score, experience, timeline)


# ===========================================================================
# 1. Timeline Bucketing
# ===========================================================================

class TestBucketTimeline(unittest.TestCase):

    def test_short_labels(self):
        for label in ("1-2 years", "less than 3 years", "3-5 years"):
            self.assertEqual(bucket_timeline(label), TimelineBucket.SHORT, label)

    def test_medium_labels(self):
        for label in ("6-10 years", "5-10 years"):
            self.assertEqual(bucket_timeline(label), TimelineBucket.MEDIUM, label)

    def test_long_labels(self):
        for label in ("10+ years", "20+ years"):
            self.assertEqual(bucket_timeline(label), TimelineBucket.LONG, label)

    def test_case_insensitive(self):
        self.assertEqual(bucket_timeline("LESS THAN 3 YEARS"), TimelineBucket.SHORT)

    def test_empty_and_none_unspecified(self):
        self.assertEqual(bucket_timeline(""), TimelineBucket.UNSPECIFIED)
        self.assertEqual(bucket_timeline(None), TimelineBucket.UNSPECIFIED)
        self.assertEqual(bucket_timeline("   "), TimelineBucket.UNSPECIFIED)

    def test_unrecognised_unspecified(self):
        self.assertEqual(bucket_timeline("someday"), TimelineBucket.UNSPECIFIED)


# ===========================================================================
# 2. Concrete Scenarios
# ===========================================================================

class TestScenarios(unittest.TestCase):

    def test_low_score_short_timeline_conservative_income(self):
        self.assertEqual(select_strategy(20, "beginner", "1-2 years").id, C.CONSERVATIVE_INCOME)

    def test_mid_score_advanced_long_dividend_growth(self):
        self.assertEqual(select_strategy(50, "advanced", "10+ years").id, C.DIVIDEND_GROWTH)

    def test_high_score_beginner_balanced_growth(self):
        self.assertEqual(select_strategy(80, "beginner", "10+ years").id, C.BALANCED_GROWTH)

    def test_low_score_long_timeline_conservative_retirement(self):
        self.assertEqual(select_strategy(10, "advanced", "10+ years").id, C.CONSERVATIVE_RETIREMENT)

    def test_moderate_band(self):
        self.assertEqual(_select_id(30, timeline=TimelineBucket.SHORT), C.CONSERVATIVE_GROWTH)
        self.assertEqual(_select_id(30, timeline=TimelineBucket.LONG), C.BALANCED_RETIREMENT)
        self.assertEqual(_select_id(30, timeline=TimelineBucket.UNSPECIFIED), C.BALANCED_RETIREMENT)

    def test_growth_band(self):
        self.assertEqual(
            _select_id(70, ExperienceLevel.ADVANCED, TimelineBucket.LONG), C.TECH_HEAVY_GROWTH
        )
        self.assertEqual(
            _select_id(70, ExperienceLevel.ADVANCED, TimelineBucket.SHORT), C.CRYPTO_ENHANCED_GROWTH
        )
        self.assertEqual(
            _select_id(70, ExperienceLevel.BEGINNER, TimelineBucket.LONG), C.AGGRESSIVE_GROWTH
        )

    def test_aggressive_band(self):
        self.assertEqual(_select_id(90, ExperienceLevel.ADVANCED), C.TECH_HEAVY_GROWTH)
        self.assertEqual(_select_id(90, ExperienceLevel.INTERMEDIATE), C.AGGRESSIVE_GROWTH)

    def test_select_returns_catalog_strategy(self):
        strategy = RiskProfileClassifier.select(
            50, ExperienceLevel.INTERMEDIATE, TimelineBucket.MEDIUM
        )
        self.assertIs(strategy, default_catalog().get(C.BALANCED_GROWTH))


# ===========================================================================
# 3. Totality
# ===========================================================================

class TestTotality(unittest.TestCase):

    def test_every_combination_resolves(self):
        catalog = default_catalog()
        for score in range(0, 101):
            for experience in ExperienceLevel:
                for label in _TIMELINE_LABELS:
                    strategy = select_strategy(score, experience, label, catalog)
                    self.assertIn(strategy.id, catalog)


# ===========================================================================
# 4. Band Boundaries
# ===========================================================================

class TestBandBoundaries(unittest.TestCase):

    def test_bands_split_at_thresholds(self):
        for low, high in ((25, 26), (40, 41), (60, 61), (75, 76)):
            with self.subTest(boundary=low):
                self.assertNotEqual(risk_band(low), risk_band(high))

    def test_upper_bounds_inclusive(self):
        self.assertEqual(risk_band(25), RiskBand.CONSERVATIVE)
        self.assertEqual(risk_band(40), RiskBand.MODERATE)
        self.assertEqual(risk_band(60), RiskBand.BALANCED)
        self.assertEqual(risk_band(75), RiskBand.GROWTH)
        self.assertEqual(risk_band(76), RiskBand.AGGRESSIVE)

    def test_boundary_changes_selection(self):
        self.assertEqual(_select_id(25, timeline=TimelineBucket.SHORT), C.CONSERVATIVE_INCOME)
        self.assertEqual(_select_id(26, timeline=TimelineBucket.SHORT), C.CONSERVATIVE_GROWTH)
        self.assertEqual(_select_id(60), C.BALANCED_GROWTH)
        self.assertEqual(_select_id(61), C.AGGRESSIVE_GROWTH)


# ===========================================================================
# 5. Beginner Moderation
# ===========================================================================

class TestBeginnerModeration(unittest.TestCase):

    def test_beginner_above_75_always_balanced_growth(self):
        for score in range(76, 101):
            for bucket in TimelineBucket:
                sid = RiskProfileClassifier.select_id(score, ExperienceLevel.BEGINNER, bucket)
                self.assertEqual(sid, C.BALANCED_GROWTH)

    def test_beginner_never_gets_tech_or_crypto(self):
        for score in range(0, 101):
            for bucket in TimelineBucket:
                sid = RiskProfileClassifier.select_id(score, ExperienceLevel.BEGINNER, bucket)
                self.assertNotIn(sid, (C.TECH_HEAVY_GROWTH, C.CRYPTO_ENHANCED_GROWTH))


# ===========================================================================
# 6. Boundary Coercion
# ===========================================================================

class TestCoercion(unittest.TestCase):

    def test_score_clamped(self):
        self.assertEqual(clamp_risk_score(-10), 0)
        self.assertEqual(clamp_risk_score(150), 100)
        self.assertEqual(clamp_risk_score(float("nan")), 0)

    def test_out_of_range_scores_do_not_raise(self):
        self.assertEqual(select_strategy(-5, "beginner", "1-2 years").id, C.CONSERVATIVE_INCOME)
        self.assertEqual(select_strategy(500, "advanced", "").id, C.TECH_HEAVY_GROWTH)

    def test_experience_string_normalised(self):
        self.assertEqual(select_strategy(50, " Advanced ", "10+ years").id, C.DIVIDEND_GROWTH)

    def test_unknown_experience_raises(self):
        with self.assertRaises(ValueError):
            select_strategy(50, "expert", "10+ years")


if __name__ == "__main__":
    unittest.main()
