"""
tests/test_allocation_engine.py
-------------------------------
Unit tests for the AllocationEngine implementations.
"""

import unittest

from allocator import constants as C
from allocator.allocation_engine import (
    AllocationEngine,
    ConsumerAllocationEngine,
    InstitutionalAllocationEngine,
)
from allocator.enums import ExperienceLevel, Goal, RiskTolerance
from allocator.errors import MissingAnswerError
from allocator.live_preview import LivePreviewBlender
from allocator.models import InstitutionalAllocation, InstitutionalProfile, Strategy, UserProfile


class TestContract(unittest.TestCase):

    def test_abstract(self):
        with self.assertRaises(TypeError):
            AllocationEngine()

    def test_both_engines_implement_contract(self):
        self.assertIsInstance(ConsumerAllocationEngine(), AllocationEngine)
        self.assertIsInstance(InstitutionalAllocationEngine(), AllocationEngine)


class TestConsumerEngine(unittest.TestCase):

    def setUp(self):
        self.engine = ConsumerAllocationEngine()

    def test_recommend_profile(self):
        profile = UserProfile(20, ExperienceLevel.BEGINNER, "1-2 years", Goal.INCOME)
        strategy = self.engine.recommend(profile)
        self.assertIsInstance(strategy, Strategy)
        self.assertEqual(strategy.id, C.CONSERVATIVE_INCOME)

    def test_recommend_clamps_score(self):
        profile = UserProfile(180, ExperienceLevel.BEGINNER, "10+ years")
        self.assertEqual(self.engine.recommend(profile).id, C.BALANCED_GROWTH)

    def test_answers_high_long(self):
        # high volatility → score 75, advanced; long → "10+ years"
        strategy = self.engine.recommend_from_answers("wealth", "long", "high")
        self.assertEqual(strategy.id, C.TECH_HEAVY_GROWTH)

    def test_answers_medium_long(self):
        strategy = self.engine.recommend_from_answers("retirement", "long", "medium")
        self.assertEqual(strategy.id, C.BALANCED_GROWTH)

    def test_answers_low_short(self):
        strategy = self.engine.recommend_from_answers("preserve", "short", "low")
        self.assertEqual(strategy.id, C.CONSERVATIVE_INCOME)

    def test_answers_low_unsure(self):
        strategy = self.engine.recommend_from_answers("retirement", "unsure", "low")
        self.assertEqual(strategy.id, C.CONSERVATIVE_RETIREMENT)

    def test_experience_given_as_string(self):
        profile = UserProfile(50, "advanced", "10+ years")
        self.assertEqual(self.engine.recommend(profile).id, C.DIVIDEND_GROWTH)

    def test_experience_string_normalised(self):
        profile = UserProfile(70, " Advanced ", "10+ years")
        self.assertEqual(self.engine.recommend(profile).id, C.TECH_HEAVY_GROWTH)

    def test_unknown_experience_string_raises(self):
        with self.assertRaises(ValueError):
            self.engine.recommend(UserProfile(50, "expert", "10+ years"))

    def test_recommend_finalized_matches_answers(self):
        finalized = LivePreviewBlender.finalize_allocation("wealth", "long", "high")
        self.assertEqual(
            self.engine.recommend_finalized(finalized),
            self.engine.recommend_from_answers("wealth", "long", "high"),
        )

    def test_missing_answers_propagate(self):
        with self.assertRaises(MissingAnswerError):
            self.engine.recommend_from_answers("wealth", None, "high")


class TestInstitutionalEngine(unittest.TestCase):

    def test_recommend(self):
        result = InstitutionalAllocationEngine().recommend(
            InstitutionalProfile(risk_tolerance=RiskTolerance.AGGRESSIVE)
        )
        self.assertIsInstance(result, InstitutionalAllocation)
        self.assertEqual(result.allocation["crypto"], 5)


if __name__ == "__main__":
    unittest.main()
