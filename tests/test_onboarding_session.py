"""
tests/test_onboarding_session.py
--------------------------------
Unit tests for OnboardingSession.
"""

import unittest

from allocator.enums import Goal, TimelineAnswer, VolatilityTolerance
from allocator.errors import MissingAnswerError
from allocator.onboarding_session import QUESTIONS, OnboardingSession


class TestAnswers(unittest.TestCase):

    def setUp(self):
        self.session = OnboardingSession()

    def test_question_order(self):
        self.assertEqual([q[0] for q in QUESTIONS], ["goal", "timeline", "volatility"])

    def test_answer_coerces_strings(self):
        self.session.answer("goal", " Retirement ")
        self.assertEqual(self.session.goal, Goal.RETIREMENT)

    def test_answer_accepts_enums(self):
        self.session.answer("volatility", VolatilityTolerance.HIGH)
        self.assertEqual(self.session.volatility, VolatilityTolerance.HIGH)

    def test_invalid_value_raises(self):
        with self.assertRaises(ValueError):
            self.session.answer("timeline", "never")
        self.assertIsNone(self.session.timeline)

    def test_unknown_question_raises(self):
        with self.assertRaises(ValueError):
            self.session.answer("age", "30")

    def test_answered_count_and_completeness(self):
        self.assertEqual(self.session.answered_count, 0)
        self.session.answer("timeline", "long")
        self.session.answer("goal", "wealth")
        self.assertEqual(self.session.answered_count, 2)
        self.assertFalse(self.session.is_complete())
        self.session.answer("volatility", "medium")
        self.assertTrue(self.session.is_complete())

    def test_answer_can_change(self):
        self.session.answer("timeline", "short")
        self.session.answer("timeline", "long")
        self.assertEqual(self.session.timeline, TimelineAnswer.LONG)
        self.assertEqual(self.session.answered_count, 1)


class TestPreviewAndFinalize(unittest.TestCase):

    def test_preview_progresses(self):
        session = OnboardingSession()
        self.assertEqual(session.preview(), (60, 40))
        session.answer("volatility", "low")
        self.assertEqual(session.preview(), (40, 60))
        session.answer("timeline", "short")
        self.assertEqual(session.preview(), (20, 80))

    def test_finalize_incomplete_raises(self):
        session = OnboardingSession(goal=Goal.INCOME)
        with self.assertRaises(MissingAnswerError) as ctx:
            session.finalize()
        self.assertEqual(ctx.exception.missing, ("timeline", "volatility"))

    def test_finalize_complete(self):
        session = OnboardingSession()
        for question_id, value in (("goal", "income"), ("timeline", "medium"),
                                   ("volatility", "high")):
            session.answer(question_id, value)
        result = session.finalize()
        self.assertEqual(result.risk_score, 75)
        self.assertEqual(result.timeline, "3-5 years")
        self.assertEqual(result.allocation, (80, 20))

    def test_reset(self):
        session = OnboardingSession(Goal.WEALTH, TimelineAnswer.LONG, VolatilityTolerance.LOW)
        session.reset()
        self.assertEqual(session.answered_count, 0)


if __name__ == "__main__":
    unittest.main()
