"""
allocator/live_preview.py
-------------------------
Stock / bond split shown while the onboarding questionnaire is in progress,
and the finaliser that turns the three answers into a classifier input.

Design contract:
  - ``blend`` and ``preview`` never raise; partial answers fall back to the
    default 60/40 base split
  - ``finalize_allocation`` requires all three answers and raises
    :class:`MissingAnswerError` otherwise
  - Preview splits stay within [20, 90] stocks and [10, 80] bonds for every
    base split in the table, but are not forced to sum to 100
"""

from __future__ import annotations

import logging
from typing import List, Dict, Optional, Union

from allocator import config
from allocator import constants as C
from allocator.enums import Goal, TimelineAnswer, VolatilityTolerance
from allocator.errors import MissingAnswerError
from allocator.models import FinalizedAllocation, StockBondSplit

logger = logging.getLogger(__name__)


class LivePreviewBlender:
    """
    Combine the volatility answer's base split with the timeline delta.

    ============  ===========  ==========================================
    volatility    base split   timeline delta
    ============  ===========  ==========================================
    low           40 / 60      short: stocks -20 (>= 20), bonds +20 (<= 80)
    medium        60 / 40      long:  stocks +10 (<= 90), bonds -10 (>= 10)
    high          80 / 20      other: unchanged
    (none)        60 / 40
    ============  ===========  ==========================================
    """

    @staticmethod
    def base_split(volatility: Optional[Union[VolatilityTolerance, str]]) -> StockBondSplit:
        """Base split for a volatility answer; 60/40 before it is answered."""
        if volatility is None:
            return StockBondSplit(*C.DEFAULT_BASE_SPLIT)
        return StockBondSplit(*C.VOLATILITY_BASE_SPLIT[VolatilityTolerance(volatility)])

    @staticmethod
    def blend(
        stocks: float,
        bonds: float,
        timeline: Optional[Union[TimelineAnswer, str]],
    ) -> StockBondSplit:
        """Apply the timeline delta to a base split."""
        value = timeline.value if isinstance(timeline, TimelineAnswer) else timeline

        if value == TimelineAnswer.SHORT.value:
            stocks = max(stocks - config.SHORT_TIMELINE_SHIFT, config.STOCKS_FLOOR)
            bonds = min(bonds + config.SHORT_TIMELINE_SHIFT, config.BONDS_CEILING)
        elif value == TimelineAnswer.LONG.value:
            stocks = min(stocks + config.LONG_TIMELINE_SHIFT, config.STOCKS_CEILING)
            bonds = max(bonds - config.LONG_TIMELINE_SHIFT, config.BONDS_FLOOR)

        return StockBondSplit(stocks, bonds)

    @staticmethod
    def preview(
        volatility: Optional[Union[VolatilityTolerance, str]] = None,
        timeline: Optional[Union[TimelineAnswer, str]] = None,
    ) -> StockBondSplit:
        """
        "Your portfolio is taking shape" split for a partially answered
        questionnaire.  The timeline delta only applies once a volatility
        answer exists; before that the default split is shown as-is.
        """
        if volatility is None:
            return LivePreviewBlender.base_split(None)
        base = LivePreviewBlender.base_split(volatility)
        split = LivePreviewBlender.blend(base.stocks, base.bonds, timeline)
        logger.debug("Preview volatility=%s timeline=%s -> %s", volatility, timeline, split)
        return split

    @staticmethod
    def finalize_allocation(
        goal: Optional[Union[Goal, str]],
        timeline: Optional[Union[TimelineAnswer, str]],
        volatility: Optional[Union[VolatilityTolerance, str]],
    ) -> FinalizedAllocation:
        """
        Turn the three onboarding answers into a classifier-ready result.

        Parameters
        ----------
        goal, timeline, volatility:
            Enum members or their string values.

        Returns
        -------
        FinalizedAllocation
            ``risk_score`` 25/50/75 and ``experience_level``
            beginner/intermediate/advanced from the volatility answer, the
            timeline label the classifier understands, the blended split and
            the display expected-return / volatility strings.

        Raises
        ------
        MissingAnswerError
            If any of the three answers is ``None`` or empty; lists all of them.
        ValueError
            If an answer is a string that is not a valid option.
        """
        missing = [
            name for name, answer in
            (("goal", goal), ("timeline", timeline), ("volatility", volatility))
            if answer is None or answer == ""
        ]
        if missing:
            raise MissingAnswerError(missing)

        goal = Goal(goal)
        timeline = TimelineAnswer(timeline)
        volatility = VolatilityTolerance(volatility)

        base = LivePreviewBlender.base_split(volatility)
        split = LivePreviewBlender.blend(base.stocks, base.bonds, timeline)
        display = C.VOLATILITY_DISPLAY[volatility]

        result = FinalizedAllocation(
            risk_score=C.RISK_SCORE_BY_VOLATILITY[volatility],
            experience_level=C.EXPERIENCE_BY_VOLATILITY[volatility],
            timeline=C.TIMELINE_ANSWER_LABELS[timeline],
            goal=goal,
            allocation=split,
            expected_return=display["expected_return"],
            volatility_level=display["volatility"],
        )
        logger.debug(
            "Finalized goal=%s timeline=%s volatility=%s -> score=%d split=%s",
            goal.value, timeline.value, volatility.value, result.risk_score, split,
        )
        return result

    @staticmethod
    def alternatives(risk_score: float) -> List[Dict]:
        """
        More conservative / more aggressive splits offered beside a
        recommendation.

        The current stock share is ``clamp(30 + 0.6 * score, 20, 90)``.  A
        conservative alternative (20 points fewer stocks, at least 30) is
        offered when the score is above 25; an aggressive one (20 points
        more, at most 90) when it is below 75.  Bonds are the complement.
        """
        current = min(
            config.STOCKS_CEILING,
            max(config.STOCKS_FLOOR,
                config.ALTERNATIVE_BASE_STOCKS + risk_score * config.ALTERNATIVE_STOCKS_PER_POINT),
        )

        out: List[Dict] = []
        if risk_score > config.BAND_CONSERVATIVE_MAX:
            stocks = max(current - config.ALTERNATIVE_SHIFT, config.ALTERNATIVE_STOCKS_FLOOR)
            out.append({
                "direction": "conservative",
                "name":      "More Conservative Approach",
                "advantage": "Smaller losses during market downturns",
                "tradeoff":  "Lower long-term growth potential",
                "split":     StockBondSplit(stocks, config.TARGET_TOTAL - stocks),
            })
        if risk_score < config.BAND_GROWTH_MAX:
            stocks = min(current + config.ALTERNATIVE_SHIFT, config.STOCKS_CEILING)
            out.append({
                "direction": "aggressive",
                "name":      "More Aggressive Approach",
                "advantage": "Higher long-term growth expectations",
                "tradeoff":  "Larger fluctuations in portfolio value",
                "split":     StockBondSplit(stocks, config.TARGET_TOTAL - stocks),
            })
        return out
