"""
allocator/risk_classifier.py
----------------------------
Deterministic mapping from (risk score, experience, timeline) to one
catalog strategy.

Design contract:
  - Free-text timeline labels are bucketed once, at the boundary
    (:func:`bucket_timeline`); the classifier itself only sees
    :class:`TimelineBucket`.
  - Total: every input combination resolves to exactly one strategy id.
  - No clamping inside the classifier; :func:`select_strategy` clamps the
    score before classifying.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Union

from allocator import config
from allocator import constants as C
from allocator.enums import ExperienceLevel, RiskBand, TimelineBucket
from allocator.models import Strategy
from allocator.strategy_catalog import StrategyCatalog, default_catalog

logger = logging.getLogger(__name__)


def bucket_timeline(label: Optional[str]) -> TimelineBucket:
    """
    Bucket a free-text time-horizon label.

    Matching is a case-insensitive substring test, checked short → medium →
    long, so ``"3-5 years"`` is short and ``"6-10 years"`` is medium.
    Empty or unrecognised labels are ``UNSPECIFIED``.
    """
    normalized = (label or "").strip().lower()
    if not normalized:
        return TimelineBucket.UNSPECIFIED

    for bucket, keywords in C.TIMELINE_KEYWORDS.items():
        if any(k in normalized for k in keywords):
            return bucket
    return TimelineBucket.UNSPECIFIED


def risk_band(risk_score: float) -> RiskBand:
    """Place *risk_score* in its band; upper bounds are inclusive."""
    if risk_score <= config.BAND_CONSERVATIVE_MAX:
        return RiskBand.CONSERVATIVE
    if risk_score <= config.BAND_MODERATE_MAX:
        return RiskBand.MODERATE
    if risk_score <= config.BAND_BALANCED_MAX:
        return RiskBand.BALANCED
    if risk_score <= config.BAND_GROWTH_MAX:
        return RiskBand.GROWTH
    return RiskBand.AGGRESSIVE


def clamp_risk_score(risk_score: float) -> float:
    """Clamp into [0, 100]; NaN is treated as 0."""
    if math.isnan(risk_score):
        return config.RISK_SCORE_MIN
    return max(config.RISK_SCORE_MIN, min(config.RISK_SCORE_MAX, float(risk_score)))


class RiskProfileClassifier:
    """
    Band table::

        band           short / other timeline    experience overrides
        ------------   -----------------------   -------------------------------
        <= 25          conservative-income /     -
                       conservative-retirement
        26-40          conservative-growth /     -
                       balanced-retirement
        41-60          balanced-growth           advanced + long → dividend-growth
        61-75          aggressive-growth         advanced → tech-heavy-growth (long)
                                                 or crypto-enhanced-growth
        > 75           by experience only        advanced → tech-heavy-growth,
                                                 intermediate → aggressive-growth,
                                                 beginner → balanced-growth

    A beginner is never routed to the most aggressive templates, whatever
    the raw score.
    """

    @staticmethod
    def select_id(
        risk_score: float,
        experience_level: ExperienceLevel,
        timeline: TimelineBucket,
    ) -> str:
        """Return the catalog id for this profile."""
        band = risk_band(risk_score)
        advanced = experience_level is ExperienceLevel.ADVANCED
        is_short = timeline is TimelineBucket.SHORT
        is_long = timeline is TimelineBucket.LONG

        if band is RiskBand.CONSERVATIVE:
            return C.CONSERVATIVE_INCOME if is_short else C.CONSERVATIVE_RETIREMENT

        if band is RiskBand.MODERATE:
            return C.CONSERVATIVE_GROWTH if is_short else C.BALANCED_RETIREMENT

        if band is RiskBand.BALANCED:
            return C.DIVIDEND_GROWTH if advanced and is_long else C.BALANCED_GROWTH

        if band is RiskBand.GROWTH:
            if advanced:
                return C.TECH_HEAVY_GROWTH if is_long else C.CRYPTO_ENHANCED_GROWTH
            return C.AGGRESSIVE_GROWTH

        if band is RiskBand.AGGRESSIVE:
            if advanced:
                return C.TECH_HEAVY_GROWTH
            if experience_level is ExperienceLevel.INTERMEDIATE:
                return C.AGGRESSIVE_GROWTH
            # Beginner moderation: balanced-growth rather than a dedicated
            # "moderated aggressive" template (see DESIGN.md).
            return C.BALANCED_GROWTH

        raise AssertionError(f"Unhandled risk band: {band!r}")

    @staticmethod
    def select(
        risk_score: float,
        experience_level: ExperienceLevel,
        timeline: TimelineBucket,
        catalog: Optional[StrategyCatalog] = None,
    ) -> Strategy:
        """Resolve :meth:`select_id` through *catalog* (default catalog if None)."""
        if catalog is None:
            catalog = default_catalog()
        strategy_id = RiskProfileClassifier.select_id(risk_score, experience_level, timeline)
        logger.debug(
            "Selected %s for score=%s experience=%s timeline=%s",
            strategy_id, risk_score, experience_level.value, timeline.value,
        )
        return catalog.get(strategy_id)


def select_strategy(
    risk_score: float,
    experience_level: Union[ExperienceLevel, str],
    timeline_label: Optional[str],
    catalog: Optional[StrategyCatalog] = None,
) -> Strategy:
    """
    UI-boundary entry point.

    Clamps *risk_score* into [0, 100], coerces *experience_level* from its
    string value if needed and buckets *timeline_label*, then classifies.

    Raises
    ------
    ValueError
        If *experience_level* is a string that names no experience level.
    """
    if isinstance(experience_level, str):
        experience_level = experience_level.strip().lower()
    experience = ExperienceLevel(experience_level)
    return RiskProfileClassifier.select(
        clamp_risk_score(risk_score),
        experience,
        bucket_timeline(timeline_label),
        catalog,
    )
