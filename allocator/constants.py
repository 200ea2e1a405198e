"""
allocator/constants.py
----------------------
Enum-keyed lookup tables shared across the engines.

Placing these here keeps the classifier, the live preview and the
explanation layer aligned on a single source of truth without creating
circular imports.
"""

from __future__ import annotations

from allocator.enums import (
    ExperienceLevel,
    Goal,
    TimelineAnswer,
    TimelineBucket,
    VolatilityTolerance,
)


# ---------------------------------------------------------------------------
# Strategy ids (must match allocator/data/strategies.csv)
# ---------------------------------------------------------------------------

CONSERVATIVE_INCOME = "conservative-income"
CONSERVATIVE_RETIREMENT = "conservative-retirement"
CONSERVATIVE_GROWTH = "conservative-growth"
BALANCED_INCOME = "balanced-income"
BALANCED_RETIREMENT = "balanced-retirement"
BALANCED_GROWTH = "balanced-growth"
AGGRESSIVE_RETIREMENT = "aggressive-retirement"
AGGRESSIVE_GROWTH = "aggressive-growth"
CRYPTO_ENHANCED_GROWTH = "crypto-enhanced-growth"
ESG_BALANCED = "esg-balanced"
TECH_HEAVY_GROWTH = "tech-heavy-growth"
DIVIDEND_GROWTH = "dividend-growth"


# ---------------------------------------------------------------------------
# Timeline label → bucket
# ---------------------------------------------------------------------------
# Checked in insertion order against the lower-cased label; first match wins.

TIMELINE_KEYWORDS: dict[TimelineBucket, tuple[str, ...]] = {
    TimelineBucket.SHORT:  ("1-2", "less than", "3-5"),
    TimelineBucket.MEDIUM: ("6-10", "5-10"),
    TimelineBucket.LONG:   ("10+", "20+"),
}

# Onboarding answer → the label the classifier and summary pages expect.
TIMELINE_ANSWER_LABELS: dict[TimelineAnswer, str] = {
    TimelineAnswer.SHORT:  "1-2 years",
    TimelineAnswer.MEDIUM: "3-5 years",
    TimelineAnswer.LONG:   "10+ years",
    TimelineAnswer.UNSURE: "6-10 years",
}

# Human phrasing of each bucket for explanations.
TIMELINE_CONTEXT: dict[TimelineBucket, str] = {
    TimelineBucket.SHORT:       "less than 5 years",
    TimelineBucket.MEDIUM:      "6-10 years",
    TimelineBucket.LONG:        "10+ years",
    TimelineBucket.UNSPECIFIED: "flexible",
}


# ---------------------------------------------------------------------------
# Volatility answer → base split, risk score, experience, display values
# ---------------------------------------------------------------------------

VOLATILITY_BASE_SPLIT: dict[VolatilityTolerance, tuple[float, float]] = {
    VolatilityTolerance.LOW:    (40.0, 60.0),
    VolatilityTolerance.MEDIUM: (60.0, 40.0),
    VolatilityTolerance.HIGH:   (80.0, 20.0),
}

# Split shown before the volatility question has been answered.
DEFAULT_BASE_SPLIT: tuple[float, float] = (60.0, 40.0)

RISK_SCORE_BY_VOLATILITY: dict[VolatilityTolerance, int] = {
    VolatilityTolerance.LOW:    25,
    VolatilityTolerance.MEDIUM: 50,
    VolatilityTolerance.HIGH:   75,
}

EXPERIENCE_BY_VOLATILITY: dict[VolatilityTolerance, ExperienceLevel] = {
    VolatilityTolerance.LOW:    ExperienceLevel.BEGINNER,
    VolatilityTolerance.MEDIUM: ExperienceLevel.INTERMEDIATE,
    VolatilityTolerance.HIGH:   ExperienceLevel.ADVANCED,
}

VOLATILITY_DISPLAY: dict[VolatilityTolerance, dict[str, str]] = {
    VolatilityTolerance.LOW: {
        "expected_return": "4-6%",
        "volatility":      "Low",
    },
    VolatilityTolerance.MEDIUM: {
        "expected_return": "6-8%",
        "volatility":      "Moderate",
    },
    VolatilityTolerance.HIGH: {
        "expected_return": "8-10%",
        "volatility":      "High",
    },
}


# ---------------------------------------------------------------------------
# Goal phrasing for explanations
# ---------------------------------------------------------------------------

GOAL_CONTEXT: dict[Goal, str] = {
    Goal.RETIREMENT: "building long-term retirement savings",
    Goal.WEALTH:     "growing wealth over time",
    Goal.INCOME:     "generating passive income",
    Goal.PRESERVE:   "preserving capital with modest growth",
}

# Strategy-name keyword → goal it implies, checked in order; first match wins.
GOAL_NAME_KEYWORDS: tuple[tuple[tuple[str, ...], Goal], ...] = (
    (("retirement",),          Goal.RETIREMENT),
    (("income", "dividend"),   Goal.INCOME),
    (("growth",),              Goal.WEALTH),
    (("conservative",),        Goal.PRESERVE),
)

DEFAULT_GOAL_CONTEXT: str = "achieving balanced investment returns"


# ---------------------------------------------------------------------------
# Timeline label → horizon phrase for explanations
# ---------------------------------------------------------------------------
# Finer than the classifier buckets; checked in order against the
# lower-cased label.  Unmatched labels fall back to TIMELINE_CONTEXT.

TIMELINE_PHRASES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("1-2", "less than"), "less than 3 years"),
    (("3-5",),             "3-5 years"),
    (("5-10",),            "5-10 years"),
    (("6-10",),            "6-10 years"),
    (("20+",),             "20+ years"),
    (("10+",),             "10+ years"),
)


# ---------------------------------------------------------------------------
# Fund expense ratios (% p.a.) for cost estimates
# ---------------------------------------------------------------------------
# Symbols not listed here are costed at config.DEFAULT_EXPENSE_RATIO.

EXPENSE_RATIOS: dict[str, float] = {
    "VTI":  0.03,
    "VXUS": 0.07,
    "BND":  0.03,
    "VNQ":  0.12,
    "VIG":  0.06,
    "VYM":  0.06,
    "SCHD": 0.06,
    "VUG":  0.04,
    "VGT":  0.10,
    "QQQ":  0.20,
    "GLD":  0.40,
    "SHY":  0.15,
    "BITO": 0.95,
    "ESGV": 0.09,
    "VSGX": 0.12,
    "VCEB": 0.12,
    "ICLN": 0.40,
}
