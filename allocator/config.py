"""
allocator/config.py
-------------------
Tunable numeric parameters for the allocation engines.

Keeping these separate from allocator/constants.py (which holds enum-keyed
lookup tables) gives a clean boundary: this file owns the thresholds,
floors and tolerances, and nothing here depends on the enums.
"""

import os

# ---------------------------------------------------------------------------
# Risk-score bands (inclusive upper bounds)
# ---------------------------------------------------------------------------
# riskScore <= 25        → conservative
# 25 < riskScore <= 40   → moderate
# 40 < riskScore <= 60   → balanced
# 60 < riskScore <= 75   → growth
# riskScore > 75         → aggressive

BAND_CONSERVATIVE_MAX: float = 25.0
BAND_MODERATE_MAX: float = 40.0
BAND_BALANCED_MAX: float = 60.0
BAND_GROWTH_MAX: float = 75.0

RISK_SCORE_MIN: float = 0.0
RISK_SCORE_MAX: float = 100.0

# ---------------------------------------------------------------------------
# Percentages and tolerances
# ---------------------------------------------------------------------------

PERCENT_MIN: float = 0.0
PERCENT_MAX: float = 100.0
TARGET_TOTAL: float = 100.0

# Editor badge: a vector is "balanced" when |total - 100| < this.
BALANCE_TOLERANCE: float = 0.01

# Catalog authoring contract: |sum(holdings) - 100| < this.
CATALOG_SUM_TOLERANCE: float = 0.5

# Equal rebalance rounds every share to this many decimals.
REBALANCE_DECIMALS: int = 2

# ---------------------------------------------------------------------------
# Live preview (stock / bond split)
# ---------------------------------------------------------------------------
# A short horizon moves 20 points from stocks into bonds; a long horizon
# moves 10 points the other way.  Floors and ceilings keep the preview
# inside [20, 90] stocks and [10, 80] bonds for every base split.

SHORT_TIMELINE_SHIFT: float = 20.0
LONG_TIMELINE_SHIFT: float = 10.0

STOCKS_FLOOR: float = 20.0
STOCKS_CEILING: float = 90.0
BONDS_FLOOR: float = 10.0
BONDS_CEILING: float = 80.0

# Alternative portfolios offered next to a recommendation.
ALTERNATIVE_SHIFT: float = 20.0
ALTERNATIVE_STOCKS_FLOOR: float = 30.0
ALTERNATIVE_BASE_STOCKS: float = 30.0
ALTERNATIVE_STOCKS_PER_POINT: float = 0.6

# ---------------------------------------------------------------------------
# Projected outcomes (display only, linear in the risk score)
# ---------------------------------------------------------------------------

EXPECTED_RETURN_BASE: float = 6.0      # % p.a. at riskScore 0
EXPECTED_RETURN_SPAN: float = 6.0      # added at riskScore 100
VOLATILITY_BASE: float = 5.0
VOLATILITY_SPAN: float = 15.0
DIVERSIFICATION_FLOOR: float = 60.0
DIVERSIFICATION_PENALTY: float = 0.4   # per risk point

# Explanation risk levels (inclusive upper bounds).
RISK_LEVEL_CONSERVATIVE_MAX: float = 30.0
RISK_LEVEL_MODERATE_MAX: float = 60.0

# Illustrative market scenarios, in multiples of the projected volatility.
BULL_VOLATILITY_MULTIPLIER: float = 1.5
BEAR_VOLATILITY_MULTIPLIER: float = 1.2

# ---------------------------------------------------------------------------
# Cost estimate
# ---------------------------------------------------------------------------

DEFAULT_EXPENSE_RATIO: float = 0.10   # % p.a. for funds without a known ratio
EXPENSE_RATIO_DECIMALS: int = 2

# ---------------------------------------------------------------------------
# Institutional tier
# ---------------------------------------------------------------------------

LIQUIDITY_CASH_SHIFT: float = 15.0

# ---------------------------------------------------------------------------
# Rebalancing alerts
# ---------------------------------------------------------------------------

DRIFT_THRESHOLD: float = 5.0   # percentage points

# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

CATALOG_DIR_ENV: str = "ALLOCATOR_CATALOG_DIR"


def catalog_dir_override():
    """Return the catalog directory from the environment, or None."""
    value = os.getenv(CATALOG_DIR_ENV, "").strip()
    return value or None
