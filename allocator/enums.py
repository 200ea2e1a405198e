from enum import Enum


class ExperienceLevel(Enum):
    """Self-reported (or derived) investing experience."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Goal(Enum):
    """Primary investment goal chosen in the questionnaire."""
    RETIREMENT = "retirement"
    WEALTH = "wealth"
    INCOME = "income"
    PRESERVE = "preserve"


class TimelineBucket(Enum):
    """Closed time-horizon category derived once from a free-text label."""
    SHORT = "short"              # up to ~5 years
    MEDIUM = "medium"            # 5-10 years
    LONG = "long"                # 10+ years
    UNSPECIFIED = "unspecified"


class TimelineAnswer(Enum):
    """Discrete answer to the onboarding "when will you need this money?" question."""
    SHORT = "short"    # less than 3 years
    MEDIUM = "medium"  # 3-10 years
    LONG = "long"      # 10+ years
    UNSURE = "unsure"


class VolatilityTolerance(Enum):
    """Discrete answer to the onboarding "market ups and downs" question."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RiskBand(Enum):
    """Classifier bands over the 0-100 risk score (inclusive upper bounds)."""
    CONSERVATIVE = "conservative"        # <= 25
    MODERATE = "moderate"                # 26-40
    BALANCED = "balanced"                # 41-60
    GROWTH = "growth"                    # 61-75
    AGGRESSIVE = "aggressive"            # > 75


class StrategyKind(Enum):
    """Family a catalog strategy belongs to."""
    CONSERVATIVE = "conservative"
    BALANCED = "balanced"
    AGGRESSIVE = "aggressive"
    THEMATIC = "thematic"


class RiskTolerance(Enum):
    """Institutional-tier risk tolerance."""
    AGGRESSIVE = "aggressive"
    MODERATE = "moderate"
    CONSERVATIVE = "conservative"


class LiquidityNeeds(Enum):
    """Institutional-tier liquidity requirement."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DriftAction(Enum):
    """Corrective action for a holding that drifted from its target."""
    REDUCE = "REDUCE"
    INCREASE = "INCREASE"
