from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Tuple, Dict

from allocator.enums import (
    ExperienceLevel,
    Goal,
    LiquidityNeeds,
    RiskTolerance,
    StrategyKind,
)


@dataclass(frozen=True)
class AssetHolding:
    """One line of a catalog strategy. ``percentage`` is in [0, 100]."""
    symbol: str
    display_name: str
    percentage: float
    asset_class: str
    color_token: str
    rationale: str


@dataclass(frozen=True)
class Strategy:
    """
    A named allocation template from the catalog.

    Holdings are authored so that they sum to 100 within
    ``config.CATALOG_SUM_TOLERANCE``; the catalog loader checks this.
    """
    id: str
    name: str
    description: str
    kind: StrategyKind
    holdings: Tuple[AssetHolding, ...]

    def total(self) -> float:
        return sum(h.percentage for h in self.holdings)

    def symbols(self) -> Tuple[str, ...]:
        return tuple(h.symbol for h in self.holdings)


@dataclass
class UserProfile:
    """
    Transient questionnaire outcome fed to the consumer engine.

    ``timeline_label`` is free text from a fixed option set; it is turned
    into a :class:`TimelineBucket` once, at the engine boundary.
    """
    risk_score: float
    experience_level: ExperienceLevel
    timeline_label: str = ""
    goal: Optional[Goal] = None


@dataclass
class AllocationEntry:
    """
    One editable row of an allocation vector.

    ``asset_class`` and ``rationale`` ride along so the vector can be
    written back in the persisted record shape.
    """
    id: str
    symbol: str
    name: str
    percentage: float
    color_token: str = ""
    asset_class: str = ""
    rationale: str = ""


class StockBondSplit(NamedTuple):
    """Stock / bond percentages for the live preview."""
    stocks: float
    bonds: float


@dataclass(frozen=True)
class FinalizedAllocation:
    """Result of a fully answered onboarding questionnaire."""
    risk_score: int
    experience_level: ExperienceLevel
    timeline: str
    goal: Goal
    allocation: StockBondSplit
    expected_return: str
    volatility_level: str

    def as_dict(self) -> Dict:
        return {
            "risk_score":       self.risk_score,
            "experience_level": self.experience_level.value,
            "timeline":         self.timeline,
            "goal":             self.goal.value,
            "allocation":       {"stocks": self.allocation.stocks,
                                 "bonds":  self.allocation.bonds},
            "expected_return":  self.expected_return,
            "volatility_level": self.volatility_level,
        }


@dataclass
class InstitutionalProfile:
    """Inputs of the institutional-tier generator."""
    risk_tolerance: Optional[RiskTolerance] = None
    liquidity_needs: Optional[LiquidityNeeds] = None
    investment_horizon: str = ""
    capital_size: Optional[float] = None   # millions


@dataclass
class InstitutionalAllocation:
    """Generated institutional allocation with its display metadata."""
    allocation: Dict[str, float] = field(default_factory=dict)
    expected_return: str = ""
    volatility: str = ""
    rationale: str = ""

    def total(self) -> float:
        return sum(self.allocation.values())
