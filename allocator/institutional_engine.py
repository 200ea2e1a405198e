"""
allocator/institutional_engine.py
---------------------------------
Asset-class allocation for the institutional tier.

Design contract:
  - Keyed only by risk tolerance and liquidity needs; shares nothing with
    the consumer strategy catalog
  - High liquidity moves 15 points from equities into cash, flooring
    equities at 0; the other classes are untouched, so a conservative
    profile ends up above 100 (see DESIGN.md)
  - Fully stateless (all methods are @staticmethod)
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Union

from allocator import config
from allocator.enums import LiquidityNeeds, RiskTolerance
from allocator.errors import MissingAnswerError
from allocator.models import InstitutionalAllocation, InstitutionalProfile

logger = logging.getLogger(__name__)


INSTITUTIONAL_ALLOCATIONS: Dict[RiskTolerance, Dict[str, float]] = {
    RiskTolerance.AGGRESSIVE: {
        "equities":    60.0,
        "bonds":       20.0,
        "cash":         5.0,
        "crypto":       5.0,
        "commodities":  5.0,
        "etfs":         5.0,
    },
    RiskTolerance.MODERATE: {
        "equities":    40.0,
        "bonds":       35.0,
        "cash":        10.0,
        "commodities":  5.0,
        "etfs":        10.0,
    },
    RiskTolerance.CONSERVATIVE: {
        "equities":    10.0,
        "bonds":       50.0,
        "cash":        30.0,
        "commodities": 10.0,
    },
}

_EXPECTED_RETURN: Dict[RiskTolerance, str] = {
    RiskTolerance.AGGRESSIVE:   "9-14%",
    RiskTolerance.MODERATE:     "6-10%",
    RiskTolerance.CONSERVATIVE: "4-7%",
}

_VOLATILITY_LABEL: Dict[RiskTolerance, str] = {
    RiskTolerance.AGGRESSIVE:   "High",
    RiskTolerance.MODERATE:     "Moderate",
    RiskTolerance.CONSERVATIVE: "Low",
}


class InstitutionalAllocationGenerator:
    """
    Entry point::

        allocation = InstitutionalAllocationGenerator.recommend(
            InstitutionalProfile(RiskTolerance.MODERATE, LiquidityNeeds.HIGH,
                                 "5-10 years", 250)
        )
    """

    @staticmethod
    def generate(
        risk_tolerance: Optional[Union[RiskTolerance, str]],
        liquidity_needs: Optional[Union[LiquidityNeeds, str]] = None,
    ) -> Dict[str, float]:
        """
        Asset-class percentages for *risk_tolerance*, adjusted for liquidity.

        Raises
        ------
        MissingAnswerError
            If *risk_tolerance* is not given.
        ValueError
            If either argument is a string naming no option.
        """
        if risk_tolerance is None or risk_tolerance == "":
            raise MissingAnswerError(["risk_tolerance"])

        tolerance = RiskTolerance(risk_tolerance)
        allocation = dict(INSTITUTIONAL_ALLOCATIONS[tolerance])

        if liquidity_needs is not None and LiquidityNeeds(liquidity_needs) is LiquidityNeeds.HIGH:
            allocation["cash"] = allocation.get("cash", 0.0) + config.LIQUIDITY_CASH_SHIFT
            allocation["equities"] = max(
                0.0, allocation.get("equities", 0.0) - config.LIQUIDITY_CASH_SHIFT
            )

        logger.debug(
            "Institutional allocation tolerance=%s liquidity=%s -> %s",
            tolerance.value, liquidity_needs, allocation,
        )
        return allocation

    @staticmethod
    def expected_return(risk_tolerance: Union[RiskTolerance, str]) -> str:
        return _EXPECTED_RETURN[RiskTolerance(risk_tolerance)]

    @staticmethod
    def volatility_label(risk_tolerance: Union[RiskTolerance, str]) -> str:
        return _VOLATILITY_LABEL[RiskTolerance(risk_tolerance)]

    @staticmethod
    def rationale(profile: InstitutionalProfile) -> str:
        """One-paragraph explanation shown beside the generated allocation."""
        horizon = profile.investment_horizon or "a flexible horizon"
        liquidity = (
            LiquidityNeeds(profile.liquidity_needs).value if profile.liquidity_needs else "unspecified"
        )
        tolerance = (
            RiskTolerance(profile.risk_tolerance).value if profile.risk_tolerance else "unspecified"
        )
        capital = profile.capital_size if profile.capital_size is not None else 0
        return (
            f"This institutional portfolio is optimized for {horizon} with "
            f"{liquidity} liquidity requirements and {tolerance} risk tolerance. "
            f"The ${capital:g}M capital allocation balances growth potential with "
            f"risk management, following time-tested institutional frameworks and "
            f"modern portfolio theory principles."
        )

    @staticmethod
    def recommend(profile: InstitutionalProfile) -> InstitutionalAllocation:
        """
        Generate the allocation and its display metadata for *profile*.

        Raises
        ------
        MissingAnswerError
            If ``profile.risk_tolerance`` is not set.
        """
        allocation = InstitutionalAllocationGenerator.generate(
            profile.risk_tolerance, profile.liquidity_needs
        )
        tolerance = RiskTolerance(profile.risk_tolerance)
        return InstitutionalAllocation(
            allocation=allocation,
            expected_return=InstitutionalAllocationGenerator.expected_return(tolerance),
            volatility=InstitutionalAllocationGenerator.volatility_label(tolerance),
            rationale=InstitutionalAllocationGenerator.rationale(profile),
        )
