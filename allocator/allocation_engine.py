"""
allocator/allocation_engine.py
------------------------------
Common ``recommend(profile)`` seam over the consumer and institutional
allocation paths.

Design contract:
  - The two engines share an interface, not data: the consumer engine
    resolves catalog strategies, the institutional engine generates
    asset-class percentages
  - Consumer profiles go through :func:`select_strategy`, so scores are
    clamped, experience strings coerced and timeline labels bucketed here
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Union

from allocator.enums import Goal, TimelineAnswer, VolatilityTolerance
from allocator.institutional_engine import InstitutionalAllocationGenerator
from allocator.live_preview import LivePreviewBlender
from allocator.models import (
    FinalizedAllocation,
    InstitutionalAllocation,
    InstitutionalProfile,
    Strategy,
    UserProfile,
)
from allocator.risk_classifier import select_strategy
from allocator.strategy_catalog import StrategyCatalog, default_catalog


class AllocationEngine(ABC):
    """Produce a recommendation for one kind of investor profile."""

    @abstractmethod
    def recommend(self, profile):
        """Return the recommended allocation for *profile*."""


class ConsumerAllocationEngine(AllocationEngine):
    """Selects a catalog strategy for a retail investor."""

    def __init__(self, catalog: Optional[StrategyCatalog] = None):
        self.catalog = catalog if catalog is not None else default_catalog()

    def recommend(self, profile: UserProfile) -> Strategy:
        """
        Raises
        ------
        ValueError
            If ``profile.experience_level`` is a string naming no level.
        """
        return select_strategy(
            profile.risk_score,
            profile.experience_level,
            profile.timeline_label,
            self.catalog,
        )

    def recommend_finalized(self, finalized: FinalizedAllocation) -> Strategy:
        """Select a strategy for an already finalized questionnaire."""
        return self.recommend(UserProfile(
            risk_score=finalized.risk_score,
            experience_level=finalized.experience_level,
            timeline_label=finalized.timeline,
            goal=finalized.goal,
        ))

    def recommend_from_answers(
        self,
        goal: Optional[Union[Goal, str]],
        timeline: Optional[Union[TimelineAnswer, str]],
        volatility: Optional[Union[VolatilityTolerance, str]],
    ) -> Strategy:
        """
        Finalize the three onboarding answers and select a strategy.

        Raises
        ------
        MissingAnswerError
            If any answer is missing.
        """
        finalized = LivePreviewBlender.finalize_allocation(goal, timeline, volatility)
        return self.recommend_finalized(finalized)


class InstitutionalAllocationEngine(AllocationEngine):
    """Generates an asset-class allocation for an institutional client."""

    def recommend(self, profile: InstitutionalProfile) -> InstitutionalAllocation:
        return InstitutionalAllocationGenerator.recommend(profile)
