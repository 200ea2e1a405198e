"""
allocator/allocation_normalizer.py
----------------------------------
Pure arithmetic over allocation vectors (lists of ``AllocationEntry``).

Design contract:
  - Percentages are clamped into [0, 100], never rejected
  - Editing one entry never adjusts its siblings; imbalance is reported via
    :meth:`AllocationNormalizer.is_balanced`, not silently corrected
  - The only operation that rewrites every entry is ``rebalance_equally``
  - Inputs are never mutated; every method returns new entries
  - Fully deterministic and stateless (all methods are @staticmethod)
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Dict, List, Mapping, Sequence

import numpy as np

from allocator import config
from allocator.enums import DriftAction
from allocator.errors import EntryNotFoundError
from allocator.models import AllocationEntry, Strategy


class AllocationNormalizer:
    """
    Editor-side routines for a user-adjustable allocation vector.

    Typical flow::

        entries = AllocationNormalizer.from_strategy(strategy)
        entries = AllocationNormalizer.update_percentage(entries, "2", 35)
        total   = AllocationNormalizer.compute_total(entries)
        if not AllocationNormalizer.is_balanced(total):
            ...   # show the "Total: 105.0% (Target: 100%)" badge
    """

    # ------------------------------------------------------------------ #
    #  Scalar helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def clamp_percentage(value: float) -> float:
        """Clamp *value* into [0, 100]. NaN (e.g. a half-typed field) becomes 0."""
        value = float(value)
        if math.isnan(value):
            return config.PERCENT_MIN
        return float(np.clip(value, config.PERCENT_MIN, config.PERCENT_MAX))

    @staticmethod
    def compute_total(entries: Sequence) -> float:
        """Sum of ``percentage`` over *entries* (entries or holdings)."""
        if not entries:
            return 0.0
        return float(np.sum([e.percentage for e in entries], dtype=float))

    @staticmethod
    def is_balanced(total: float) -> bool:
        """True when *total* is within 0.01 of 100."""
        return abs(total - config.TARGET_TOTAL) < config.BALANCE_TOLERANCE

    # ------------------------------------------------------------------ #
    #  Vector construction
    # ------------------------------------------------------------------ #

    @staticmethod
    def from_strategy(strategy: Strategy) -> List[AllocationEntry]:
        """Copy a catalog strategy into a fresh, editable vector (ids "1".."n")."""
        return [
            AllocationEntry(
                id=str(i),
                symbol=h.symbol,
                name=h.display_name,
                percentage=h.percentage,
                color_token=h.color_token,
                asset_class=h.asset_class,
                rationale=h.rationale,
            )
            for i, h in enumerate(strategy.holdings, start=1)
        ]

    # ------------------------------------------------------------------ #
    #  Edits
    # ------------------------------------------------------------------ #

    @staticmethod
    def rebalance_equally(entries: Sequence[AllocationEntry]) -> List[AllocationEntry]:
        """
        Give every entry ``round(100 / n, 2)``.

        The rounding residue is accepted (three entries sum to 99.99), so
        the result may not be exactly 100.
        """
        if not entries:
            return []
        share = float(np.round(config.TARGET_TOTAL / len(entries), config.REBALANCE_DECIMALS))
        return [replace(e, percentage=share) for e in entries]

    @staticmethod
    def update_percentage(
        entries: Sequence[AllocationEntry],
        entry_id: str,
        value: float,
    ) -> List[AllocationEntry]:
        """Set one entry's percentage (clamped). Siblings are left as they are."""
        return AllocationNormalizer.apply_edits(entries, {entry_id: value})

    @staticmethod
    def apply_edits(
        entries: Sequence[AllocationEntry],
        edits: Mapping[str, float],
    ) -> List[AllocationEntry]:
        """
        Apply a batch of ``{entry_id: percentage}`` edits, each clamped.

        Raises
        ------
        EntryNotFoundError
            If an edit names an id that is not in *entries*.
        """
        known = {e.id for e in entries}
        for entry_id in edits:
            if entry_id not in known:
                raise EntryNotFoundError(entry_id)

        return [
            replace(e, percentage=AllocationNormalizer.clamp_percentage(edits[e.id]))
            if e.id in edits else replace(e)
            for e in entries
        ]

    @staticmethod
    def add_entry(
        entries: Sequence[AllocationEntry],
        symbol: str,
        name: str,
        percentage: float = 0.0,
        color_token: str = "",
    ) -> List[AllocationEntry]:
        """
        Append a new holding. The symbol is upper-cased and the percentage
        clamped. A blank symbol or name leaves the vector unchanged.
        """
        result = [replace(e) for e in entries]
        symbol = (symbol or "").strip().upper()
        name = (name or "").strip()
        if not symbol or not name:
            return result

        result.append(AllocationEntry(
            id=AllocationNormalizer._next_id(entries),
            symbol=symbol,
            name=name,
            percentage=AllocationNormalizer.clamp_percentage(percentage),
            color_token=color_token,
        ))
        return result

    @staticmethod
    def remove_entry(
        entries: Sequence[AllocationEntry],
        entry_id: str,
    ) -> List[AllocationEntry]:
        """Drop one entry. Remaining percentages are not redistributed."""
        if not any(e.id == entry_id for e in entries):
            raise EntryNotFoundError(entry_id)
        return [replace(e) for e in entries if e.id != entry_id]

    # ------------------------------------------------------------------ #
    #  Drift and capital
    # ------------------------------------------------------------------ #

    @staticmethod
    def compute_drift(
        targets: Sequence,
        actual: Mapping[str, float],
        threshold: float = config.DRIFT_THRESHOLD,
    ) -> List[Dict]:
        """
        Compare target percentages (entries or holdings) with actual ones.

        Returns one item per symbol whose absolute drift exceeds *threshold*
        percentage points::

            {"asset": "VTI", "target": 40.0, "actual": 47.5,
             "drift": 7.5, "action": DriftAction.REDUCE}

        Symbols held but absent from *targets* have a target of 0.
        """
        target_map: Dict[str, float] = {}
        for t in targets:
            target_map[t.symbol] = target_map.get(t.symbol, 0.0) + t.percentage

        symbols = list(target_map) + [s for s in actual if s not in target_map]

        drifts: List[Dict] = []
        for symbol in symbols:
            target = target_map.get(symbol, 0.0)
            held = float(actual.get(symbol, 0.0))
            drift = round(held - target, 2)
            if abs(drift) <= threshold:
                continue
            drifts.append({
                "asset":  symbol,
                "target": target,
                "actual": held,
                "drift":  drift,
                "action": DriftAction.REDUCE if drift > 0 else DriftAction.INCREASE,
            })
        return drifts

    @staticmethod
    def allocate_capital(
        entries: Sequence[AllocationEntry],
        amount: float,
    ) -> List[Dict]:
        """
        Split an investment *amount* across *entries* by percentage.

        Percentages are normalised by their own total first, so an
        unbalanced vector still distributes the whole amount.  All entries
        but the last are rounded to 2 dp; the last absorbs the residual so
        the amounts sum exactly to *amount*.
        """
        if not entries:
            return []

        weights = AllocationNormalizer._normalize([e.percentage for e in entries])

        out: List[Dict] = []
        distributed = 0.0
        for entry, weight in zip(entries[:-1], weights[:-1]):
            capital = round(amount * weight, 2)
            distributed += capital
            out.append({"symbol": entry.symbol, "percentage": entry.percentage,
                        "capital_amount": capital})

        last = entries[-1]
        out.append({"symbol": last.symbol, "percentage": last.percentage,
                    "capital_amount": round(amount - distributed, 2)})
        return out

    # ------------------------------------------------------------------ #
    #  Private helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _normalize(values: List[float]) -> List[float]:
        """Scale *values* so they sum to 1.0. Falls back to equal weight."""
        arr = np.asarray(values, dtype=float)
        total = arr.sum()
        if total == 0:
            return [1 / len(values)] * len(values)
        return (arr / total).tolist()

    @staticmethod
    def _next_id(entries: Sequence[AllocationEntry]) -> str:
        numeric: List[int] = [int(e.id) for e in entries if e.id.isdigit()]
        next_id = max(numeric) + 1 if numeric else len(entries) + 1
        taken = {e.id for e in entries}
        while str(next_id) in taken:
            next_id += 1
        return str(next_id)
