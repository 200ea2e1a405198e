"""
allocator/errors.py
-------------------
Exception types raised by the allocation engines.

Out-of-range percentages and risk scores are clamped rather than raised,
and an unbalanced allocation vector is reported through ``is_balanced``,
so only the conditions below ever surface as exceptions.
"""

from __future__ import annotations

from typing import Iterable


class AllocatorError(Exception):
    """Base class for every error raised by this package."""


class MissingAnswerError(AllocatorError, ValueError):
    """A required questionnaire answer has not been given yet."""

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__(
            f"Missing required answers: {', '.join(self.missing)}."
        )


class StrategyNotFoundError(AllocatorError, LookupError):
    """No catalog strategy has the requested id."""

    def __init__(self, strategy_id: str, available: Iterable[str] = ()):
        self.strategy_id = strategy_id
        available = list(available)
        message = f"Strategy {strategy_id!r} not found in catalog."
        if available:
            message += f" Available: {available}"
        super().__init__(message)


class EntryNotFoundError(AllocatorError, LookupError):
    """No entry in an allocation vector has the requested id."""

    def __init__(self, entry_id: str):
        self.entry_id = entry_id
        super().__init__(f"Allocation entry {entry_id!r} not found.")


class CatalogError(AllocatorError, ValueError):
    """The strategy catalog data files are missing or malformed."""
