from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pandas as pd

from allocator import config
from allocator.enums import StrategyKind
from allocator.errors import CatalogError, StrategyNotFoundError
from allocator.models import AssetHolding, Strategy

logger = logging.getLogger(__name__)


# Default catalog root, resolved relative to this file so it works regardless
# of which directory the process is launched from.
_DEFAULT_BASE = Path(__file__).parent / "data"

_STRATEGIES_FILE = "strategies.csv"
_HOLDINGS_FILE = "holdings.csv"

_STRATEGY_COLUMNS = {"strategy_id", "name", "kind", "description"}
_HOLDING_COLUMNS = {
    "strategy_id", "symbol", "display_name", "percentage",
    "asset_class", "color_token", "rationale",
}


class StrategyCatalog:
    """
    Read-only registry of named allocation templates.

    The templates are plain data kept in two CSV tables so they can be
    versioned and reviewed apart from any selection logic::

        data/
            strategies.csv   strategy_id, name, kind, description
            holdings.csv     strategy_id, symbol, display_name, percentage,
                             asset_class, color_token, rationale

    Holdings keep their file order within a strategy; strategies keep the
    order of ``strategies.csv``.  Files are parsed once per process per
    directory (see :func:`_load_cached`).
    """

    def __init__(self, base_path: Optional[str | Path] = None):
        if base_path is None:
            base_path = config.catalog_dir_override() or _DEFAULT_BASE
        self._base = Path(base_path)
        self._strategies: Tuple[Strategy, ...] = _load_cached(str(self._base.resolve()))
        self._by_id: Dict[str, Strategy] = {s.id: s for s in self._strategies}

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def get(self, strategy_id: str) -> Strategy:
        """
        Return the strategy registered under *strategy_id*.

        Raises
        ------
        StrategyNotFoundError
            If no strategy has that id.
        """
        try:
            return self._by_id[strategy_id]
        except KeyError:
            raise StrategyNotFoundError(strategy_id, self._by_id) from None

    def all(self) -> List[Strategy]:
        """Return every strategy in catalog order."""
        return list(self._strategies)

    def ids(self) -> List[str]:
        return [s.id for s in self._strategies]

    def by_kind(self, kind: StrategyKind) -> List[Strategy]:
        return [s for s in self._strategies if s.kind is kind]

    def __contains__(self, strategy_id: object) -> bool:
        return strategy_id in self._by_id

    def __len__(self) -> int:
        return len(self._strategies)


@lru_cache(maxsize=1)
def default_catalog() -> StrategyCatalog:
    """Process-wide catalog built from the default (or env-configured) directory."""
    return StrategyCatalog()


# ------------------------------------------------------------------
# Module-level cached loader (keyed only by the resolved directory string,
# so every StrategyCatalog over the same files shares one parse).
# ------------------------------------------------------------------

@lru_cache(maxsize=8)
def _load_cached(base: str) -> Tuple[Strategy, ...]:
    """
    Parse and validate the catalog tables under *base*.

    Raises
    ------
    CatalogError
        If a file is missing, a column is missing, a holding points at an
        unknown strategy, a strategy has no holdings, a percentage is outside
        [0, 100] or a strategy's holdings do not sum to 100.
    """
    base_path = Path(base)
    strategies_df = _read_table(base_path / _STRATEGIES_FILE, _STRATEGY_COLUMNS)
    holdings_df = _read_table(base_path / _HOLDINGS_FILE, _HOLDING_COLUMNS)

    duplicated = strategies_df["strategy_id"][strategies_df["strategy_id"].duplicated()]
    if not duplicated.empty:
        raise CatalogError(f"Duplicate strategy ids: {sorted(set(duplicated))}")

    known_ids = set(strategies_df["strategy_id"])
    orphans = set(holdings_df["strategy_id"]) - known_ids
    if orphans:
        raise CatalogError(f"Holdings reference unknown strategies: {sorted(orphans)}")

    percentages = pd.to_numeric(holdings_df["percentage"], errors="coerce")
    if percentages.isna().any():
        bad = holdings_df.loc[percentages.isna(), "symbol"].tolist()
        raise CatalogError(f"Non-numeric percentage for holdings: {bad}")
    out_of_range = (percentages < config.PERCENT_MIN) | (percentages > config.PERCENT_MAX)
    if out_of_range.any():
        bad = holdings_df.loc[out_of_range, "symbol"].tolist()
        raise CatalogError(f"Percentage outside [0, 100] for holdings: {bad}")
    holdings_df = holdings_df.assign(percentage=percentages.astype(float))

    grouped = {sid: frame for sid, frame in holdings_df.groupby("strategy_id", sort=False)}

    strategies: List[Strategy] = []
    for row in strategies_df.itertuples(index=False):
        frame = grouped.get(row.strategy_id)
        if frame is None or frame.empty:
            raise CatalogError(f"Strategy {row.strategy_id!r} has no holdings.")

        total = float(frame["percentage"].sum())
        if abs(total - config.TARGET_TOTAL) >= config.CATALOG_SUM_TOLERANCE:
            raise CatalogError(
                f"Holdings of {row.strategy_id!r} sum to {total:.2f}, expected 100."
            )

        try:
            kind = StrategyKind(row.kind)
        except ValueError:
            raise CatalogError(
                f"Strategy {row.strategy_id!r} has unknown kind {row.kind!r}."
            ) from None

        holdings = tuple(
            AssetHolding(
                symbol=h.symbol,
                display_name=h.display_name,
                percentage=float(h.percentage),
                asset_class=h.asset_class,
                color_token=h.color_token,
                rationale=h.rationale,
            )
            for h in frame.itertuples(index=False)
        )
        strategies.append(Strategy(
            id=row.strategy_id,
            name=row.name,
            description=row.description,
            kind=kind,
            holdings=holdings,
        ))

    logger.info("Loaded %d strategies from %s", len(strategies), base_path)
    return tuple(strategies)


def _read_table(path: Path, required: set) -> pd.DataFrame:
    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")

    # keep_default_na=False: symbols such as "NA" must stay strings
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    missing = required - set(df.columns)
    if missing:
        raise CatalogError(f"{path.name} is missing columns: {sorted(missing)}")
    return df
