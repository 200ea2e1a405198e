"""
allocator/records.py
--------------------
Conversion between in-memory holdings / entries and the persisted record
shape ``{symbol, name, allocation, rationale, assetClass, color}``.

The key names are a storage contract shared with existing saved
portfolios; do not rename them.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

import pandas as pd

from allocator.models import AllocationEntry, AssetHolding, Strategy

RECORD_COLUMNS = ["symbol", "name", "allocation", "rationale", "assetClass", "color"]


def holding_to_record(holding: AssetHolding) -> Dict:
    return {
        "symbol":     holding.symbol,
        "name":       holding.display_name,
        "allocation": holding.percentage,
        "rationale":  holding.rationale,
        "assetClass": holding.asset_class,
        "color":      holding.color_token,
    }


def entry_to_record(entry: AllocationEntry) -> Dict:
    return {
        "symbol":     entry.symbol,
        "name":       entry.name,
        "allocation": entry.percentage,
        "rationale":  entry.rationale,
        "assetClass": entry.asset_class,
        "color":      entry.color_token,
    }


def records_from_strategy(strategy: Strategy) -> List[Dict]:
    """Persisted records for every holding of *strategy*, in catalog order."""
    return [holding_to_record(h) for h in strategy.holdings]


def entries_from_records(records: Iterable[Dict]) -> List[AllocationEntry]:
    """
    Rebuild an editable vector from stored records (ids ``"1".."n"``).

    Only ``symbol`` and ``allocation`` are required; missing text fields
    default to empty strings and ``name`` falls back to the symbol.
    """
    entries: List[AllocationEntry] = []
    for i, record in enumerate(records, start=1):
        symbol = record["symbol"]
        entries.append(AllocationEntry(
            id=str(i),
            symbol=symbol,
            name=record.get("name") or symbol,
            percentage=float(record["allocation"]),
            color_token=record.get("color", ""),
            asset_class=record.get("assetClass", ""),
            rationale=record.get("rationale", ""),
        ))
    return entries


def records_frame(records: Iterable[Dict]) -> pd.DataFrame:
    """Tabular view of *records* with the persisted column order."""
    return pd.DataFrame(list(records), columns=RECORD_COLUMNS)
