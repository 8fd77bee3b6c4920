# PURPOSE: Allocation optimizer that maps a risk profile and market condition to an
#          equity/debt/gold/cash split summing to exactly 100.
# CONTEXT: Base mix by risk profile, shifted by a market-condition delta, clamped
#          per bucket and renormalized. Also derives simple expected return / risk.

from __future__ import annotations
from typing import Dict, Optional

from signalfolio.constants.allocation_tables import (
    ASSET_CLASSES,
    BASE_ALLOCATIONS,
    MARKET_ADJUSTMENTS,
    EXPECTED_RETURNS,
    RISK_LEVELS,
)
from signalfolio.model_interface.types import Allocation, PortfolioMetrics
from signalfolio.utils.rounding import clamp_allocation, normalize_to_100


def _require(value: str, table: dict, kind: str) -> dict:
    """Look up a table row, failing fast on unknown keys instead of defaulting."""
    try:
        return table[value]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown {kind}: {value!r} (expected one of {sorted(table)})") from None


def allocate(
    risk_profile: str,
    market_condition: str,
    adjustments: Optional[Dict[str, float]] = None,
) -> Allocation:
    """
    Produce a normalized four-bucket allocation.

    steps:
    1) Base row for the risk profile.
    2) Add the market-condition delta (or `adjustments`, when given).
    3) Clamp each bucket to its bound.
    4) If the clamped sum is not 100, rescale, round half-up, and put the
       rounding residual on equity.

    parameters:
    - risk_profile: str – conservative | moderate | aggressive
    - market_condition: str – bearish | neutral | bullish
    - adjustments: dict|None – per-bucket delta overriding the condition row;
      missing buckets count as 0

    returns:
    - Allocation – {"equity", "debt", "gold", "cash"} as non-negative ints summing to 100

    raises:
    - ValueError – for an unknown risk profile or market condition
    """
    base = _require(risk_profile, BASE_ALLOCATIONS, "risk profile")
    delta = _require(market_condition, MARKET_ADJUSTMENTS, "market condition")
    if adjustments is not None:
        unknown = set(adjustments) - set(ASSET_CLASSES)
        if unknown:
            raise ValueError(f"Unknown asset classes in adjustments: {sorted(unknown)}")
        delta = {k: adjustments.get(k, 0) for k in ASSET_CLASSES}

    raw = {k: base[k] + delta[k] for k in ASSET_CLASSES}
    clamped = clamp_allocation(raw)
    # A clamped sum of exactly 100 scales by 1, so this only rounds.
    return normalize_to_100(clamped)


def portfolio_metrics(allocation: Allocation) -> PortfolioMetrics:
    """Weighted expected return and risk level (both in percent) for an allocation."""
    exp_ret = sum(EXPECTED_RETURNS[k] * allocation[k] / 100 for k in ASSET_CLASSES)
    risk = sum(RISK_LEVELS[k] * allocation[k] / 100 for k in ASSET_CLASSES)
    return {"expected_return": round(exp_ret, 2), "risk_level": round(risk, 2)}


def optimize_portfolio(risk_profile: str, market_condition: str) -> dict:
    """Allocation plus its expected return and risk level."""
    alloc = allocate(risk_profile, market_condition)
    return {"allocation": alloc, **portfolio_metrics(alloc)}
