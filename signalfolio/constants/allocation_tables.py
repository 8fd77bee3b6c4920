# PURPOSE: Single shared lookup tables for the allocation optimizer.
# CONTEXT: Base mix per risk profile, per-condition deltas, per-bucket bounds and
#          the return/risk assumptions used for portfolio metrics.

ASSET_CLASSES = ("equity", "debt", "gold", "cash")

# Each row sums to 100.
BASE_ALLOCATIONS = {
    "conservative": {"equity": 30, "debt": 45, "gold": 15, "cash": 10},
    "moderate":     {"equity": 50, "debt": 30, "gold": 12, "cash": 8},
    "aggressive":   {"equity": 70, "debt": 15, "gold": 10, "cash": 5},
}

# Each row sums to 0.
MARKET_ADJUSTMENTS = {
    "bullish": {"equity": 10,  "debt": -5, "gold": -3, "cash": -2},
    "neutral": {"equity": 0,   "debt": 0,  "gold": 0,  "cash": 0},
    "bearish": {"equity": -15, "debt": 8,  "gold": 5,  "cash": 2},
}

# Inclusive (min, max) per bucket, applied before normalization.
ALLOCATION_BOUNDS = {
    "equity": (10, 90),
    "debt":   (10, 70),
    "gold":   (0, 30),
    "cash":   (0, 30),
}

# Annual % return and % risk assumptions per asset class.
EXPECTED_RETURNS = {"equity": 10.0, "debt": 5.0, "gold": 8.0, "cash": 2.0}
RISK_LEVELS = {"equity": 16.0, "debt": 6.0, "gold": 12.0, "cash": 1.0}
