# PURPOSE: Utilities to clamp allocation buckets and round them to whole percentages.
# CONTEXT: Used by the optimizer so equity + debt + gold + cash always sums to exactly 100.

from decimal import Decimal, ROUND_HALF_UP, localcontext

from signalfolio.constants.allocation_tables import ALLOCATION_BOUNDS

# Decimal digits used inside normalize_to_100; set per call, never on the thread context.
PRECISION = 28

def clamp_allocation(raw, bounds=ALLOCATION_BOUNDS):
    """
    Clamp every bucket independently to its own [min, max] bound.

    parameters:
    - raw: dict – bucket name -> percentage, e.g. {"equity": 100, "debt": 0, ...}.
    - bounds: dict – bucket name -> (min, max); defaults to ALLOCATION_BOUNDS.

    returns:
    - dict – new dict with each value inside its bound.
    """
    out = {}
    for name, value in raw.items():
        lo, hi = bounds[name]
        out[name] = min(hi, max(lo, value))
    return out

def _round_half_up(x) -> int:
    return int(Decimal(str(x)).quantize(Decimal(1), ROUND_HALF_UP))

def normalize_to_100(values, residual_key="equity"):
    """
    Scale buckets so they sum to 100 and round them to integers.

    parameters:
    - values: dict – non-negative bucket percentages with a positive sum.
    - residual_key: str – bucket that absorbs the rounding residual (default 'equity').

    returns:
    - dict – integer percentages summing to exactly 100.

    notes:
    - Values already summing to 100 are only rounded, never rescaled.
    - ROUND_HALF_UP is used so 12.5 -> 13, matching ordinary rounding.
    - The residual (usually ±1) lands on residual_key only.
    - Arithmetic runs in a local Decimal context, so results do not depend on
      the calling thread's context.
    """
    with localcontext() as ctx:
        ctx.prec = PRECISION
        total = Decimal(0)
        for v in values.values():
            total += Decimal(str(v))
        if total <= 0:
            raise ValueError(f"Cannot normalize allocation with non-positive total: {total}")

        # Multiply before dividing so exact halves (e.g. 1500/120 = 12.5) stay exact.
        out = {k: _round_half_up(Decimal(str(v)) * 100 / total) for k, v in values.items()}

    residual = 100 - sum(out.values())
    if residual:
        out[residual_key] += residual
    return out
