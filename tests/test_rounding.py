import pytest
from signalfolio.utils.rounding import clamp_allocation, normalize_to_100

def test_clamp_each_bucket_to_own_bounds():
    out = clamp_allocation({"equity": 100, "debt": 5, "gold": 40, "cash": -3})
    assert out == {"equity": 90, "debt": 10, "gold": 30, "cash": 0}

def test_normalize_keeps_exact_hundred():
    vals = {"equity": 50, "debt": 30, "gold": 12, "cash": 8}
    assert normalize_to_100(vals) == vals

def test_normalize_rounds_halves_up():
    # 1500/120 is exactly 12.5
    out = normalize_to_100({"equity": 90, "debt": 15, "gold": 10, "cash": 5})
    assert out["debt"] == 13
    assert sum(out.values()) == 100

def test_normalize_rejects_zero_total():
    with pytest.raises(ValueError):
        normalize_to_100({"equity": 0, "debt": 0, "gold": 0, "cash": 0})

def test_normalize_leaves_thread_context_alone():
    from decimal import getcontext
    before = getcontext().prec
    normalize_to_100({"equity": 90, "debt": 15, "gold": 10, "cash": 5})
    assert getcontext().prec == before
