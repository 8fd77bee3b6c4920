import itertools
import threading
import pytest

from signalfolio.model_impl.optimizer import allocate, portfolio_metrics, optimize_portfolio
from signalfolio.model_interface.types import RISK_PROFILES, MARKET_CONDITIONS
from signalfolio.constants.allocation_tables import BASE_ALLOCATIONS, MARKET_ADJUSTMENTS

def test_tables_rows_sum_as_expected():
    assert all(sum(row.values()) == 100 for row in BASE_ALLOCATIONS.values())
    assert all(sum(row.values()) == 0 for row in MARKET_ADJUSTMENTS.values())

@pytest.mark.parametrize("risk,condition", list(itertools.product(RISK_PROFILES, MARKET_CONDITIONS)))
def test_every_combination_is_valid(risk, condition):
    alloc = allocate(risk, condition)
    assert set(alloc) == {"equity", "debt", "gold", "cash"}
    assert all(isinstance(v, int) and v >= 0 for v in alloc.values())
    assert sum(alloc.values()) == 100

def test_allocate_is_deterministic():
    assert allocate("moderate", "bullish") == allocate("moderate", "bullish")

def test_conservative_bearish():
    assert allocate("conservative", "bearish") == {"equity": 15, "debt": 53, "gold": 20, "cash": 12}

def test_aggressive_bullish():
    assert allocate("aggressive", "bullish") == {"equity": 80, "debt": 10, "gold": 7, "cash": 3}

def test_neutral_returns_base_row():
    assert allocate("moderate", "neutral") == {"equity": 50, "debt": 30, "gold": 12, "cash": 8}

def test_injected_delta_clamps_equity_at_max():
    alloc = allocate("aggressive", "bullish", adjustments={"equity": 30, "debt": -15, "gold": -10, "cash": -5})
    # equity 100 -> 90, debt 0 -> 10 (floor)
    assert alloc == {"equity": 90, "debt": 10, "gold": 0, "cash": 0}

def test_injected_delta_over_max_is_clamped_then_rescaled():
    # {90, 15, 10, 5} sums to 120 and is scaled back to 100
    alloc = allocate("aggressive", "neutral", adjustments={"equity": 30})
    assert alloc == {"equity": 75, "debt": 13, "gold": 8, "cash": 4}

def test_delta_below_floor_clamps_instead_of_going_negative():
    alloc = allocate("moderate", "neutral", adjustments={"gold": -20})
    assert alloc["gold"] == 0
    assert sum(alloc.values()) == 100

def test_rounding_residual_minus_one_lands_on_equity():
    # {10, 45, 15, 10} = 80 -> {12.5, 56.25, 18.75, 12.5} -> rounds to 101
    alloc = allocate("conservative", "neutral", adjustments={"equity": -25})
    assert alloc == {"equity": 12, "debt": 56, "gold": 19, "cash": 13}

def test_rounding_residual_plus_one_lands_on_equity():
    # {30, 15, 15, 10} = 70 -> rounds to 99
    alloc = allocate("conservative", "neutral", adjustments={"debt": -30})
    assert alloc == {"equity": 44, "debt": 21, "gold": 21, "cash": 14}

@pytest.mark.parametrize("risk,condition", [("balanced", "neutral"), ("moderate", "sideways"), (None, "neutral")])
def test_unknown_enum_values_fail_fast(risk, condition):
    with pytest.raises(ValueError):
        allocate(risk, condition)

def test_unknown_adjustment_bucket_rejected():
    with pytest.raises(ValueError):
        allocate("moderate", "neutral", adjustments={"crypto": 5})

def test_portfolio_metrics_weighting():
    m = portfolio_metrics({"equity": 80, "debt": 10, "gold": 7, "cash": 3})
    assert m["expected_return"] == pytest.approx(9.12)
    assert m["risk_level"] == pytest.approx(14.27)

def test_optimize_portfolio_shape():
    out = optimize_portfolio("conservative", "neutral")
    assert out["allocation"] == {"equity": 30, "debt": 45, "gold": 15, "cash": 10}
    assert out["expected_return"] == pytest.approx(6.65)
    assert out["risk_level"] == pytest.approx(9.4)

NEAR_HALVES = {"equity": -37.49999999999, "debt": 20, "gold": 8, "cash": 9.49999999999}
NEAR_HALVES_EXPECTED = {"equity": 13, "debt": 50, "gold": 20, "cash": 17}

def test_values_just_above_and_below_half_round_correctly():
    assert allocate("moderate", "neutral", adjustments=NEAR_HALVES) == NEAR_HALVES_EXPECTED

def test_allocation_is_the_same_on_a_worker_thread():
    results = []
    worker = threading.Thread(target=lambda: results.append(allocate("moderate", "neutral", adjustments=NEAR_HALVES)))
    worker.start()
    worker.join()
    assert results == [NEAR_HALVES_EXPECTED]
    assert allocate("moderate", "neutral", adjustments=NEAR_HALVES) == NEAR_HALVES_EXPECTED
