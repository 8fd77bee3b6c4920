import pytest

from signalfolio.model_impl.polynomial_trend import PolynomialTrendModel, TrendConfig
from signalfolio.model_impl.stub_sources import StubQuoteSource, FailingSource

def test_rising_series_is_up_with_high_confidence():
    closes = [100.0 + i for i in range(30)]
    model = PolynomialTrendModel(StubQuoteSource(closes=closes))
    out = model.predict("^NSEI", 5)
    assert out["trend"] == "up"
    assert out["confidence"] == pytest.approx(1.0, abs=1e-3)
    assert len(out["series"]) == 5
    assert out["series"][0] == pytest.approx(130.0, abs=1e-3)
    assert out["series"][-1] == pytest.approx(134.0, abs=1e-3)

def test_falling_series_is_down():
    closes = [200.0 - 2 * i for i in range(20)]
    out = PolynomialTrendModel(StubQuoteSource(closes=closes)).predict("^GSPC", 5)
    assert out["trend"] == "down"

def test_small_move_is_sideways():
    closes = [1000.0 + 0.1 * i for i in range(30)]
    out = PolynomialTrendModel(StubQuoteSource(closes=closes)).predict("^GSPC", 3)
    assert out["trend"] == "sideways"
    assert len(out["series"]) == 3

def test_short_history_uses_simple_model():
    quotes = StubQuoteSource({"^NSEI": {"price": 21500.0, "change_percent": 0.3}}, closes=[1.0, 2.0, 3.0])
    out = PolynomialTrendModel(quotes, seed=7).predict("^NSEI", 5)
    assert out["confidence"] == 0.3
    assert len(out["series"]) == TrendConfig().simple_steps
    assert out["trend"] in ("up", "down", "sideways")
    # steps are bounded by ±1% per day
    assert all(21500.0 * 0.99 ** 5 <= v <= 21500.0 * 1.01 ** 5 for v in out["series"])

def test_simple_model_is_reproducible_for_a_seed():
    quotes = StubQuoteSource({"^NSEI": {"price": 100.0, "change_percent": 0.0}})
    a = PolynomialTrendModel(quotes, seed=1).predict("^NSEI")
    b = PolynomialTrendModel(quotes, seed=1).predict("^NSEI")
    assert a == b

def test_quote_source_errors_propagate():
    with pytest.raises(RuntimeError):
        PolynomialTrendModel(FailingSource()).predict("^NSEI")

def test_rejects_non_positive_horizon():
    model = PolynomialTrendModel(StubQuoteSource(closes=[100.0 + i for i in range(30)]))
    with pytest.raises(ValueError):
        model.predict("^NSEI", 0)
