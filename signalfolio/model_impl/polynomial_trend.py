# PURPOSE: Trend source that forecasts the next few closes with a polynomial fit.
# CONTEXT: Degree-3 least squares over ~30 days of closes (numpy.polyfit). R² of the
#          fit is the confidence. Short histories fall back to a small seeded random
#          walk from the latest quote with a fixed low confidence.

from __future__ import annotations
from dataclasses import dataclass
import os
from typing import List, Tuple

import numpy as np

from signalfolio.model_interface.sources import QuoteSource, TrendSource
from signalfolio.model_interface.types import Trend, TrendPrediction


def _trend_from_change(pct: float, threshold: float) -> Trend:
    if pct > threshold:
        return "up"
    if pct < -threshold:
        return "down"
    return "sideways"


def _r_squared(y: np.ndarray, fitted: np.ndarray) -> float:
    ss_res = float(np.sum((y - fitted) ** 2))
    ss_tot = float(np.sum((y - np.mean(y)) ** 2))
    if ss_tot == 0.0:
        return 1.0 if ss_res == 0.0 else 0.0
    return 1.0 - ss_res / ss_tot


@dataclass
class TrendConfig:
    """
    Forecast settings.

    attributes:
    - lookback_days: int – calendar days of closes used for the fit
    - degree: int – polynomial degree
    - min_points: int – fewer closes than this use the simple model
    - trend_threshold_pct: float – forecast move (%) needed for up/down
    - simple_threshold_pct: float – same, for the simple model
    - simple_confidence: float – confidence reported by the simple model
    - simple_steps: int – length of the simple model's series
    """
    lookback_days: int = int(os.getenv("TREND_LOOKBACK_DAYS", "30"))
    degree: int = 3
    min_points: int = 10
    trend_threshold_pct: float = 1.5
    simple_threshold_pct: float = 0.5
    simple_confidence: float = 0.3
    simple_steps: int = 5


class PolynomialTrendModel(TrendSource):
    """
    1) Pull recent closes from the quote source.
    2) Fit a polynomial in the day index and extrapolate `horizon_days` ahead.
    3) Label the trend from the last forecast versus the last close.

    Quote-source errors propagate; the classifier owns the fallback for those.
    """

    def __init__(self, quotes: QuoteSource, config: TrendConfig | None = None, seed: int | None = None):
        self.quotes = quotes
        self.config = config or TrendConfig()
        self.seed = seed

    def predict(self, symbol: str, horizon_days: int = 5) -> TrendPrediction:
        if horizon_days < 1:
            raise ValueError(f"horizon_days must be at least 1, got {horizon_days}")
        closes = self.quotes.history(symbol, self.config.lookback_days)
        if len(closes) < self.config.min_points:
            return self._simple_prediction(symbol)

        series, r2 = self.fit_and_forecast(closes, horizon_days)
        last_close = closes[-1]
        pct = (series[-1] - last_close) / last_close * 100 if last_close else 0.0
        return {
            "trend": _trend_from_change(pct, self.config.trend_threshold_pct),
            "confidence": round(max(0.0, min(1.0, r2)), 4),
            "series": [round(v, 4) for v in series],
        }

    def fit_and_forecast(self, closes: List[float], horizon_days: int) -> Tuple[List[float], float]:
        """
        Fit the polynomial and forecast.

        returns:
        - (series, r2): forecast for days last+1..last+horizon_days and the in-sample R²
        """
        y = np.asarray(closes, dtype=float)
        x = np.arange(len(y), dtype=float)
        coeffs = np.polyfit(x, y, self.config.degree)
        poly = np.poly1d(coeffs)
        future_x = np.arange(len(y), len(y) + horizon_days, dtype=float)
        return [float(v) for v in poly(future_x)], _r_squared(y, poly(x))

    def _simple_prediction(self, symbol: str) -> TrendPrediction:
        """Small ±1% random walk from the current price; reproducible for a given seed."""
        price = float(self.quotes.quote(symbol)["price"] or 0.0)
        rng = np.random.default_rng(self.seed if self.seed is not None else 42)
        steps = rng.uniform(-0.01, 0.01, self.config.simple_steps)
        series = (price * np.cumprod(1.0 + steps)).tolist()
        pct = (series[-1] - price) / price * 100 if price else 0.0
        return {
            "trend": _trend_from_change(pct, self.config.simple_threshold_pct),
            "confidence": self.config.simple_confidence,
            "series": [round(v, 4) for v in series],
        }
