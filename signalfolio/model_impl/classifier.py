# PURPOSE: Heuristic market-condition classifier.
# CONTEXT: Four weighted votes (volatility index, trend forecast, sentiment, recent
#          change) decide bearish / neutral / bullish. When the forecast or sentiment
#          source is unavailable, a two-signal volatility/change model takes over.

from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional, Tuple

import structlog

from signalfolio.constants.signal_weights import (
    SIGNAL_WEIGHTS,
    VIX_BEARISH_ABOVE,
    VIX_BULLISH_BELOW,
    MIN_SIGNAL_CONFIDENCE,
    SENTIMENT_THRESHOLD,
    CHANGE_THRESHOLD,
    FALLBACK_CONFIRM_CHANGE,
    TREND_TRUST_CONFIDENCE,
    TREND_CHANGE_THRESHOLD,
)
from signalfolio.model_interface.sources import TrendSource, SentimentSource
from signalfolio.model_interface.types import (
    Classification,
    MarketCondition,
    SentimentReading,
    Signal,
    Trend,
    TrendPrediction,
)

log = structlog.get_logger(__name__)

# Marks "no prediction passed", as opposed to a fetch that came back empty.
_UNSET = object()


def _signal(name: str, value: MarketCondition) -> Signal:
    return {"name": name, "value": value, "weight": SIGNAL_WEIGHTS[name]}


def signal_from_volatility(vix: float) -> Signal:
    if vix > VIX_BEARISH_ABOVE:
        return _signal("volatility", "bearish")
    if vix < VIX_BULLISH_BELOW:
        return _signal("volatility", "bullish")
    return _signal("volatility", "neutral")


def signal_from_trend(prediction: TrendPrediction) -> Signal:
    conf = float(prediction.get("confidence", 0.0))
    trend = prediction.get("trend")
    if trend == "up" and conf > MIN_SIGNAL_CONFIDENCE:
        return _signal("trend", "bullish")
    if trend == "down" and conf > MIN_SIGNAL_CONFIDENCE:
        return _signal("trend", "bearish")
    return _signal("trend", "neutral")


def signal_from_sentiment(reading: SentimentReading) -> Signal:
    score = float(reading.get("score", 0.0))
    conf = float(reading.get("confidence", 0.0))
    if score > SENTIMENT_THRESHOLD and conf > MIN_SIGNAL_CONFIDENCE:
        return _signal("sentiment", "bullish")
    if score < -SENTIMENT_THRESHOLD and conf > MIN_SIGNAL_CONFIDENCE:
        return _signal("sentiment", "bearish")
    return _signal("sentiment", "neutral")


def signal_from_change(change: float) -> Signal:
    if change > CHANGE_THRESHOLD:
        return _signal("change", "bullish")
    if change < -CHANGE_THRESHOLD:
        return _signal("change", "bearish")
    return _signal("change", "neutral")


def weighted_vote(signals: Iterable[Signal]) -> Tuple[MarketCondition, Dict[str, float]]:
    """
    Sum signal weights per bucket and pick the winner.

    returns:
    - (condition, scores) – condition is the bucket with the strictly greatest
      weighted sum; any tie at the top resolves to 'neutral'.
    """
    scores = {"bearish": 0.0, "neutral": 0.0, "bullish": 0.0}
    for s in signals:
        scores[s["value"]] += s["weight"]
    # Round away float noise (1.0 + 1.2 vs 2.2) before comparing.
    scores = {k: round(v, 6) for k, v in scores.items()}

    bear, neu, bull = scores["bearish"], scores["neutral"], scores["bullish"]
    if bear > bull and bear > neu:
        return "bearish", scores
    if bull > bear and bull > neu:
        return "bullish", scores
    return "neutral", scores


def fallback_condition(vix: float, change: float) -> MarketCondition:
    """
    Two-signal model using only the volatility index and the recent change.

    rules:
    - VIX above 25 is bearish only if the change confirms it (< -0.5), else neutral.
    - VIX below 15 is bullish only if the change confirms it (> 0.5), else neutral.
    - Inside the neutral VIX band, change > 1 is bullish, < -1 bearish, else neutral.
    """
    if vix > VIX_BEARISH_ABOVE:
        return "bearish" if change < -FALLBACK_CONFIRM_CHANGE else "neutral"
    if vix < VIX_BULLISH_BELOW:
        return "bullish" if change > FALLBACK_CONFIRM_CHANGE else "neutral"
    if change > CHANGE_THRESHOLD:
        return "bullish"
    if change < -CHANGE_THRESHOLD:
        return "bearish"
    return "neutral"


def classify_signals(
    vix: float,
    change: float,
    trend: Optional[TrendPrediction] = None,
    sentiment: Optional[SentimentReading] = None,
) -> Classification:
    """
    Classify the market from already-fetched inputs.

    parameters:
    - vix: float – volatility index level
    - change: float – recent % change of the benchmark index
    - trend: TrendPrediction|None – forecast; None means unavailable
    - sentiment: SentimentReading|None – sentiment; None means unavailable

    returns:
    - Classification – condition, the signals used, bucket scores, and whether
      the fallback model decided
    """
    if trend is None or sentiment is None:
        return {
            "condition": fallback_condition(vix, change),
            "signals": [signal_from_volatility(vix), signal_from_change(change)],
            "scores": {},
            "fallback": True,
        }

    signals: List[Signal] = [
        signal_from_volatility(vix),
        signal_from_trend(trend),
        signal_from_sentiment(sentiment),
        signal_from_change(change),
    ]
    condition, scores = weighted_vote(signals)
    return {"condition": condition, "signals": signals, "scores": scores, "fallback": False}


def determine_market_trend(change: float, prediction: Optional[TrendPrediction] = None) -> Trend:
    """Forecast trend when it is confident enough, otherwise the direction of the day's move."""
    if prediction is not None and float(prediction.get("confidence", 0.0)) > TREND_TRUST_CONFIDENCE:
        return prediction["trend"]
    if change > TREND_CHANGE_THRESHOLD:
        return "up"
    if change < -TREND_CHANGE_THRESHOLD:
        return "down"
    return "sideways"


class MarketClassifier:
    """
    Classifier bound to injected trend and sentiment sources.

    Source failures are logged and recovered by the fallback model; they never
    reach the caller.
    """

    def __init__(self, trend_source: TrendSource, sentiment_source: SentimentSource):
        self.trend_source = trend_source
        self.sentiment_source = sentiment_source

    def fetch_trend(self, symbol: str, horizon_days: int = 5) -> Optional[TrendPrediction]:
        try:
            return self.trend_source.predict(symbol, horizon_days)
        except Exception as e:
            log.warning("classifier.trend_unavailable", symbol=symbol, error=f"{type(e).__name__}: {e}")
            return None

    def fetch_sentiment(self, symbol: str) -> Optional[SentimentReading]:
        try:
            return self.sentiment_source.analyze(symbol)
        except Exception as e:
            log.warning("classifier.sentiment_unavailable", symbol=symbol, error=f"{type(e).__name__}: {e}")
            return None

    def classify(
        self,
        symbol: str,
        vix: float,
        change: float,
        horizon_days: int = 5,
        prediction: Any = _UNSET,
    ) -> Classification:
        """
        Fetch forecast and sentiment for `symbol`, then classify.

        A `prediction` that was already fetched is reused instead of calling
        the trend source again. Passing `None` means the fetch already failed,
        so the two-signal fallback decides without a second attempt.
        """
        if prediction is _UNSET:
            prediction = self.fetch_trend(symbol, horizon_days)
        sentiment = self.fetch_sentiment(symbol)
        result = classify_signals(vix, change, prediction, sentiment)
        if result["fallback"]:
            log.info("classifier.fallback", symbol=symbol, vix=vix, change=change, condition=result["condition"])
        else:
            log.info("classifier.scores", symbol=symbol, condition=result["condition"], **result["scores"])
        return result
