# PURPOSE: Thresholds and weights for the market-condition signals.

SIGNAL_WEIGHTS = {
    "volatility": 1.0,
    "trend":      1.5,
    "sentiment":  1.0,
    "change":     1.2,
}

VIX_BEARISH_ABOVE = 25.0
VIX_BULLISH_BELOW = 15.0

MIN_SIGNAL_CONFIDENCE = 0.4
SENTIMENT_THRESHOLD = 1.5
CHANGE_THRESHOLD = 1.0

# Two-signal fallback: an extreme VIX needs the day's move to confirm it.
FALLBACK_CONFIRM_CHANGE = 0.5

# Market trend: trust the forecast above this confidence, else use the day's move.
TREND_TRUST_CONFIDENCE = 0.5
TREND_CHANGE_THRESHOLD = 0.5
