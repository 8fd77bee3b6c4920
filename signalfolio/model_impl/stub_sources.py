from typing import Dict, List, Optional

from signalfolio.model_interface.loader import Sources
from signalfolio.model_interface.sources import QuoteSource, TrendSource, SentimentSource
from signalfolio.model_interface.types import Quote, SentimentReading, TrendPrediction

class StubQuoteSource(QuoteSource):
    def __init__(self, quotes: Optional[Dict[str, Quote]] = None, closes: Optional[List[float]] = None,
                 description: Optional[str] = None):
        self.quotes = quotes or {}
        self.closes = closes if closes is not None else []
        self.description = description

    def quote(self, symbol: str) -> Quote:
        if symbol not in self.quotes:
            raise RuntimeError(f"No stub quote for {symbol}")
        return self.quotes[symbol]

    def history(self, symbol: str, days: int) -> List[float]:
        return list(self.closes)

    def describe(self, symbol: str) -> Optional[str]:
        return self.description

class StubTrendSource(TrendSource):
    def __init__(self, trend: str = "sideways", confidence: float = 0.5):
        self.trend = trend
        self.confidence = confidence

    def predict(self, symbol: str, horizon_days: int = 5) -> TrendPrediction:
        return {"trend": self.trend, "confidence": self.confidence, "series": [0.0] * horizon_days}

class StubSentimentSource(SentimentSource):
    def __init__(self, score: float = 0.0, confidence: float = 0.5):
        self.score = score
        self.confidence = confidence

    def analyze(self, symbol: str) -> SentimentReading:
        return {"score": self.score, "confidence": self.confidence, "emotion": "neutral"}

class FailingSource(TrendSource, SentimentSource, QuoteSource):
    """Every call raises, as an unreachable upstream would."""

    def __init__(self, message: str = "upstream unavailable"):
        self.message = message

    def predict(self, symbol: str, horizon_days: int = 5) -> TrendPrediction:
        raise RuntimeError(self.message)

    def analyze(self, symbol: str) -> SentimentReading:
        raise RuntimeError(self.message)

    def quote(self, symbol: str) -> Quote:
        raise RuntimeError(self.message)

    def history(self, symbol: str, days: int) -> List[float]:
        raise RuntimeError(self.message)

    def describe(self, symbol: str) -> Optional[str]:
        raise RuntimeError(self.message)

def stub_sources() -> Sources:
    """Deterministic offline sources; usable as SOURCES_MODULE=signalfolio.model_impl.stub_sources:stub_sources."""
    quotes = StubQuoteSource({
        "^INDIAVIX": {"price": 14.0, "change_percent": -2.0},
        "^NSEI": {"price": 21500.0, "change_percent": 1.4},
        "^BSESN": {"price": 72000.0, "change_percent": 1.1},
        "^VIX": {"price": 18.0, "change_percent": 0.5},
        "^GSPC": {"price": 4000.0, "change_percent": 0.2},
    })
    return Sources(quotes, StubTrendSource("up", 0.7), StubSentimentSource(2.0, 0.6))
