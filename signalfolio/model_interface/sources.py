from typing import List, Optional
from .types import TrendPrediction, SentimentReading, Quote

class QuoteSource:
    def quote(self, symbol: str) -> Quote:
        raise NotImplementedError

    def history(self, symbol: str, days: int) -> List[float]:
        raise NotImplementedError

    def describe(self, symbol: str) -> Optional[str]:
        raise NotImplementedError

class TrendSource:
    def predict(self, symbol: str, horizon_days: int = 5) -> TrendPrediction:
        raise NotImplementedError

class SentimentSource:
    def analyze(self, symbol: str) -> SentimentReading:
        raise NotImplementedError
