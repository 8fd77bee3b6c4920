from typing import TypedDict, Literal, List, Dict, Optional

RiskProfile = Literal["conservative", "moderate", "aggressive"]
MarketCondition = Literal["bearish", "neutral", "bullish"]
Trend = Literal["up", "down", "sideways"]
Emotion = Literal["positive", "negative", "neutral"]

RISK_PROFILES = ("conservative", "moderate", "aggressive")
MARKET_CONDITIONS = ("bearish", "neutral", "bullish")

class Signal(TypedDict):
    name: str
    value: MarketCondition
    weight: float

class TrendPrediction(TypedDict):
    trend: Trend
    confidence: float
    series: List[float]

class SentimentReading(TypedDict, total=False):
    score: float
    confidence: float
    emotion: Emotion

class Quote(TypedDict):
    price: float
    change_percent: float

class Allocation(TypedDict):
    equity: int
    debt: int
    gold: int
    cash: int

class Classification(TypedDict):
    condition: MarketCondition
    signals: List[Signal]
    scores: Dict[str, float]
    fallback: bool

class PortfolioMetrics(TypedDict):
    expected_return: float
    risk_level: float

class IndexReading(TypedDict):
    name: str
    value: float
    change: float

class Indicators(TypedDict, total=False):
    volatility_index: float
    main_index: float
    main_index_change: float
    trend: Trend

class MarketSnapshot(TypedDict, total=False):
    locale: str
    condition: MarketCondition
    indicators: Indicators
    local_indices: List[IndexReading]
    fallback: bool
    error: Optional[str]
