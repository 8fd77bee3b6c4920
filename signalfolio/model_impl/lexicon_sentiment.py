# PURPOSE: Sentiment source that scores descriptive text with a weighted word lexicon.
# CONTEXT: Sums word valences (a preceding negation flips the sign), halves the
#          total and clamps it to [-5, 5]. Longer text gives higher confidence.

from __future__ import annotations
import re
from typing import Dict, Optional

from signalfolio.constants.sentiment_lexicon import LEXICON, NEGATIONS
from signalfolio.model_interface.sources import QuoteSource, SentimentSource
from signalfolio.model_interface.types import Emotion, SentimentReading

_TOKEN = re.compile(r"[a-z']+")

# Characters of text needed for full confidence.
FULL_CONFIDENCE_CHARS = 1000
EMOTION_THRESHOLD = 1.0


def score_text(text: str, lexicon: Dict[str, int] = LEXICON) -> int:
    """Raw lexicon score: sum of word weights, negated after a negation word."""
    total = 0
    negate_next = False
    for token in _TOKEN.findall(text.lower()):
        if token in NEGATIONS:
            negate_next = True
            continue
        weight = lexicon.get(token, 0)
        if weight:
            total += -weight if negate_next else weight
        negate_next = False
    return total


def _emotion(score: float) -> Emotion:
    if score > EMOTION_THRESHOLD:
        return "positive"
    if score < -EMOTION_THRESHOLD:
        return "negative"
    return "neutral"


def analyze_text(text: str) -> SentimentReading:
    """
    Score a block of text.

    returns:
    - SentimentReading – {"score": -5..5, "emotion": str, "confidence": 0..1}
    """
    score = max(-5.0, min(5.0, score_text(text) / 2))
    return {
        "score": score,
        "emotion": _emotion(score),
        "confidence": round(min(1.0, len(text) / FULL_CONFIDENCE_CHARS), 4),
    }


class LexiconSentimentModel(SentimentSource):
    """Scores the quote source's description of a symbol, or a generic sentence if it has none."""

    def __init__(self, quotes: QuoteSource):
        self.quotes = quotes

    def analyze(self, symbol: str) -> SentimentReading:
        text: Optional[str] = self.quotes.describe(symbol)
        if not text:
            text = f"The market for {symbol} has been experiencing typical fluctuations in recent trading sessions."
        return analyze_text(text)
