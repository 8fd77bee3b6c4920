import importlib, os
from typing import NamedTuple
from .sources import QuoteSource, TrendSource, SentimentSource

class Sources(NamedTuple):
    quotes: QuoteSource
    trend: TrendSource
    sentiment: SentimentSource

def load_sources() -> Sources:
    modpath = os.getenv("SOURCES_MODULE")
    if not modpath:
        from signalfolio.tools.yahoo_tool import YahooQuoteSource
        from signalfolio.model_impl.polynomial_trend import PolynomialTrendModel
        from signalfolio.model_impl.lexicon_sentiment import LexiconSentimentModel
        quotes = YahooQuoteSource()
        return Sources(quotes, PolynomialTrendModel(quotes), LexiconSentimentModel(quotes))
    mod, factory = modpath.split(":")
    return getattr(importlib.import_module(mod), factory)()
