from __future__ import annotations
import os
from typing import List, Optional

import structlog

from signalfolio.constants.markets import MARKET_SYMBOLS, DEFAULT_MARKET_DATA
from signalfolio.model_impl.classifier import MarketClassifier, determine_market_trend
from signalfolio.model_interface.loader import Sources
from signalfolio.model_interface.types import IndexReading, MarketSnapshot

log = structlog.get_logger(__name__)

DEFAULT_LOCALE = os.getenv("DEFAULT_LOCALE", "IN").upper()
HORIZON_DAYS = int(os.getenv("TREND_HORIZON_DAYS", "5"))

def normalize_locale(locale: Optional[str]) -> str:
    loc = (locale or DEFAULT_LOCALE).upper()
    return loc if loc in MARKET_SYMBOLS else "IN"

def default_snapshot(locale: str, error: Optional[str] = None) -> MarketSnapshot:
    data = DEFAULT_MARKET_DATA.get(locale) or DEFAULT_MARKET_DATA["IN"]
    return {
        "locale": locale,
        "condition": "neutral",
        "indicators": {
            "volatility_index": data["volatility_index"],
            "main_index": data["main_index"],
            "main_index_change": 0.0,
            "trend": "sideways",
        },
        "local_indices": [dict(i) for i in data["additional_indices"]],
        "fallback": True,
        "error": error,
    }

def _additional_indices(sources: Sources, locale: str) -> List[IndexReading]:
    out: List[IndexReading] = []
    for idx in MARKET_SYMBOLS[locale]["additional_indices"]:
        try:
            q = sources.quotes.quote(idx["symbol"])
        except Exception as e:
            log.warning("market.index_quote_failed", symbol=idx["symbol"], error=str(e))
            continue
        if q.get("price"):
            out.append({"name": idx["name"], "value": q["price"], "change": q.get("change_percent") or 0.0})
    return out

def build_snapshot(sources: Sources, locale: Optional[str] = None) -> MarketSnapshot:
    """
    Fetch a locale's indicators and derive its market condition and trend.

    Volatility or main-index quote failures return the locale's default
    snapshot (neutral, sideways, fallback=True); they are not raised.
    """
    loc = normalize_locale(locale)
    symbols = MARKET_SYMBOLS[loc]
    try:
        vix = sources.quotes.quote(symbols["volatility_index"])
        main = sources.quotes.quote(symbols["main_index"])
    except Exception as e:
        log.warning("market.quote_failed", locale=loc, error=str(e))
        return default_snapshot(loc, error=f"{type(e).__name__}: {e}")

    vix_value = float(vix.get("price") or 0.0)
    change = float(main.get("change_percent") or 0.0)

    classifier = MarketClassifier(sources.trend, sources.sentiment)
    prediction = classifier.fetch_trend(symbols["main_index"], HORIZON_DAYS)
    result = classifier.classify(symbols["main_index"], vix_value, change, HORIZON_DAYS, prediction=prediction)

    return {
        "locale": loc,
        "condition": result["condition"],
        "indicators": {
            "volatility_index": vix_value,
            "main_index": float(main.get("price") or 0.0),
            "main_index_change": change,
            "trend": determine_market_trend(change, prediction),
        },
        "local_indices": _additional_indices(sources, loc),
        "fallback": result["fallback"],
        "error": None,
    }
