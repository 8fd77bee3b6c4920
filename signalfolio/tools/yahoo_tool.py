# PURPOSE: Quote source backed by Yahoo Finance through the yfinance library.
# CONTEXT: Supplies latest price/change, recent closes, and a descriptive text for a
#          symbol to the trend and sentiment models and to the market snapshot.

from __future__ import annotations
from typing import List, Optional

import yfinance as yf

from signalfolio.model_interface.sources import QuoteSource
from signalfolio.model_interface.types import Quote


def _as_float(value) -> Optional[float]:
    """Convert a yfinance field to float; None or NaN become None."""
    if value is None:
        return None
    try:
        f = float(value)
    except (TypeError, ValueError):
        return None
    return None if f != f else f


class YahooQuoteSource(QuoteSource):
    """
    Thin adapter over yfinance.Ticker.

    Errors from yfinance or empty results are raised as RuntimeError with the
    symbol in the message, so callers can decide on a fallback.
    """

    def quote(self, symbol: str) -> Quote:
        """
        Latest price and percentage change versus the previous close.

        returns:
        - Quote – {"price": float, "change_percent": float}

        raises:
        - RuntimeError – when no price is available for the symbol.
        """
        try:
            info = yf.Ticker(symbol).fast_info
            price = _as_float(info.get("lastPrice"))
            prev = _as_float(info.get("previousClose"))
        except Exception as e:
            raise RuntimeError(f"Quote lookup failed for {symbol}: {e}") from e

        if price is None:
            raise RuntimeError(f"No price available for {symbol}")
        change = (price - prev) / prev * 100 if prev else 0.0
        return {"price": price, "change_percent": round(change, 4)}

    def history(self, symbol: str, days: int = 30) -> List[float]:
        """
        Daily closing prices over the last `days` calendar days, oldest first.

        raises:
        - RuntimeError – when the history request fails.
        """
        try:
            df = yf.Ticker(symbol).history(period=f"{int(days)}d", interval="1d")
        except Exception as e:
            raise RuntimeError(f"History lookup failed for {symbol}: {e}") from e
        if df is None or df.empty:
            return []
        return [float(c) for c in df["Close"].dropna().tolist()]

    def describe(self, symbol: str) -> Optional[str]:
        """Long business summary for the symbol, if Yahoo has one."""
        try:
            info = yf.Ticker(symbol).info or {}
        except Exception as e:
            raise RuntimeError(f"Summary lookup failed for {symbol}: {e}") from e
        return info.get("longBusinessSummary") or None
