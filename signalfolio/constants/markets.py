# PURPOSE: Per-locale index symbols and the defaults used when quotes fail.

MARKET_SYMBOLS = {
    "US": {
        "volatility_index": "^VIX",
        "main_index": "^GSPC",
        "additional_indices": [
            {"symbol": "^IXIC", "name": "NASDAQ"},
            {"symbol": "^DJI", "name": "Dow Jones"},
            {"symbol": "^RUT", "name": "Russell 2000"},
        ],
    },
    "IN": {
        "volatility_index": "^INDIAVIX",
        "main_index": "^NSEI",
        "additional_indices": [
            {"symbol": "^BSESN", "name": "Sensex"},
            {"symbol": "^NSEBANK", "name": "Bank Nifty"},
            {"symbol": "^CNXIT", "name": "Nifty IT"},
        ],
    },
    # No listed volatility index; the main index stands in as a proxy.
    "UK": {
        "volatility_index": "^FTSE",
        "main_index": "^FTSE",
        "additional_indices": [
            {"symbol": "^FTMC", "name": "FTSE 250"},
            {"symbol": "^FTLC", "name": "FTSE 100"},
        ],
    },
    "SG": {
        "volatility_index": "^STI",
        "main_index": "^STI",
        "additional_indices": [
            {"symbol": "^STI", "name": "Straits Times Index"},
        ],
    },
}

DEFAULT_MARKET_DATA = {
    "US": {
        "volatility_index": 20.0,
        "main_index": 4000.0,
        "additional_indices": [
            {"name": "NASDAQ", "value": 12000.0, "change": -0.5},
            {"name": "Dow Jones", "value": 33000.0, "change": -0.3},
        ],
    },
    "IN": {
        "volatility_index": 16.0,
        "main_index": 21500.0,
        "additional_indices": [
            {"name": "Sensex", "value": 72000.0, "change": -0.4},
            {"name": "Bank Nifty", "value": 44000.0, "change": -0.6},
        ],
    },
}
