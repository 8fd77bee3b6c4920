"""signalfolio: market-condition classification and risk-based asset allocation."""

__version__ = "0.2.0"
