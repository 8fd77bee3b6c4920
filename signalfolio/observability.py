"""
Observability bootstrap.

PURPOSE:
- Optionally enables AWS X-Ray tracing when USE_XRAY=1.
- Provides a subsegment context manager for pipeline stages (snapshot, classify, allocate).
- Degrades to a no-op when X-Ray is disabled or the SDK is unavailable.
"""
from __future__ import annotations
import os


def init_observability():
    """
    Optionally initialise AWS X-Ray instrumentation.

    returns:
    - xray_recorder if configured, else None.

    notes:
    - patch_all() instruments requests, which yfinance uses for its HTTP calls.
    """
    use_xray = os.getenv("USE_XRAY", "0") == "1"
    if not use_xray:
        return None
    try:
        from aws_xray_sdk.core import xray_recorder, patch_all
        xray_recorder.configure(service=os.getenv("XRAY_SERVICE_NAME", "signalfolio"))
        patch_all()
        return xray_recorder
    except Exception:
        # Tracing must never block the request.
        return None


class xray_segment:
    """
    Context manager for manual subsegments.

    >>> with xray_segment("classify"):
    ...     result = classify_signals(22.0, 0.4)

    Begins a subsegment on entry and ends it on exit; a no-op when tracing is off.
    """

    def __init__(self, name: str):
        self.name = name
        self.sub = None

    def __enter__(self):
        if os.getenv("USE_XRAY", "0") != "1":
            return self
        try:
            from aws_xray_sdk.core import xray_recorder
            self.sub = xray_recorder.begin_subsegment(self.name)
        except Exception:
            self.sub = None
        return self

    def __exit__(self, exc_type, exc, tb):
        if self.sub is None:
            return False
        try:
            from aws_xray_sdk.core import xray_recorder
            xray_recorder.end_subsegment()
        except Exception:
            pass
        return False
