# PURPOSE: End-to-end allocation pipeline: validate the request, work out the market
#          condition, allocate for the risk profile, add metrics, alerts and local advice,
#          and validate the final output against its schema.
# CONTEXT: Used by the Agent for the default "allocate" action and runnable on its own.

from __future__ import annotations
import json, time, uuid
from datetime import datetime
from zoneinfo import ZoneInfo
from typing import Optional

import structlog

from signalfolio.agent_io import (
    make_ok_message,
    validate_agent_output,
    validate_allocation_request,
)
from signalfolio.model_impl.classifier import classify_signals, determine_market_trend
from signalfolio.model_impl.optimizer import allocate, portfolio_metrics
from signalfolio.model_interface.loader import Sources, load_sources
from signalfolio.observability import xray_segment
from signalfolio.tools.market_snapshot import build_snapshot, normalize_locale
from signalfolio.tools.risk_alerts import risk_alerts

TZ = ZoneInfo("Europe/London")
log = structlog.get_logger(__name__)

def _run_id() -> str:
    """Readable run ID: short random prefix plus a timestamp, e.g. 'a1b2c3d4-20261019101500'."""
    return uuid.uuid4().hex[:8] + "-" + datetime.now(TZ).strftime("%Y%m%d%H%M%S")

def _market_from_inputs(market: dict, locale: str) -> dict:
    """
    Classify from caller-supplied indicators instead of fetching quotes.

    A missing trend or sentiment reading means that source is unavailable, so the
    two-signal fallback decides.
    """
    vix = float(market["volatility_index"])
    change = float(market["change_percent"])
    trend = market.get("trend")
    result = classify_signals(vix, change, trend, market.get("sentiment"))
    return {
        "locale": locale,
        "condition": result["condition"],
        "indicators": {
            "volatility_index": vix,
            "main_index_change": change,
            "trend": determine_market_trend(change, trend),
        },
        "signals": result["signals"],
        "scores": result["scores"],
        "fallback": result["fallback"],
    }

def resolve_market(payload: dict, sources: Optional[Sources] = None) -> dict:
    """
    Work out the market view for a request.

    order:
    1) explicit `market_condition` is used as-is;
    2) `market` indicators are classified directly;
    3) otherwise a live snapshot is built from the quote/trend/sentiment sources.
    """
    locale = normalize_locale(payload.get("locale"))
    if payload.get("market_condition"):
        return {"locale": locale, "condition": payload["market_condition"], "fallback": False}
    if payload.get("market"):
        return _market_from_inputs(payload["market"], locale)
    return build_snapshot(sources or load_sources(), locale)

def _local_advice(alloc: dict, metrics: dict, risk_profile: str, condition: str) -> dict:
    """
    Build a short plain-language advice block without calling an LLM.

    returns:
    - dict – {"summary": str, "one_action": str, "disclaimer": str}
    """
    summary = (
        f"For a {risk_profile} profile in a {condition} market, target {alloc['equity']}% equity, "
        f"{alloc['debt']}% debt, {alloc['gold']}% gold and {alloc['cash']}% cash. "
        f"This mix implies roughly {metrics['expected_return']:.1f}% expected annual return "
        f"at a risk level of about {metrics['risk_level']:.1f}%."
    )
    if condition == "bearish":
        one_action = "Shift new contributions toward debt and gold until conditions improve."
    elif condition == "bullish":
        one_action = "Rebalance toward the equity target, adding in stages rather than at once."
    else:
        one_action = "Rebalance to the target mix and review again next quarter."
    disclaimer = "Educational only; not financial advice."
    return {"summary": summary[:1800], "one_action": one_action, "disclaimer": disclaimer}

def run_pipeline(payload: dict, sources: Optional[Sources] = None) -> dict:
    """
    End-to-end pipeline.

    steps:
    1) Validate input against the AllocationRequest schema.
    2) Resolve the market condition (explicit, supplied indicators, or live snapshot).
    3) Allocate for the risk profile and compute metrics.
    4) Raise risk alerts and build local advice.
    5) Assemble output with run_id and latency, then validate against AgentOutput.

    parameters:
    - payload: dict – request body
    - sources: Sources|None – injected data sources; defaults to load_sources()

    returns:
    - dict – response envelope with market, allocation, metrics, advice and alerts
    """
    t0 = time.time()

    validate_allocation_request(payload)
    risk_profile = payload["risk_profile"]

    with xray_segment("resolve_market"):
        market = resolve_market(payload, sources)

    with xray_segment("allocate"):
        alloc = allocate(risk_profile, market["condition"])
        metrics = portfolio_metrics(alloc)

    alerts = risk_alerts(alloc, market)
    advice = _local_advice(alloc, metrics, risk_profile, market["condition"])

    out = {
        "status": "ok",
        "run_id": _run_id(),
        "messages": [make_ok_message(advice["summary"])],
        "market": market,
        "allocation": alloc,
        "metrics": metrics,
        "advice": advice,
        "risk_alerts": alerts,
        "latency_ms": round((time.time() - t0) * 1000, 1),
    }
    log.info("pipeline.complete", risk_profile=risk_profile, condition=market["condition"],
             fallback=market.get("fallback", False), latency_ms=out["latency_ms"])

    validate_agent_output(out)
    return out

if __name__ == "__main__":
    demo = {"risk_profile": "moderate", "market": {"volatility_index": 22.0, "change_percent": 1.4}}
    print(json.dumps(run_pipeline(demo), indent=2))
