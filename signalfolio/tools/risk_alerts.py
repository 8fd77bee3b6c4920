def risk_alerts(allocation: dict, snapshot: dict):
    alerts = []
    ind = snapshot.get("indicators") or {}
    vix = float(ind.get("volatility_index", 0) or 0)
    eq = int(allocation.get("equity", 0))
    defensive = int(allocation.get("debt", 0)) + int(allocation.get("cash", 0))
    if vix >= 30:
        alerts.append({"type":"volatility","severity":"high",
                       "evidence":f"Volatility index at {vix:.1f} (>= 30)",
                       "suggested_action":"Stagger new equity purchases; keep cash for rebalancing."})
    elif vix >= 25:
        alerts.append({"type":"volatility","severity":"medium",
                       "evidence":f"Volatility index at {vix:.1f} (>= 25)",
                       "suggested_action":"Review risk tolerance before adding equity."})
    if eq > 70:
        alerts.append({"type":"equity_concentration","severity":"medium",
                       "evidence":f"Equity at {eq}% of portfolio",
                       "suggested_action":"Confirm you can hold through a drawdown of this size."})
    if defensive >= 70:
        alerts.append({"type":"defensive_tilt","severity":"low",
                       "evidence":f"Debt and cash at {defensive}% of portfolio",
                       "suggested_action":"Check that expected returns still meet your goals."})
    if snapshot.get("fallback"):
        alerts.append({"type":"data_quality","severity":"low",
                       "evidence":"Forecast or sentiment data unavailable; reduced signal model used",
                       "suggested_action":"Re-run later before making large changes."})
    return alerts
