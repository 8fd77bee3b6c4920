from signalfolio.tools.risk_alerts import risk_alerts

CALM = {"indicators": {"volatility_index": 14.0}, "fallback": False}

def test_no_alerts_for_balanced_mix_in_calm_market():
    assert risk_alerts({"equity": 50, "debt": 30, "gold": 12, "cash": 8}, CALM) == []

def test_high_volatility_and_equity_concentration():
    snap = {"indicators": {"volatility_index": 32.0}, "fallback": False}
    alerts = risk_alerts({"equity": 80, "debt": 10, "gold": 7, "cash": 3}, snap)
    kinds = {(a["type"], a["severity"]) for a in alerts}
    assert ("volatility", "high") in kinds
    assert ("equity_concentration", "medium") in kinds

def test_medium_volatility():
    snap = {"indicators": {"volatility_index": 26.0}}
    alerts = risk_alerts({"equity": 50, "debt": 30, "gold": 12, "cash": 8}, snap)
    assert [a["severity"] for a in alerts] == ["medium"]

def test_defensive_tilt_and_fallback_note():
    alerts = risk_alerts({"equity": 10, "debt": 60, "gold": 20, "cash": 10}, {"fallback": True})
    assert {a["type"] for a in alerts} == {"defensive_tilt", "data_quality"}
