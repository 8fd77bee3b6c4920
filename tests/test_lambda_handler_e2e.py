import json
from signalfolio.lambda_handler import handler

class Ctx: aws_request_id = "req-xyz"

def test_handler_allocation_ok():
    body = {"risk_profile": "aggressive", "market_condition": "bullish"}
    evt = {"body": json.dumps(body), "headers": {"x-correlation-id": "corr-1"}}
    resp = handler(evt, Ctx())
    assert resp["statusCode"] == 200
    data = json.loads(resp["body"])
    assert data["status"] == "ok"
    assert data["allocation"] == {"equity": 80, "debt": 10, "gold": 7, "cash": 3}
    assert "metrics" in data and "advice" in data

def test_handler_invalid_request_is_error_body():
    resp = handler({"body": json.dumps({"risk_profile": "yolo", "market_condition": "bullish"})}, Ctx())
    data = json.loads(resp["body"])
    assert resp["statusCode"] == 200
    assert data["status"] == "error"
    assert "at $.risk_profile" in data["messages"][0]["content"]
