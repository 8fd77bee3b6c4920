import pytest
from jsonschema import ValidationError

from signalfolio.agent_io import (
    load_schema,
    validate_allocation_request,
    validate_allocation_result,
    validate_agent_output,
    make_ok_message,
    error_to_string,
)

def test_load_schema_reads_agent_output():
    schema = load_schema("schemas/agent_output.schema.json")
    assert isinstance(schema, dict)
    assert schema.get("title") == "AgentOutput"

def test_load_schema_missing_file():
    with pytest.raises(FileNotFoundError):
        load_schema("schemas/nope.schema.json")

def test_validate_allocation_request_accepts_minimal_valid():
    validate_allocation_request({"risk_profile": "moderate"})

def test_validate_allocation_request_rejects_invalid_type():
    with pytest.raises(ValidationError):
        validate_allocation_request({"risk_profile": 123})

def test_validate_allocation_request_rejects_out_of_range_sentiment():
    bad = {"risk_profile": "moderate",
           "market": {"volatility_index": 20, "change_percent": 0, "sentiment": {"score": 9, "confidence": 0.5}}}
    with pytest.raises(ValidationError):
        validate_allocation_request(bad)

def test_validate_allocation_result_requires_integer_buckets():
    ok = {"allocation": {"equity": 50, "debt": 30, "gold": 12, "cash": 8}, "expected_return": 7.2, "risk_level": 11.3}
    validate_allocation_result(ok)
    bad = {"allocation": {"equity": 50.5, "debt": 30, "gold": 12, "cash": 8}, "expected_return": 7.2, "risk_level": 11.3}
    with pytest.raises(ValidationError):
        validate_allocation_result(bad)

def test_make_ok_message():
    m = make_ok_message("hello")
    assert m == {"role": "assistant", "content": "hello"}

def test_validate_agent_output_happy_path():
    out = {
        "status": "ok",
        "run_id": "a1b2c3d4-20261019101500",
        "messages": [make_ok_message("Short advice")],
        "market": {"condition": "neutral", "locale": "IN", "fallback": False},
        "allocation": {"equity": 50, "debt": 30, "gold": 12, "cash": 8},
        "metrics": {"expected_return": 7.22, "risk_level": 11.32},
        "advice": {"summary": "Concise", "one_action": "Rebalance quarterly.", "disclaimer": "Educational only; not financial advice."},
        "risk_alerts": [],
        "latency_ms": 12.3,
    }
    validate_agent_output(out)

def test_ok_output_needs_a_payload():
    with pytest.raises(ValidationError):
        validate_agent_output({"status": "ok", "messages": []})

def test_error_to_string_validationerror_path():
    with pytest.raises(ValidationError) as e:
        validate_allocation_request({"risk_profile": "moderate", "market": {"volatility_index": "high", "change_percent": 0}})
    msg = error_to_string(e.value)
    assert "at $.market.volatility_index" in msg

def test_error_to_string_plain_exception():
    assert error_to_string(ValueError("bad")) == "ValueError: bad"
