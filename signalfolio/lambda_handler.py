"""
AWS Lambda handler: normalises the event, calls Agent, returns schema-valid output.
Adds structured, JSON CloudWatch-friendly logs with correlation IDs.

PURPOSE:
- Entry point for AWS Lambda behind API Gateway.
- Delegates to Agent, validates the result against the AgentOutput schema, and
  returns an HTTP-style response.
"""

from __future__ import annotations
import json
import time
import traceback
import uuid
from typing import Any, Dict

from jsonschema import validate, ValidationError

from signalfolio.logging_setup import configure_logging
from signalfolio.observability import init_observability
from signalfolio.agent import Agent
from signalfolio.agent_io import make_ok_message, load_schema


log = configure_logging()
init_observability()


def _response(body: Dict[str, Any], status_code: int = 200) -> Dict[str, Any]:
    """Wrap a dict as an API Gateway proxy response with a JSON body."""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """
    Lambda entry point.

    flow:
    1) Bind request/correlation IDs for traceability.
    2) Normalise body (API Gateway proxy format or a bare dict), then bind the
       requested action and risk profile so every later log line carries them.
    3) Create Agent and call handle(body).
    4) Validate result against the AgentOutput schema; a violation becomes an
       error payload (still HTTP 200 to avoid API Gateway retries).
    5) Unhandled exceptions become an error payload and are logged with a traceback.
    """
    t0 = time.time()

    request_id = getattr(context, "aws_request_id", None) or str(uuid.uuid4())
    correlation_id = (event.get("headers", {}) or {}).get("x-correlation-id") or str(uuid.uuid4())
    req_log = log.bind(request_id=request_id, correlation_id=correlation_id)

    req_log.info("request.received", event_type=type(event).__name__)

    body = event
    if isinstance(event, dict) and "body" in event:
        try:
            body = json.loads(event["body"]) if isinstance(event["body"], str) else (event["body"] or {})
        except json.JSONDecodeError:
            body = {}
            req_log.warning("request.body_parse_failed")

    if isinstance(body, dict):
        req_log = req_log.bind(action=body.get("action") or "allocate", risk_profile=body.get("risk_profile"))
        req_log.info("request.parsed", locale=body.get("locale"))

    try:
        agent = Agent()
        result = agent.handle(body)

        try:
            schema = load_schema("schemas/agent_output.schema.json")
            validate(result, schema)
        except (FileNotFoundError, ValidationError) as e:
            latency_ms = round((time.time() - t0) * 1000, 1)
            err_payload = {
                "status": "error",
                "messages": [make_ok_message(f"AgentOutput schema violation: {str(e)}")],
                "latency_ms": latency_ms,
                "trace": result.get("trace", []),
            }
            req_log.error("response.schema_invalid", error=str(e), latency_ms=latency_ms)
            return _response(err_payload, 200)

        latency_ms = round((time.time() - t0) * 1000, 1)
        result.setdefault("latency_ms", latency_ms)
        req_log.info(
            "response.success",
            status=result.get("status"),
            condition=(result.get("market") or {}).get("condition"),
            latency_ms=latency_ms,
        )
        return _response(result, 200)

    except Exception as e:
        latency_ms = round((time.time() - t0) * 1000, 1)
        req_log.error(
            "response.error",
            error=str(e),
            traceback=traceback.format_exc(limit=2),
            latency_ms=latency_ms,
        )
        error_body = {
            "status": "error",
            "messages": [make_ok_message(f"{type(e).__name__}: {e}")],
            "latency_ms": latency_ms,
        }
        return _response(error_body, 200)
