"""
Agent core logic: reads the requested action, plans it, and dispatches to the
pipeline or a single model call.

PURPOSE: High-level controller for the allocation service. Records a lightweight
         trace and always answers with the AgentOutput envelope.
CONTEXT: Used by the Lambda handler and the local CLI.
"""

import os
import traceback
from typing import Dict, Any, Optional

import structlog

from signalfolio import tools
from signalfolio.agent_io import make_ok_message, error_to_string, validate_allocation_request, validate_allocation_result
from signalfolio.model_impl.optimizer import optimize_portfolio
from signalfolio.model_interface.loader import Sources, load_sources

log = structlog.get_logger(__name__)

ACTIONS = ("allocate", "optimize", "market", "prediction", "sentiment")
HORIZON_DAYS = int(os.getenv("TREND_HORIZON_DAYS", "5"))
MAX_HORIZON_DAYS = 30


class Agent:
    """High-level controller for signalfolio requests."""

    def __init__(self, sources: Optional[Sources] = None):
        self._sources = sources
        # In-memory trace of planning/execution steps for debugging.
        self.trace = []

    @property
    def sources(self) -> Sources:
        if self._sources is None:
            self._sources = load_sources()
        return self._sources

    def handle(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Main entry point.

        parameters:
        - payload: dict – request body; 'action' selects the operation
          (allocate | optimize | market | prediction | sentiment, default allocate).

        returns:
        - dict – AgentOutput envelope with 'status', 'messages' and 'trace'.
          Failures become status 'error' with a readable message and a short traceback.
        """
        try:
            plan = self._plan(payload)
            self.trace.append(plan)

            if plan["next"] == "pipeline":
                from signalfolio.pipeline import run_pipeline
                out = run_pipeline(payload, self._sources)
                out["trace"] = self.trace
                return out

            result = self._execute(plan["next"], plan.get("args", {}))
            out = {
                "status": "ok",
                "messages": [make_ok_message(f"Action '{plan['next']}' completed.")],
                "trace": self.trace,
            }
            if plan["next"] == "market":
                out["market"] = result
            elif plan["next"] == "optimize":
                out["allocation"] = result["allocation"]
                out["metrics"] = {"expected_return": result["expected_return"], "risk_level": result["risk_level"]}
            else:
                out["result"] = result
            return out

        except Exception as e:
            log.warning("agent.error", error=error_to_string(e))
            tb = traceback.format_exc(limit=2)
            return {
                "status": "error",
                "messages": [make_ok_message(error_to_string(e)), {"role": "system", "content": tb}],
                "trace": self.trace,
            }

    def _plan(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Rule-based planner.

        returns:
        - dict – {"next": "pipeline"} for allocate, otherwise {"next": <action>, "args": {...}}.
          horizon_days is clamped to 1..MAX_HORIZON_DAYS.

        raises:
        - ValueError – for a non-dict payload or an unknown action.
        """
        if not isinstance(payload, dict):
            raise ValueError("Request body must be a JSON object")
        action = payload.get("action") or "allocate"
        if action not in ACTIONS:
            raise ValueError(f"Unknown action: {action!r} (expected one of {list(ACTIONS)})")
        if action == "allocate":
            return {"next": "pipeline"}
        if action == "optimize":
            return {"next": "optimize", "args": {"payload": payload}}
        if action == "market":
            return {"next": "market", "args": {"locale": payload.get("locale")}}
        return {"next": action, "args": {
            "symbol": payload.get("symbol") or "^NSEI",
            "horizon_days": max(1, min(MAX_HORIZON_DAYS, int(payload.get("horizon_days") or HORIZON_DAYS))),
        }}

    def _execute(self, name: str, args: Dict[str, Any]):
        """
        Run a single action.

        raises:
        - RuntimeError – wraps upstream failures with the action name; ValueError
          for invalid input passes through unchanged.
        """
        if name == "optimize":
            payload = args["payload"]
            validate_allocation_request(payload)
            if not payload.get("market_condition"):
                raise ValueError("Risk profile and market condition are required")
            result = optimize_portfolio(payload["risk_profile"], payload["market_condition"])
            validate_allocation_result(result)
            return result

        try:
            if name == "market":
                return tools.market_snapshot.build_snapshot(self.sources, args.get("locale"))
            if name == "prediction":
                return self.sources.trend.predict(args["symbol"], args["horizon_days"])
            if name == "sentiment":
                return self.sources.sentiment.analyze(args["symbol"])
        except Exception as e:
            raise RuntimeError(f"Action '{name}' failed: {e}") from e
        raise ValueError(f"Unknown action: {name}")
