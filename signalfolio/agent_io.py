"""
I/O helpers for schemas and message construction.

PURPOSE: Central place for JSON schema validation and message formatting used by
         the allocation pipeline, the Agent and the Lambda handler.
CONTEXT: Keeps request and response payloads conformant to the schemas in ./schemas/
         and gives every response the same message shape.
"""

from __future__ import annotations

import json
import pathlib
from functools import lru_cache
from typing import Any, Dict

from jsonschema import Draft7Validator, ValidationError

# Repository root, where ./schemas/ lives alongside the package.
PROJECT_ROOT = pathlib.Path(__file__).resolve().parent.parent


# -------------------- Schema loading utilities -------------------- #

@lru_cache(maxsize=64)
def _load_schema_cached(abs_path: str) -> Dict[str, Any]:
    """Read and parse a JSON schema file once per absolute path."""
    p = pathlib.Path(abs_path)
    text = p.read_text(encoding="utf-8")
    return json.loads(text)


def load_schema(path: str) -> Dict[str, Any]:
    """
    Load a JSON schema from a relative or absolute path (with caching).

    parameters:
    - path: str – e.g. "schemas/agent_output.schema.json".

    returns:
    - dict – schema as a Python dictionary.

    raises:
    - FileNotFoundError – if the file is not found directly, under the project
      root, or under the current working directory.
    - json.JSONDecodeError – if the file is not valid JSON.
    """
    candidates = [pathlib.Path(path), PROJECT_ROOT / path, pathlib.Path.cwd() / path]
    for p in candidates:
        if p.exists():
            return _load_schema_cached(str(p.resolve()))
    raise FileNotFoundError(f"Schema not found at: {path}")


# -------------------- Validation helpers -------------------- #

def validate_with_schema(instance: Dict[str, Any], schema: Dict[str, Any]) -> None:
    """
    Validate an instance against a schema.

    raises:
    - ValidationError – if the instance does not conform.
    """
    Draft7Validator(schema).validate(instance)


def validate_allocation_request(payload: Dict[str, Any]) -> None:
    """Validate an allocation request (risk profile, optional locale/market inputs)."""
    validate_with_schema(payload, load_schema("schemas/allocation_request.schema.json"))


def validate_allocation_result(result: Dict[str, Any]) -> None:
    """Validate an optimizer result (allocation plus metrics)."""
    validate_with_schema(result, load_schema("schemas/allocation_result.schema.json"))


def validate_agent_output(agent_output: Dict[str, Any]) -> None:
    """Validate the final response envelope."""
    validate_with_schema(agent_output, load_schema("schemas/agent_output.schema.json"))


# -------------------- Message construction helpers -------------------- #

def make_ok_message(content: str) -> Dict[str, str]:
    """Assistant-style message (role='assistant')."""
    return {"role": "assistant", "content": str(content)}


def error_to_string(err: Exception) -> str:
    """
    Convert exceptions into readable strings for user-facing error messages.

    notes:
    - ValidationError messages include a JSON path such as $.market.vix.
    """
    if isinstance(err, ValidationError):
        path = "$" + "".join(f"[{repr(p)}]" if isinstance(p, int) else f".{p}" for p in err.path)
        return f"{err.message} at {path}"
    return f"{type(err).__name__}: {err}"


__all__ = [
    "load_schema",
    "validate_with_schema",
    "validate_allocation_request",
    "validate_allocation_result",
    "validate_agent_output",
    "make_ok_message",
    "error_to_string",
]
