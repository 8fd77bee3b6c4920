#!/usr/bin/env python3
# PURPOSE: Simple command-line interface to ask the Agent for an allocation.
# CONTEXT: Lets you exercise the pipeline locally without deploying the Lambda.
#          Input: "<risk_profile> [locale]", e.g. "moderate US". "market IN" prints a snapshot.

import json, sys
from signalfolio.agent import Agent
from signalfolio.logging_setup import configure_logging

configure_logging()
agent = Agent()

print("signalfolio CLI — type '<risk profile> [locale]' or 'market [locale]'. Ctrl+C to exit.")

while True:
    try:
        parts = input("> ").split()
        if not parts:
            continue

        if parts[0].lower() == "market":
            payload = {"action": "market"}
        else:
            payload = {"action": "allocate", "risk_profile": parts[0].lower()}
        if len(parts) > 1:
            payload["locale"] = parts[1].upper()

        out = agent.handle(payload)
        print(json.dumps(out, indent=2))

    except (EOFError, KeyboardInterrupt):
        print("\nBye!")
        sys.exit(0)
