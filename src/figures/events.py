"""Structured event lines for the demo's --verbose mode."""

from __future__ import annotations

import json
import sys
import time


def log_event(event: str, **fields) -> None:
    """Emit a structured JSON log line on stderr."""
    payload = {"event": event, "ts": time.time(), **fields}
    try:
        print(json.dumps(payload), file=sys.stderr)
    except (TypeError, ValueError):
        print(f"[event:{event}] {fields}", file=sys.stderr)
