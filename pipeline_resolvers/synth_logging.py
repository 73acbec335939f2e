"""
JSON lines for `cdk synth` diagnostics.

Each line carries the stack name, so output from a multi-environment synth
can be grepped per stack. LOG_LEVEL (default INFO) sets the threshold.
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, Optional

from aws_cdk import Stack


class StructuredLogger:
    """Prints `{"timestamp", "level", "message", "stack", **fields}` to stdout, dropping None fields."""

    def __init__(self, name: str, stack_name: Optional[str] = None) -> None:
        self.logger = logging.getLogger(name)
        self.logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
        self.stack_name = stack_name

    def _emit(self, level: int, message: str, fields: dict[str, Any]) -> None:
        if not self.logger.isEnabledFor(level):
            return
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": logging.getLevelName(level),
            "message": message,
            "stack": self.stack_name,
        }
        entry.update(fields)
        print(json.dumps({k: v for k, v in entry.items() if v is not None}, default=str))

    def debug(self, message: str, **fields: Any) -> None:
        self._emit(logging.DEBUG, message, fields)

    def info(self, message: str, **fields: Any) -> None:
        self._emit(logging.INFO, message, fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._emit(logging.WARNING, message, fields)

    def error(self, message: str, **fields: Any) -> None:
        self._emit(logging.ERROR, message, fields)


def get_logger(name: str, scope: Any = None) -> StructuredLogger:
    """Logger tagged with the name of the stack that owns `scope`."""
    return StructuredLogger(name, stack_name=Stack.of(scope).stack_name if scope is not None else None)
