"""
JSON-lines logging for the API and adapters.

One object per line on stdout. Call sites attach fields with
`extra={"context": {...}}`; context keys never overwrite the base fields.
"""
import json
import logging
import sys
from datetime import datetime, timezone

from .config import config

ROOT_LOGGER = "sirdab"

_BASE_FIELDS = ("ts", "level", "logger", "env", "message", "exc")


class JsonLogFormatter(logging.Formatter):
    def __init__(self, env: str = config.ENV):
        super().__init__()
        self.env = env

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "env": self.env,
            "message": record.getMessage(),
        }
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict):
            for key, value in ctx.items():
                payload[f"ctx_{key}" if key in _BASE_FIELDS else key] = value
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        # Arabic listing text stays readable
        return json.dumps(payload, ensure_ascii=False, default=str)


def _root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonLogFormatter())
        root.addHandler(handler)
        root.setLevel(config.LOG_LEVEL)
        root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    """Logger under the `sirdab` tree; the handler lives on the tree root."""
    _root()
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
