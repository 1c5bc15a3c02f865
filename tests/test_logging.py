# tests/test_logging.py
import json
import logging
import sys

from sirdab.adapters.logging_utils import ROOT_LOGGER, JsonLogFormatter, get_logger


def _record(msg="ad created", context=None, exc_info=None):
    record = logging.LogRecord("sirdab.api", logging.INFO, __file__, 1, msg, None, exc_info)
    if context is not None:
        record.context = context
    return record


def test_context_is_merged_without_clobbering_base_fields():
    line = JsonLogFormatter(env="test").format(
        _record(context={"ad_id": 7, "city": "الرياض", "level": "spoofed"})
    )
    payload = json.loads(line)

    assert payload["message"] == "ad created"
    assert payload["level"] == "INFO"
    assert payload["env"] == "test"
    assert payload["ad_id"] == 7
    assert payload["ctx_level"] == "spoofed"
    assert "الرياض" in line
    assert payload["ts"].endswith("+00:00")


def test_exception_text_is_attached():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        payload = json.loads(JsonLogFormatter().format(_record(exc_info=sys.exc_info())))

    assert "RuntimeError: boom" in payload["exc"]


def test_loggers_share_one_handler_under_the_root():
    a = get_logger("sirdab.api")
    b = get_logger("storage")

    assert b.name == "sirdab.storage"
    assert a.handlers == [] and b.handlers == []
    assert len(logging.getLogger(ROOT_LOGGER).handlers) == 1
