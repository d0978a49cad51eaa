"""Structured Logging — tests for the JSON formatter and audio feedback adapter."""

import json
import logging

from calculator.infrastructure.audio_feedback import TONE, ToneFeedback
from calculator.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "calculator.test", logging.INFO, __file__, 1, "Key %s", ("7",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "calculator.test"
    assert payload["message"] == "Key 7"
    assert "timestamp" in payload


def test_json_formatter_surfaces_extra_fields():
    payload = json.loads(JSONFormatter().format(
        _record(calculator_id="c-1", key="7", status="idle"),
    ))
    assert payload["calculator_id"] == "c-1"
    assert payload["key"] == "7"
    assert payload["status"] == "idle"
    assert "error_code" not in payload


def test_json_formatter_keeps_non_ascii_glyphs():
    line = JSONFormatter().format(_record(key="÷"))
    assert "÷" in line


def test_tone_matches_key_click():
    assert TONE.frequency_hz == 800.0
    assert TONE.waveform == "sine"
    assert TONE.duration_s == 0.1
    assert (TONE.start_gain, TONE.end_gain) == (0.1, 0.01)


def test_tone_feedback_counts_cues():
    feedback = ToneFeedback("c-1")
    feedback("digit")
    feedback("evaluate")
    assert feedback.cues_emitted == 2
