import json
import logging

from cnfcyk.cyk import recognize
from cnfcyk.logging_config import setup_logger


def test_handler_added_once(tmp_path):
    log_file = tmp_path / "cyk.log"
    logger = setup_logger("cnfcyk", log_file=str(log_file))
    again = setup_logger("cnfcyk", log_file=str(log_file), level="DEBUG")
    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_text_lines(tmp_path):
    log_file = tmp_path / "cyk.log"
    logger = setup_logger("cnfcyk", log_file=str(log_file), level="INFO")
    logger.info("hello %s", "world")
    logger.handlers[0].flush()

    line = log_file.read_text(encoding="utf-8").strip()
    assert line.endswith("| INFO | cnfcyk | hello world")


def test_json_lines_include_recognizer_debug(tmp_path, grammar):
    log_file = tmp_path / "cyk.log"
    logger = setup_logger("cnfcyk", log_file=str(log_file), level="DEBUG", json_lines=True)
    recognize(grammar, "abc")
    logger.handlers[0].flush()

    records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert records
    assert {r["name"] for r in records} == {"cnfcyk.cyk"}
    assert all(r["level"] == "DEBUG" for r in records)
    assert records[-1]["message"] == "word of length 3 accepted"


def test_json_lines_carry_verdict_fields(tmp_path, grammar):
    log_file = tmp_path / "cyk.log"
    logger = setup_logger("cnfcyk", log_file=str(log_file), level="DEBUG", json_lines=True)
    recognize(grammar, "ab")
    recognize(grammar, "")
    logger.handlers[0].flush()

    records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    verdicts = [r for r in records if "accepted" in r]
    assert [(r["word_length"], r["accepted"]) for r in verdicts] == [(2, False), (0, False)]
    assert "word_length" not in records[0]
