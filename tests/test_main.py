import logging
from pathlib import Path

import pytest

from delve.log import configure_logging
from delve.main import build_parser


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.seed is None
    assert args.log_level is None
    assert args.log_file is None


def test_parser_options():
    args = build_parser().parse_args(["--seed", "42", "--log-level", "debug", "--log-file", "run.log"])
    assert args.seed == 42
    assert args.log_level == "debug"
    assert args.log_file == Path("run.log")


def test_env_level_used_when_no_argument(monkeypatch, root_logger):
    monkeypatch.setenv("DELVE_LOG_LEVEL", "WARNING")
    configure_logging()
    assert root_logger.level == logging.WARNING


def test_argument_beats_env_and_file_receives_records(monkeypatch, root_logger, tmp_path):
    monkeypatch.setenv("DELVE_LOG_LEVEL", "WARNING")
    log_file = tmp_path / "delve.log"
    configure_logging("debug", log_file)
    assert root_logger.level == logging.DEBUG
    logging.getLogger("delve.test").debug("hello")
    for handler in root_logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")


def test_unknown_level_name_falls_back_to_info(root_logger):
    configure_logging("chatty")
    assert root_logger.level == logging.INFO
