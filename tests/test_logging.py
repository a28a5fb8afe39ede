import logging

import finkalk
from finkalk import logging_config


def test_version():
    assert finkalk.__version__ == "0.1.0"


def test_configure_logging_sets_level():
    logging_config.configure_logging(level="DEBUG")
    logging_config.configure_logging(level="WARNING")
    for name in logging_config.LOGGER_NAMES:
        logger = logging.getLogger(name)
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv(logging_config.ENV_LOG_LEVEL, "error")
    logging_config.configure_logging()
    assert logging.getLogger("ui").level == logging.ERROR


def test_unknown_level_falls_back_to_info():
    logging_config.configure_logging(level="chatty")
    assert logging.getLogger("export").level == logging.INFO


def test_module_loggers_inherit_handler(capsys):
    logging_config.configure_logging(level="INFO")
    logging_config.get_logger("ui.mortgage").warning("rate rejected")
    assert "ui.mortgage - WARNING - rate rejected" in capsys.readouterr().out
