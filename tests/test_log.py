import logging

import pytest

from survsim import logger, use_logging


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_use_logging_sets_level_and_console_handler():
    configured = use_logging("debug", output="console")
    assert configured is logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_use_logging_none_silences():
    use_logging("none")
    assert not logger.isEnabledFor(logging.CRITICAL)


def test_use_logging_file_output(tmp_path):
    use_logging("info", output="both", log_path=str(tmp_path))
    assert len(logger.handlers) == 2
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    logfiles = list(tmp_path.glob("*.log"))
    assert len(logfiles) == 1
    assert "hello" in logfiles[0].read_text()
    for handler in logger.handlers:
        handler.close()


def test_use_logging_rejects_unknown_values():
    with pytest.raises(ValueError):
        use_logging("verbose")
    with pytest.raises(ValueError):
        use_logging("info", output="syslog")
