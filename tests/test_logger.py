import logging

import pytest

from anunaya.logger import TRACE, setup_logger


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
    for name in ("Sequencer", "anunaya", "custom"):
        logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.mark.parametrize(
    "verbosity, expected",
    [
        (0, logging.ERROR),
        (1, logging.WARNING),
        (2, logging.INFO),
        (3, logging.DEBUG),
        (4, TRACE),
        (99, TRACE),
    ],
)
def test_verbosity_maps_to_level(verbosity, expected):
    assert setup_logger(verbosity, "Sequencer") == expected
    assert logging.getLogger("Sequencer").level == expected
    assert logging.getLogger("anunaya").level == expected


def test_filter_logger_gets_level():
    level = setup_logger(3, "custom")
    assert logging.getLogger("custom").level == level
    assert logging.getLogger().level == level


def test_repeated_setup_installs_one_handler():
    before = len(logging.getLogger().handlers)
    first = setup_logger(2, "Sequencer")
    second = setup_logger(2, "Sequencer")
    assert first == logging.INFO
    assert second == logging.INFO
    assert len(logging.getLogger().handlers) == before + 1


def test_trace_level_name():
    level = setup_logger(10, "Sequencer")
    assert level == TRACE
    assert logging.getLevelName(level) == "TRACE"