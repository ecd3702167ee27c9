import logging

from app.config.logging_config import SILENCED_LIBRARIES, configure_logging


def test_asyncio_diagnostics_stay_visible():
    configure_logging()

    assert "asyncio" not in SILENCED_LIBRARIES
    assert logging.getLogger("asyncio").getEffectiveLevel() < logging.WARNING


def test_chatty_libraries_are_silenced():
    configure_logging()

    for name in SILENCED_LIBRARIES:
        assert logging.getLogger(name).level == logging.WARNING
