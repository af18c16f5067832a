"""Common test fixtures for terr."""

import logging  # noqa: TID251

import pytest

from terr.logging import logging_config


@pytest.fixture(autouse=True)
def reset_terr_loggers():
    """Restore the terr loggers after tests that call setup_logging().

    setup_logging() reconfigures logging globally; without this, handlers
    bound to a captured stdout would leak into later tests.
    """
    names = ["terr", *logging_config.DEFAULT_LOG_LEVELS]
    saved = {name: (logging.getLogger(name).handlers[:], logging.getLogger(name).level) for name in names}
    root = logging.getLogger()
    root_handlers, root_level = root.handlers[:], root.level
    yield
    for name, (handlers, level) in saved.items():
        logger = logging.getLogger(name)
        logger.handlers[:] = handlers
        logger.setLevel(level)
        logger.propagate = True
    root.handlers[:] = root_handlers
    root.setLevel(root_level)
    logging_config._logging_config = None
