import logging

import pytest

from subnetkit.config import SubnetKitConfig, set_config
from subnetkit.logging_config import LOGGER_NAME, reset_error_stats


@pytest.fixture(autouse=True)
def default_config():
    config = SubnetKitConfig()
    set_config(config)
    reset_error_stats()
    yield config
    set_config(None)
    reset_error_stats()

    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
