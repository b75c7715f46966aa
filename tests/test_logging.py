import logging

from subnetkit.logging_config import (
    LOGGER_NAME,
    ErrorTracker,
    get_error_stats,
    setup_logging,
    track_error,
)


def test_setup_logging_console_only():
    logger = setup_logging(level="DEBUG")
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert not logger.propagate


def test_setup_logging_replaces_handlers():
    setup_logging()
    logger = setup_logging()
    assert len(logger.handlers) == 1


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "subnetkit.log"
    logger = setup_logging(level="DEBUG", log_file=str(log_file), enable_console=False)

    logging.getLogger("subnetkit.ip.core").debug("Rejected CIDR '1.2.3.4'")
    for handler in logger.handlers:
        handler.flush()

    content = log_file.read_text()
    assert "Rejected CIDR" in content
    assert "subnetkit.ip.core" in content


def test_error_tracker_counts_by_type():
    tracker = ErrorTracker()
    tracker.log_error("invalid_cidr", "Invalid CIDR format")
    tracker.log_error("invalid_cidr", "Invalid IP address", {"input": "300.0.0.0/8"})
    tracker.log_error("invalid_address", "bad")

    assert tracker.get_error_counts() == {"invalid_cidr": 2, "invalid_address": 1}

    tracker.reset_counts()
    assert tracker.get_error_counts() == {}


def test_global_tracker():
    track_error("invalid_prefix", "Prefix length must be between 0 and 32")
    assert get_error_stats() == {"invalid_prefix": 1}
