"""Tests for structlog configuration."""

import logging

from btc_sentiment.logging import SERVICE_NAME, add_service_name, setup_logging


def test_service_name_stamped_on_events() -> None:
    processor = add_service_name("btc-sentiment-test")
    event = processor(None, "info", {"event": "dataset_loaded"})
    assert event == {"event": "dataset_loaded", "service": "btc-sentiment-test"}


def test_explicit_service_field_kept() -> None:
    processor = add_service_name(SERVICE_NAME)
    event = processor(None, "info", {"event": "x", "service": "worker"})
    assert event["service"] == "worker"


def test_setup_logging_sets_level_and_single_handler() -> None:
    setup_logging("DEBUG")
    root_logger = logging.getLogger()

    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 1
    assert logging.getLogger("uvicorn.access").level == logging.WARNING
