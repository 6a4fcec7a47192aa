import logging

from app.core.logging import PIISafeFilter
from app.normalization.rut_normalizer import validate_rut


def _filtered_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.filters = []
    logger.addFilter(PIISafeFilter())
    return logger


def test_pii_filter_redacts_formatted_rut_and_email(caplog):
    logger = _filtered_logger("test.pii")

    with caplog.at_level(logging.INFO, logger="test.pii"):
        logger.info("Contact juan.perez@example.cl RUT 12.345.678-5")

    assert "juan.perez@example.cl" not in caplog.text
    assert "12.345.678-5" not in caplog.text
    assert "[REDACTED]" in caplog.text


def test_pii_filter_redacts_dashed_rut_in_args(caplog):
    logger = _filtered_logger("test.args")

    with caplog.at_level(logging.INFO, logger="test.args"):
        logger.info("customer %s created", "1111111-k")

    assert "1111111-k" not in caplog.text
    assert "customer [REDACTED] created" in caplog.text


def test_pii_filter_redacts_rut_assignment(caplog):
    logger = _filtered_logger("test.assign")

    with caplog.at_level(logging.INFO, logger="test.assign"):
        logger.info("lookup rut=123456785 for organization")

    assert "123456785" not in caplog.text
    assert "rut=[REDACTED]" in caplog.text


def test_validate_rut_never_logs_raw_value(caplog):
    with caplog.at_level(logging.DEBUG, logger="app.normalization.rut_normalizer"):
        validate_rut("98.765.43A-1")
        validate_rut("98.765.432-X")

    assert "98.765" not in caplog.text
    assert "98765" not in caplog.text
