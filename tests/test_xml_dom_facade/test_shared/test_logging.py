"""Tests for correlation-aware logging."""

import logging

from xml_dom_facade.shared.logging import CorrelationLogger, get_logger


class TestCorrelationLogger:
    """Test correlation fields on log records."""

    def test_component_defaults_to_module_name(self) -> None:
        """Test that the component is derived from the logger name."""
        logger = get_logger("xml_dom_facade.tree.document")

        assert isinstance(logger, CorrelationLogger)
        assert logger.component == "document"
        assert logger.correlation_id is None

    def test_records_carry_correlation_fields(self, caplog) -> None:
        """Test that extras are merged with correlation fields."""
        caplog.set_level(logging.DEBUG, logger="xml_dom_facade")
        logger = get_logger("xml_dom_facade.test", "req-1", "unit")

        logger.debug("debug message", extra={"detail": 3})
        logger.info("info message")
        logger.warning("warning message")
        logger.error("error message", exc_info=False)

        assert [r.getMessage() for r in caplog.records] == [
            "debug message",
            "info message",
            "warning message",
            "error message",
        ]
        assert all(r.correlation_id == "req-1" for r in caplog.records)
        assert all(r.component == "unit" for r in caplog.records)
        assert caplog.records[0].detail == 3

    def test_is_enabled_for(self) -> None:
        """Test level checks against the underlying logger."""
        logging.getLogger("xml_dom_facade.levels").setLevel(logging.WARNING)
        logger = get_logger("xml_dom_facade.levels")

        assert logger.is_enabled_for(logging.ERROR)
        assert not logger.is_enabled_for(logging.DEBUG)
