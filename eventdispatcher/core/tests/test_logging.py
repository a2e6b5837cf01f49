"""Unit tests for ContextualLogger: prefixes and context dimensions."""

import logging

from eventdispatcher.core.logging import ContextualLogger, logger


class TestContextualLogger:
    def test_prefix_is_prepended(self, caplog):
        scoped = logger.with_prefix("Test: ")

        with caplog.at_level(logging.INFO, logger="eventdispatcher"):
            scoped.info("hello")

        assert caplog.records[-1].getMessage() == "Test: hello"

    def test_prefixes_accumulate(self, caplog):
        scoped = logger.with_prefix("A: ").with_prefix("B: ")

        with caplog.at_level(logging.INFO, logger="eventdispatcher"):
            scoped.info("hello")

        assert caplog.records[-1].getMessage() == "A: B: hello"

    def test_context_is_attached_as_extra(self, caplog):
        scoped = logger.with_context(component="tests").with_context(run=1)

        with caplog.at_level(logging.INFO, logger="eventdispatcher"):
            scoped.info("hello", extra={"run": 2})

        record = caplog.records[-1]
        assert record.component == "tests"
        assert record.run == 2

    def test_with_methods_return_new_loggers(self):
        scoped = logger.with_prefix("X: ").with_context(component="x")

        assert isinstance(scoped, ContextualLogger)
        assert logger.prefix == ""
        assert logger.dimensions == {}
        assert scoped.logger is logger.logger
