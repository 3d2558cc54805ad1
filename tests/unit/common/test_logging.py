# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rich.console import Console, Group
from rich.text import Text
from rich.traceback import Traceback

from hdrsweep.common.config import LoggingConfig
from hdrsweep.common.hdrsweep_logger import HdrSweepLogger
from hdrsweep.common.logging import (
    CustomRichHandler,
    LogHighlighter,
    create_file_handler,
    setup_rich_logging,
)
from hdrsweep.common.mixins import HdrSweepLoggerMixin


def make_log_record(
    msg: str = "Test message",
    level: int = logging.INFO,
    name: str = "test_logger",
    lineno: int = 42,
) -> logging.LogRecord:
    """Factory for creating LogRecord instances with sensible defaults."""
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="test.py",
        lineno=lineno,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture
def handler() -> CustomRichHandler:
    return CustomRichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=MagicMock(spec=Console),
        show_time=False,
        show_level=False,
    )


@pytest.fixture
def restore_root_logger():
    """Put the root logger handlers and level back after a setup test."""
    handlers = logging.root.handlers[:]
    level = logging.root.level
    yield
    for added in logging.root.handlers[:]:
        if added not in handlers:
            added.close()
        logging.root.removeHandler(added)
    for original in handlers:
        logging.root.addHandler(original)
    logging.root.setLevel(level)


class TestCustomRichHandler:
    def test_initializes_with_log_highlighter(self, handler: CustomRichHandler):
        assert isinstance(handler.highlighter, LogHighlighter)

    @pytest.mark.parametrize(
        "expected_content",
        ["INFO", "Test message", "(test_logger:42)", ":"],
    )
    def test_render_includes_expected_content(
        self, handler: CustomRichHandler, expected_content: str
    ):
        result = handler.render(
            record=make_log_record(), traceback=None, message_renderable=Text("")
        )
        assert isinstance(result, Text)
        assert expected_content in str(result)

    def test_render_returns_group_with_traceback(self, handler: CustomRichHandler):
        result = handler.render(
            record=make_log_record(),
            traceback=MagicMock(spec=Traceback),
            message_renderable=Text(""),
        )
        assert isinstance(result, Group)

    def test_custom_level_names(self, handler: CustomRichHandler):
        record = make_log_record(level=logging.INFO + 5)
        assert record.levelname == "NOTICE"
        assert "NOTICE" in str(
            handler.render(record=record, traceback=None, message_renderable=Text(""))
        )


@pytest.mark.usefixtures("restore_root_logger")
class TestSetupRichLogging:
    def test_console_handler_only(self):
        setup_rich_logging(LoggingConfig(log_level="DEBUG"))

        assert logging.root.level == logging.DEBUG
        assert len(logging.root.handlers) == 1
        assert isinstance(logging.root.handlers[0], CustomRichHandler)

    def test_trace_level(self):
        setup_rich_logging(LoggingConfig(log_level="trace"))
        assert logging.root.level == logging.DEBUG - 5

    def test_log_file_adds_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "hdrsweep.log"

        setup_rich_logging(LoggingConfig(log_level="INFO", log_file=log_file))
        HdrSweepLogger("file_test").info("written to file")
        for added in logging.root.handlers:
            added.flush()

        assert len(logging.root.handlers) == 2
        assert isinstance(logging.root.handlers[1], logging.FileHandler)
        assert "file_test - INFO - written to file" in log_file.read_text()

    def test_create_file_handler_creates_parent(self, tmp_path: Path):
        log_file = tmp_path / "nested" / "dir" / "out.log"
        file_handler = create_file_handler(log_file, logging.WARNING)
        try:
            assert log_file.parent.is_dir()
            assert file_handler.level == logging.WARNING
        finally:
            file_handler.close()


class TestHdrSweepLogger:
    def test_lazy_message_not_evaluated_when_disabled(self):
        logger = HdrSweepLogger("lazy_disabled")
        logger._logger.setLevel(logging.INFO)
        called = MagicMock(return_value="expensive")

        logger.debug(called)

        called.assert_not_called()

    def test_lazy_message_evaluated_when_enabled(self, caplog):
        logger = HdrSweepLogger("lazy_enabled")
        with caplog.at_level(logging.DEBUG, logger="lazy_enabled"):
            logger.debug(lambda: f"merged {2 + 3} histograms")

        assert caplog.records[-1].getMessage() == "merged 5 histograms"
        assert caplog.records[-1].levelno == logging.DEBUG

    def test_mixin_uses_class_name(self, caplog):
        class Aggregation(HdrSweepLoggerMixin):
            def run(self) -> None:
                self.info("running")

        with caplog.at_level(logging.INFO, logger="Aggregation"):
            Aggregation().run()

        assert caplog.records[-1].name == "Aggregation"
        assert caplog.records[-1].getMessage() == "running"

    def test_mixin_forwards_kwargs_to_other_bases(self):
        class Labeled:
            def __init__(self, label: str, **kwargs) -> None:
                super().__init__(**kwargs)
                self.label = label

        class LabeledComponent(HdrSweepLoggerMixin, Labeled):
            pass

        component = LabeledComponent(label="steady")

        assert component.label == "steady"
        assert component.logger_name == "LabeledComponent"

    def test_mixin_rejects_unknown_kwargs(self):
        class Component(HdrSweepLoggerMixin):
            pass

        with pytest.raises(TypeError):
            Component(unexpected=True)
