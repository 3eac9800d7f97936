"""Tests for toylang.utils."""

from __future__ import annotations

import logging

import pytest


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        from toylang.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "toylang.mymodule"

    def test_logger_with_toylang_prefix(self) -> None:
        from toylang.utils.logger import get_logger

        logger = get_logger("toylang.lexer")
        assert logger.name == "toylang.lexer"

    def test_logger_name_starting_with_toylang_not_submodule(self) -> None:
        """Names starting with 'toylang' but not submodules should get prefix."""
        from toylang.utils.logger import get_logger

        logger = get_logger("toylang_other")
        assert logger.name == "toylang.toylang_other"

    def test_logger_exact_toylang_name(self) -> None:
        """The exact name 'toylang' should not get double-prefixed."""
        from toylang.utils.logger import get_logger

        logger = get_logger("toylang")
        assert logger.name == "toylang"

    def test_reexported(self) -> None:
        from toylang.utils import get_logger
        from toylang.utils.logger import get_logger as direct

        assert get_logger is direct


class TestScannerLogging:
    """The scanner reports through the toylang.lexer logger at DEBUG level."""

    def test_success_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        from toylang.lexer import Scanner

        with caplog.at_level(logging.DEBUG, logger="toylang"):
            Scanner("a = 1;", source_file="a.toy").scan_all()

        assert "Scanned 5 tokens from a.toy" in caplog.text
        assert all(r.name == "toylang.lexer.core" for r in caplog.records)

    def test_failure_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        from toylang.errors import LexError
        from toylang.lexer import Scanner

        with caplog.at_level(logging.DEBUG, logger="toylang"):
            with pytest.raises(LexError):
                Scanner("a & b").scan_all()

        assert "Scan of <string> stopped: invalid character '&'" in caplog.text

    def test_silent_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        from toylang.lexer import Scanner

        with caplog.at_level(logging.WARNING):
            Scanner("a").scan_all()

        assert caplog.records == []
