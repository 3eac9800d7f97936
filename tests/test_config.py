"""Tests for ContextVar-based scan configuration.

Validates thread isolation, context manager behavior, and the per-call
config of the top-level scan() function.
"""

from threading import Thread

import pytest

from toylang import (
    InvalidCharacterError,
    ScanConfig,
    Scanner,
    get_scan_config,
    reset_scan_config,
    scan,
    scan_config_context,
    set_scan_config,
)


class TestScanConfigDataclass:
    """Test ScanConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ScanConfig()
        assert config.unicode_whitespace is True

    def test_immutability(self) -> None:
        """Config is frozen and cannot be modified."""
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.unicode_whitespace = False  # type: ignore[misc]

    def test_from_dict(self) -> None:
        config = ScanConfig.from_dict({"unicode_whitespace": False})
        assert config.unicode_whitespace is False

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ScanConfig.from_dict({"unknown_key": 1})
        assert config == ScanConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_scan_config()

    def test_default_config(self) -> None:
        assert get_scan_config().unicode_whitespace is True

    def test_set_and_get(self) -> None:
        set_scan_config(ScanConfig(unicode_whitespace=False))
        assert get_scan_config().unicode_whitespace is False

    def test_reset_restores_default(self) -> None:
        set_scan_config(ScanConfig(unicode_whitespace=False))
        reset_scan_config()
        assert get_scan_config().unicode_whitespace is True


class TestScanConfigContext:
    """Test scan_config_context context manager."""

    def test_context_sets_config(self) -> None:
        with scan_config_context(ScanConfig(unicode_whitespace=False)):
            assert get_scan_config().unicode_whitespace is False
        assert get_scan_config().unicode_whitespace is True

    def test_context_restores_on_exception(self) -> None:
        """Context manager restores config even if exception is raised."""
        with pytest.raises(ValueError, match="test"):
            with scan_config_context(ScanConfig(unicode_whitespace=False)):
                raise ValueError("test")

        assert get_scan_config().unicode_whitespace is True


class TestScanFunctionConfig:
    """scan(config=...) applies to that call only."""

    def test_config_argument(self) -> None:
        with pytest.raises(InvalidCharacterError):
            scan("a\u00a0b", config=ScanConfig(unicode_whitespace=False))

        # Active config is untouched
        assert get_scan_config().unicode_whitespace is True
        assert len(scan("a\u00a0b")) == 3


class TestThreadIsolation:
    """Test thread-local configuration isolation."""

    def test_thread_isolation(self) -> None:
        """Each thread sees its own config."""
        results: dict[int, bool] = {}

        def worker(thread_id: int, config: ScanConfig) -> None:
            set_scan_config(config)
            try:
                Scanner("a\u00a0b").scan_all()
                results[thread_id] = True
            except InvalidCharacterError:
                results[thread_id] = False

        threads = [
            Thread(target=worker, args=(i, ScanConfig(unicode_whitespace=i % 2 == 0)))
            for i in range(6)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {i: i % 2 == 0 for i in range(6)}
        # Main thread unaffected
        assert get_scan_config().unicode_whitespace is True
