import pytest
from pydantic import ValidationError

from models import (
    ERROR_CLASSES,
    ArithmeticOverflowError,
    CursorError,
    CursorSettings,
    CursorStatistics,
    ErrorKind,
    ExhaustedError,
    IndexOutOfRangeError,
    InvalidRangeError,
    NegativeLimitError,
    NullArgumentError,
    UnsupportedInfiniteSourceError,
)


class TestErrorTaxonomy:
    """Test the closed set of error kinds"""

    def test_every_kind_has_one_error_class(self):
        """Test each ErrorKind maps to exactly one exception class"""
        assert set(ERROR_CLASSES) == set(ErrorKind), "Every kind should have an error class"
        for kind, cls in ERROR_CLASSES.items():
            assert cls.kind is kind, f"{cls.__name__} carries the wrong kind"
            assert issubclass(cls, CursorError)

    @pytest.mark.parametrize("cls, builtin", [
        (NullArgumentError, TypeError),
        (NegativeLimitError, ValueError),
        (UnsupportedInfiniteSourceError, TypeError),
        (InvalidRangeError, ValueError),
        (ExhaustedError, LookupError),
        (IndexOutOfRangeError, IndexError),
        (ArithmeticOverflowError, OverflowError),
    ])
    def test_errors_are_catchable_as_builtins(self, cls, builtin):
        """Test library errors can be handled with the matching builtin exception"""
        with pytest.raises(builtin):
            raise cls("boom")

    def test_error_keeps_message_and_operation(self):
        error = NegativeLimitError("limit: max_size must not be negative (got -1)", "limit")
        assert str(error) == "limit: max_size must not be negative (got -1)"
        assert error.message == str(error)
        assert error.operation == "limit"

    def test_to_report(self):
        """Test errors describe themselves as ErrorReport models"""
        report = ExhaustedError("filter has no more matching elements", "filter").to_report()

        assert report.ok is False
        assert report.error_code == "exhausted"
        assert report.error_type == "ExhaustedError"
        assert report.operation == "filter"
        assert report.timestamp.tzinfo is not None


class TestCursorSettings:
    """Test configuration model"""

    def test_defaults(self):
        settings = CursorSettings()
        assert settings.log_level == "INFO"
        assert settings.default_separator == ", "
        assert settings.demo_size == 10_000

    def test_log_level_is_normalized(self):
        assert CursorSettings(log_level=" debug ").log_level == "DEBUG"

    def test_invalid_values_rejected(self):
        with pytest.raises(ValidationError):
            CursorSettings(log_level="chatty")
        with pytest.raises(ValidationError):
            CursorSettings(demo_size=0)

    def test_from_env(self, monkeypatch):
        """Test settings are read from LAZY_CURSORS_* variables"""
        monkeypatch.setenv("LAZY_CURSORS_LOG_LEVEL", "warning")
        monkeypatch.setenv("LAZY_CURSORS_SEPARATOR", " | ")
        monkeypatch.setenv("LAZY_CURSORS_DEMO_SIZE", "50")

        settings = CursorSettings.from_env()

        assert settings.log_level == "WARNING"
        assert settings.default_separator == " | "
        assert settings.demo_size == 50

    def test_from_env_without_variables(self, monkeypatch):
        for name in ("LAZY_CURSORS_LOG_LEVEL", "LAZY_CURSORS_SEPARATOR", "LAZY_CURSORS_DEMO_SIZE"):
            monkeypatch.delenv(name, raising=False)
        assert CursorSettings.from_env() == CursorSettings()


class TestCursorStatistics:

    def test_count_must_not_be_negative(self):
        with pytest.raises(ValidationError):
            CursorStatistics(label="x", count=-1, total=0.0)
