"""Tests for EvaluatorSettings."""
import pytest
from pydantic import ValidationError

from rinha.config.settings import DEFAULT_RECURSION_LIMIT, EvaluatorSettings


class TestEvaluatorSettings:
    def test_defaults(self):
        settings = EvaluatorSettings()
        assert settings.log_level == "WARNING"
        assert settings.trace_evaluation is False
        assert settings.recursion_limit == DEFAULT_RECURSION_LIMIT
        assert settings.integer_overflow == "error"

    def test_validation(self):
        with pytest.raises(ValidationError):
            EvaluatorSettings(integer_overflow="saturate")
        with pytest.raises(ValidationError):
            EvaluatorSettings(recursion_limit=0)
        with pytest.raises(ValidationError):
            EvaluatorSettings(log_level="CHATTY")
        assert EvaluatorSettings(recursion_limit=None).recursion_limit is None

    def test_from_env_defaults(self, monkeypatch):
        for name in ("RINHA_LOG_LEVEL", "RINHA_TRACE_EVALUATION", "RINHA_RECURSION_LIMIT", "RINHA_INTEGER_OVERFLOW"):
            monkeypatch.delenv(name, raising=False)
        assert EvaluatorSettings.from_env() == EvaluatorSettings()

    def test_from_env_values(self, monkeypatch):
        monkeypatch.setenv("RINHA_LOG_LEVEL", "debug")
        monkeypatch.setenv("RINHA_TRACE_EVALUATION", "true")
        monkeypatch.setenv("RINHA_RECURSION_LIMIT", "20000")
        monkeypatch.setenv("RINHA_INTEGER_OVERFLOW", "WRAP")
        settings = EvaluatorSettings.from_env()
        assert settings.log_level == "DEBUG"
        assert settings.trace_evaluation is True
        assert settings.recursion_limit == 20000
        assert settings.integer_overflow == "wrap"

    def test_from_env_invalid(self, monkeypatch):
        monkeypatch.setenv("RINHA_RECURSION_LIMIT", "lots")
        with pytest.raises(ValidationError):
            EvaluatorSettings.from_env()
