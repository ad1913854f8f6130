"""
Tests for optional Sentry error tracking
"""

from unittest.mock import MagicMock

import pytest

from versioninfo.core import observability


@pytest.fixture
def reset_observability(monkeypatch):
    monkeypatch.setattr(observability, "_observability_config", None)


class TestObservabilityConfig:
    """Tests for ObservabilityConfig"""

    def test_disabled_without_dsn(self):
        config = observability.ObservabilityConfig(sentry_dsn=None, enable_sentry=True)

        assert config.enable_sentry is False

    def test_disabled_when_sdk_missing(self, monkeypatch):
        monkeypatch.setattr(observability, "SENTRY_AVAILABLE", False)

        config = observability.ObservabilityConfig(sentry_dsn="https://key@sentry.example/1", enable_sentry=True)

        assert config.enable_sentry is False


class TestSetupObservability:
    """Tests for setup_observability()"""

    def test_without_dsn(self, reset_observability, fresh_config):
        config = observability.setup_observability()

        assert config.enable_sentry is False
        assert observability._observability_config is config

    def test_initializes_sentry(self, reset_observability, fresh_config, monkeypatch):
        sdk = MagicMock()
        monkeypatch.setattr(observability, "SENTRY_AVAILABLE", True)
        monkeypatch.setattr(observability, "sentry_sdk", sdk, raising=False)
        monkeypatch.setattr(observability, "LoggingIntegration", MagicMock(), raising=False)
        monkeypatch.setenv("SENTRY_DSN", "https://key@sentry.example/1")

        config = observability.setup_observability(environment="production")

        assert config.enable_sentry is True
        sdk.init.assert_called_once()
        assert sdk.init.call_args.kwargs["dsn"] == "https://key@sentry.example/1"
        assert sdk.init.call_args.kwargs["environment"] == "production"


class TestCaptureAndFlush:
    """Tests for capture_fatal() and flush()"""

    def test_noop_when_not_configured(self, reset_observability, monkeypatch):
        sdk = MagicMock()
        monkeypatch.setattr(observability, "sentry_sdk", sdk, raising=False)

        observability.capture_fatal("boom", {"component": "registry"})
        observability.flush()

        sdk.capture_message.assert_not_called()
        sdk.flush.assert_not_called()

    def test_sends_when_configured(self, monkeypatch):
        sdk = MagicMock()
        config = MagicMock(enable_sentry=True)
        monkeypatch.setattr(observability, "sentry_sdk", sdk, raising=False)
        monkeypatch.setattr(observability, "_observability_config", config)

        observability.capture_fatal("boom", {"component": "registry"})
        observability.flush(timeout=1.0)

        sdk.capture_message.assert_called_once_with("boom", level="fatal")
        scope = sdk.push_scope.return_value.__enter__.return_value
        scope.set_tag.assert_called_once_with("component", "registry")
        sdk.flush.assert_called_once_with(timeout=1.0)
