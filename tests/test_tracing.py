"""
Tracing Module Tests
====================
Tests for OpenTelemetry tracing setup.
"""

import pytest
from unittest.mock import MagicMock, patch


class TestTracingSetup:
    """Tests for tracing module configuration."""

    @pytest.mark.unit
    def test_service_name_constant(self):
        """Service name should be defined."""
        from fileops.tracing import SERVICE_NAME_VALUE

        assert SERVICE_NAME_VALUE == "fileops"

    @pytest.mark.unit
    def test_otlp_endpoint_default(self):
        from fileops.tracing import OTLP_ENDPOINT

        assert "localhost" in OTLP_ENDPOINT or "4318" in OTLP_ENDPOINT

    @pytest.mark.unit
    @patch('fileops.tracing.atexit')
    @patch('fileops.tracing.TracerProvider')
    @patch('fileops.tracing.OTLPSpanExporter')
    @patch('fileops.tracing.BatchSpanProcessor')
    @patch('fileops.tracing.trace')
    def test_setup_tracing_creates_provider(
        self, mock_trace, mock_processor, mock_exporter, mock_provider, mock_atexit
    ):
        """setup_tracing should create, register and flush-on-exit the provider."""
        from fileops.tracing import setup_tracing

        mock_trace.get_tracer.return_value = MagicMock()

        setup_tracing()

        mock_provider.assert_called_once()
        mock_trace.set_tracer_provider.assert_called_once()
        mock_atexit.register.assert_called_once()

    @pytest.mark.unit
    def test_init_tracing_returns_noop_tracer_when_disabled(self):
        import fileops.tracing as tracing

        with patch.object(tracing, "_tracer", None), patch.object(tracing, "ENABLE_TRACING", False), patch.object(
            tracing, "setup_tracing"
        ) as setup:
            tracer = tracing.init_tracing()

        setup.assert_not_called()
        with tracer.start_as_current_span("noop") as span:
            assert span is not None


class TestSafeSetSpanAttributes:
    @pytest.mark.unit
    def test_none_span_is_ignored(self):
        from fileops.tracing import safe_set_span_attributes

        safe_set_span_attributes(None, {"a": 1})

    @pytest.mark.unit
    def test_values_are_normalized(self):
        from fileops.tracing import safe_set_span_attributes

        span = MagicMock()
        safe_set_span_attributes(
            span,
            {"s": "x" * 5000, "n": 3, "skip": None, "seq": [1, "b"], "obj": {"k": 1}, "": "blank"},
        )

        calls = {c.args[0]: c.args[1] for c in span.set_attribute.call_args_list}
        assert len(calls["s"]) == 2048
        assert calls["n"] == 3
        assert calls["seq"] == ["1", "b"]
        assert calls["obj"] == "{'k': 1}"
        assert "skip" not in calls
        assert "" not in calls


class TestCleanupTracing:
    @pytest.mark.unit
    def test_shutdown_error_is_logged_not_raised(self):
        import fileops.tracing as tracing

        provider = MagicMock()
        provider.shutdown.side_effect = RuntimeError("exporter unreachable")

        with patch.object(tracing, "_provider", provider), patch.object(tracing, "logger") as mock_logger:
            tracing._cleanup_tracing()

        provider.shutdown.assert_called_once()
        mock_logger.exception.assert_called_once()
