"""
Tests for error categorization and formatting.
"""

import pytest

from deploy_notify.errors import (
    ConfigError,
    DeployNotifyError,
    ExitCode,
    NetworkDNSError,
    NetworkOfflineError,
    NetworkProxyError,
    NetworkTimeoutError,
    RateLimitError,
    ServerError,
    WebhookInvalidError,
    WebhookRejectedError,
    categorize_http_error,
    categorize_network_error,
    format_error_for_user,
    get_exit_code,
)


class TestCategorizeHttpError:
    """Tests for categorize_http_error()."""

    @pytest.mark.parametrize(
        "status,error_type,code",
        [
            (400, WebhookRejectedError, ExitCode.WEBHOOK_REJECTED),
            (403, WebhookInvalidError, ExitCode.WEBHOOK_INVALID),
            (404, WebhookInvalidError, ExitCode.WEBHOOK_INVALID),
            (410, WebhookInvalidError, ExitCode.WEBHOOK_INVALID),
            (429, RateLimitError, ExitCode.WEBHOOK_RATE_LIMIT),
            (500, ServerError, ExitCode.WEBHOOK_SERVER_ERROR),
            (502, ServerError, ExitCode.WEBHOOK_SERVER_ERROR),
        ],
    )
    def test_status_mapping(self, status, error_type, code):
        """Test status codes map to error classes and exit codes."""
        error = categorize_http_error(status, "body")
        assert type(error) is error_type
        assert error.code == code
        assert error.status_code == status

    def test_message_contains_body(self):
        """Test the response body is part of the diagnostic."""
        error = categorize_http_error(500, '{"error":"bad channel"}')
        assert error.message == 'Error posting to slack: 500 {"error":"bad channel"}'
        assert error.body == '{"error":"bad channel"}'

    def test_empty_body(self):
        """Test message without a body."""
        assert categorize_http_error(502).message == "Error posting to slack: 502"


class TestCategorizeNetworkError:
    """Tests for categorize_network_error()."""

    @pytest.mark.parametrize(
        "reason,error_type",
        [
            ("timed out", NetworkTimeoutError),
            ("[Errno -2] Name or service not known", NetworkDNSError),
            ("[Errno 8] nodename nor servname provided, or not known", NetworkDNSError),
            ("Tunnel connection failed: 407 Proxy Authentication Required", NetworkProxyError),
            ("[Errno 111] Connection refused", NetworkOfflineError),
            ("[Errno 113] No route to host", NetworkOfflineError),
            ("[SSL: CERTIFICATE_VERIFY_FAILED] certificate verify failed", NetworkOfflineError),
        ],
    )
    def test_reason_mapping(self, reason, error_type):
        """Test reasons map to network error classes."""
        error = categorize_network_error(reason)
        assert type(error) is error_type
        assert reason in error.message

    def test_network_codes_are_nonzero(self):
        """Test every network error fails the process."""
        for error_type in (NetworkOfflineError, NetworkTimeoutError, NetworkDNSError, NetworkProxyError):
            assert 20 <= error_type.code < 30


class TestFormatting:
    """Tests for format_error_for_user() and get_exit_code()."""

    def test_short_format(self):
        """Test non-verbose output is one line."""
        error = ConfigError("Config file not found: x.json")
        assert format_error_for_user(error) == "Error: Config file not found: x.json"

    def test_verbose_format(self):
        """Test verbose output adds details and suggestion."""
        error = ConfigError("Invalid config", details="'timeout' must be between 0 and 120")
        text = format_error_for_user(error, verbose=True)

        assert text.splitlines() == [
            "Error: Invalid config",
            "Details: 'timeout' must be between 0 and 120",
            f"Suggestion: {ConfigError.suggestion}",
        ]

    def test_custom_suggestion_wins(self):
        """Test per-instance suggestion overrides the class default."""
        error = DeployNotifyError("bad url", suggestion="Use https.")
        assert error.get_suggestion() == "Use https."

    def test_plain_exception(self):
        """Test foreign exceptions are still formatted."""
        assert format_error_for_user(RuntimeError("boom")) == "Error: boom"

    def test_exit_codes(self):
        """Test exit code lookup."""
        assert get_exit_code(ServerError("x", 500)) == ExitCode.WEBHOOK_SERVER_ERROR
        assert get_exit_code(ConfigError("x")) == ExitCode.CONFIG_ERROR
        assert get_exit_code(RuntimeError("x")) == ExitCode.SYSTEM_ERROR

    def test_config_error_distinct_from_argparse(self):
        """Test a bad config file and a usage error exit differently."""
        assert ExitCode.CONFIG_ERROR == 3
        assert ExitCode.CONFIG_ERROR != 2
