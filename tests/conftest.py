"""
Pytest fixtures for deploy-notify tests.

Test imports use the src/deploy_notify/ package via --import-mode=importlib (see pyproject.toml).
"""

import io
import json
from pathlib import Path
from unittest.mock import MagicMock, patch
from urllib.error import HTTPError

import pytest

from deploy_notify.report import DeploymentReport, Status, git_commit_from


# ═══════════════════════════════════════════════════════════════════════════════
# Path Constants
# ═══════════════════════════════════════════════════════════════════════════════

PROJECT_ROOT = Path(__file__).parent.parent
SRC_DIR = PROJECT_ROOT / "src"

# Load fixtures data
FIXTURES_DIR = Path(__file__).parent / "fixtures"
with open(FIXTURES_DIR / "webhook_payloads.json") as f:
    FIXTURES = json.load(f)


def _report_from_fixture(data: dict) -> DeploymentReport:
    return DeploymentReport(
        status=Status(data["status"]),
        service=data["service"],
        environment=data["environment"],
        user=data["user"],
        version=data["version"],
        build_number=data["build_number"],
        build_url=data["build_url"],
        hook_url=data["hook_url"],
        channel=data["channel"],
        git=git_commit_from(data.get("git_commit"), data.get("git_message")),
    )


def _argv_from_fixture(data: dict) -> list:
    argv = []
    for key, value in data.items():
        argv.extend([f"--{key.replace('_', '-')}", str(value)])
    return argv


# ═══════════════════════════════════════════════════════════════════════════════
# Report Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def report_success():
    """Successful deployment of api to prod, no commit info."""
    return _report_from_fixture(FIXTURES["report_success"])


@pytest.fixture
def report_failure_with_commit():
    """Failed deployment of api to prod with commit abc123."""
    return _report_from_fixture(FIXTURES["report_failure_with_commit"])


@pytest.fixture
def argv_success():
    """Command-line arguments for a successful deployment."""
    return _argv_from_fixture(FIXTURES["report_success"])


@pytest.fixture
def argv_failure_with_commit():
    """Command-line arguments for a failed deployment with commit info."""
    return _argv_from_fixture(FIXTURES["report_failure_with_commit"])


# ═══════════════════════════════════════════════════════════════════════════════
# Config Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def config_custom():
    """Config overriding every key."""
    return FIXTURES["config_custom"].copy()


@pytest.fixture
def tmp_config_file(tmp_path, config_custom):
    """Create temporary config file."""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps(config_custom))
    return config_file


@pytest.fixture(autouse=True)
def isolated_default_config(tmp_path, monkeypatch):
    """Point the default config path at a file that does not exist."""
    monkeypatch.setattr(
        "deploy_notify.config.settings.CONFIG_FILE",
        tmp_path / "no-such-dir" / "config.json",
    )


# ═══════════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def make_response():
    """Factory for urlopen context-manager responses."""

    def _make(status: int = 200, body: bytes = b"ok"):
        mock_response = MagicMock()
        mock_response.status = status
        mock_response.read.return_value = body
        mock_response.__enter__ = MagicMock(return_value=mock_response)
        mock_response.__exit__ = MagicMock(return_value=False)
        return mock_response

    return _make


@pytest.fixture
def make_http_error():
    """Factory for HTTPError instances carrying a response body."""

    def _make(code: int, body: bytes = b"", msg: str = "Error"):
        return HTTPError(
            url="https://hooks.slack.com/services/T000/B000/XXXX",
            code=code,
            msg=msg,
            hdrs={},
            fp=io.BytesIO(body),
        )

    return _make


@pytest.fixture
def mock_urlopen():
    """Mock urlopen in the webhook sender."""
    with patch("deploy_notify.webhook.sender.urlopen") as mock:
        yield mock
