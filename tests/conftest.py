"""
conftest.py - Shared pytest fixtures for cowchat tests

This module provides standardized test fixtures for use across all tests.
It includes fixtures for:
- Path setup and Python path configuration
- Configuration management
- Session identity and prebuilt application states
- Fake agent API transports
"""
import json
import pathlib
import sys

import httpx
import pytest

# Add the src/python directory to the Python path
sys.path.insert(0, str(pathlib.Path(__file__).parent.parent / "src" / "python"))

# Imports from cowchat modules (now that path is configured)
from config_manager import ConfigManager
from cowchat.state import AgentInfo, AppState, Connected, SessionIdentity, Selecting


# Configuration Fixtures
# ---------------------

@pytest.fixture
def test_config_data():
    """Create minimal test configuration data."""
    return {
        "api": {
            "baseUrl": "http://config.test/api/",
            "timeout": 5
        },
        "session": {
            "userName": "Tester",
            "source": "cowui-test"
        },
        "ui": {
            "character": "cow"
        },
        "logging": {
            "level": "DEBUG",
            "console": False
        }
    }


@pytest.fixture
def test_config_files(tmp_path, test_config_data):
    """Create a temporary config file."""
    config_file = tmp_path / "test_config.json"
    with open(config_file, 'w') as f:
        json.dump(test_config_data, f)
    return {
        "config_path": config_file,
        "tmp_path": tmp_path
    }


@pytest.fixture
def test_config_manager(test_config_files, monkeypatch):
    """Create a ConfigManager instance with test configuration and no env overrides."""
    monkeypatch.delenv("COWCHAT_API_URL", raising=False)
    monkeypatch.delenv("COWCHAT_USER_NAME", raising=False)
    return ConfigManager(
        cfg_path=test_config_files["config_path"],
        exit_on_error=False,
        load_env=False
    )


# State Fixtures
# --------------

@pytest.fixture
def identity():
    return SessionIdentity(user_id="user-1234", user_name="Tester")


@pytest.fixture
def two_agents():
    return (
        AgentInfo(id="a1", name="Aria", status="active"),
        AgentInfo(id="a2", name="Bo", status="active"),
    )


@pytest.fixture
def connected_state(identity):
    """Connected to Aria, idle, empty transcript."""
    return AppState(
        identity=identity,
        connection=Connected("a1", "Aria"),
        pending=False,
    )


@pytest.fixture
def selecting_state(identity, two_agents):
    return AppState(
        identity=identity,
        connection=Selecting(candidates=two_agents),
        pending=False,
    )


# HTTP Fixtures
# -------------

@pytest.fixture
def agents_payload():
    """Build a GET /agents body from (id, name, status) tuples."""
    def build(*agents):
        return {
            "success": True,
            "data": {
                "agents": [{"id": i, "name": n, "status": s} for i, n, s in agents]
            }
        }
    return build


@pytest.fixture
def recording_transport():
    """MockTransport that answers with a fixed response and records requests."""
    def build(status_code=200, json_body=None, text=None):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if json_body is not None:
                return httpx.Response(status_code, json=json_body)
            return httpx.Response(status_code, text=text or "")

        transport = httpx.MockTransport(handler)
        transport.requests = seen
        return transport
    return build
