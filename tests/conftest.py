"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add project root to path for all tests
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def temp_log_dir(tmp_path):
    """Provide a temporary directory for log files."""
    log_dir = tmp_path / "logs"
    log_dir.mkdir()
    return log_dir


@pytest.fixture
def make_response():
    """Build a fake requests.Response with a status code and JSON body."""
    def _make(status_code=200, json_data=None, json_error=False):
        response = Mock()
        response.status_code = status_code
        if json_error:
            response.json.side_effect = ValueError("No JSON object could be decoded")
        else:
            response.json.return_value = json_data if json_data is not None else {}
        return response
    return _make


@pytest.fixture
def handbook_listing():
    """Page listing for a doc with a nested section."""
    return [
        {"id": "p1", "name": "Intro"},
        {
            "id": "p2",
            "name": "Policies",
            "children": [
                {"id": "p3", "name": "PTO"},
                {"id": "p4", "name": "Remote Work"},
            ],
        },
    ]
