"""
Pytest configuration and shared fixtures.
"""

import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from runviz import config as config_module
from runviz.dashboard.dependencies import configure_app_state
from runviz.dashboard.main import app

SAMPLE_TABLE = """experiment_id,metric_name,step,value
run1,loss,2,0.5
run1,loss,1,0.9
run2,loss,1,0.4
"""

MULTI_METRIC_TABLE = """experiment_id,metric_name,step,value
run1,loss,0,1.0
run1,loss,1,0.7
run1,loss,2,0.4
run1,accuracy,0,0.2
run1,accuracy,1,0.5
run1,accuracy,2,0.8
run2,loss,0,1.2
run2,loss,1,0.9
run3,lr,0,0.01
"""

# Header required by mutating dashboard endpoints
CSRF_HEADERS = {"X-Requested-With": "XMLHttpRequest"}


@pytest.fixture(autouse=True)
def clean_env_for_tests(monkeypatch):
    """Clean environment variables and cached settings for test isolation.

    This fixture is applied automatically to all tests (autouse=True).
    """
    for name in list(os.environ):
        if name.startswith("RUNVIZ_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "_settings", None)


@pytest.fixture(autouse=True)
def fresh_app_state():
    """Give every test an empty dashboard state."""
    state = configure_app_state()
    try:
        yield state
    finally:
        configure_app_state()


@pytest.fixture
def test_client():
    """Create a test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def sample_table() -> str:
    """Table from the three-row end-to-end example."""
    return SAMPLE_TABLE


@pytest.fixture
def multi_metric_table() -> str:
    """Table with three experiments and three metrics."""
    return MULTI_METRIC_TABLE


@pytest.fixture
def table_file(tmp_path: Path) -> Path:
    """Multi-metric table written to disk."""
    path = tmp_path / "metrics.csv"
    path.write_text(MULTI_METRIC_TABLE)
    return path
