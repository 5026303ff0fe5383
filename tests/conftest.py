"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest
import json

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def sample_data(fixtures_dir):
    """Load sample table rows from fixtures."""
    data_file = fixtures_dir / "sample_data.json"
    with open(data_file) as f:
        return json.load(f)


@pytest.fixture
def data_files(sample_data, tmp_path):
    """Write each sample table to its own JSON export."""
    paths = {}
    for key, table in [
        ("harvest_logs", "harvest_logs"),
        ("planting_logs", "planting_logs"),
        ("rainfall", "daily_rainfall"),
        ("recommendations", "planting_recommendations"),
    ]:
        path = tmp_path / f"{table}.json"
        path.write_text(json.dumps(sample_data[table]), encoding="utf-8")
        paths[key] = str(path)
    return paths


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test running the full workflow"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
