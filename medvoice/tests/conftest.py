import os
import sys
from pathlib import Path

# Get the project root directory
root_dir = Path(__file__).parent.parent.parent

# Add the project root to Python path
sys.path.insert(0, str(root_dir))

# Keep test runs out of the log directory
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("LOG_JSON", "false")

import pytest
from fastapi.testclient import TestClient

from medvoice.dependencies.providers import get_model_manager, get_search_client
from medvoice.main import app
from medvoice.tests.fakes import FakeModel, FakeSearch


@pytest.fixture
def calls():
    """Order in which provider calls were made."""
    return []


@pytest.fixture
def fake_model(calls):
    return FakeModel(calls)


@pytest.fixture
def fake_search(calls):
    return FakeSearch(calls)


@pytest.fixture
def client(fake_model, fake_search):
    """TestClient with the shared providers replaced by fakes."""
    app.dependency_overrides[get_model_manager] = lambda: fake_model
    app.dependency_overrides[get_search_client] = lambda: fake_search
    yield TestClient(app)
    app.dependency_overrides.clear()
