"""Shared pytest fixtures.

Every test that touches storage or config gets an isolated working
directory, so relative paths (data/config, db/) resolve under tmp_path.
"""

import pytest
from fastapi.testclient import TestClient

from folio.config.app_config import clear_config_cache
from folio.db.database import init_db


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Isolated working directory with a fresh config cache."""
    monkeypatch.chdir(tmp_path)
    clear_config_cache()
    yield tmp_path
    clear_config_cache()


@pytest.fixture
def db(workdir):
    """Initialize a test database."""
    db_path = workdir / "db" / "folio.db"
    init_db(db_path)
    return db_path


@pytest.fixture
def client(workdir):
    """Create test client; startup initializes the database under workdir."""
    from folio.web.api import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


PROFILE_YAML = """\
name: Jane Doe
bio: Software engineer.
contact_info:
  - label: Email
    value: jane@example.com
skills:
  - name: Python
"""

PROJECT_YAML = """\
name: Grocery App
description: Shared grocery lists.
tech_stack: Python, FastAPI
start_date: 2024-01-15
end_date: 2024-06-30
"""


@pytest.fixture
def profile_yaml():
    return PROFILE_YAML


@pytest.fixture
def project_yaml():
    return PROJECT_YAML
