from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the contacts_api package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from contacts_api.core import config as core_config  # noqa: E402
from contacts_api.core.rate_limiter import get_limiter  # noqa: E402
from contacts_api.db import models  # noqa: E402
from contacts_api.db import session as db_session  # noqa: E402
from contacts_api.repositories.fund_repository import FundRepository  # noqa: E402


@pytest.fixture()
def db_env(monkeypatch):
    """Point the app at a fresh in-memory SQLite and reset the settings/engine caches."""
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("SEED_DATA", "false")
    monkeypatch.setenv("RATE_LIMIT_REQUESTS", "1000")
    monkeypatch.setenv("API_PREFIX", "/api")
    core_config.get_settings.cache_clear()
    db_session.reset_engine()
    get_limiter().reset()

    engine = db_session.get_engine()
    models.Base.metadata.create_all(bind=engine)

    yield engine

    models.Base.metadata.drop_all(bind=engine)
    db_session.reset_engine()
    core_config.get_settings.cache_clear()
    get_limiter().reset()


@pytest.fixture()
def funds(db_env):
    """Two funds, ids 1 and 2."""
    repo = FundRepository()
    return repo.add_fund("Alpha Fund"), repo.add_fund("Beta Fund")


@pytest.fixture()
def client(db_env):
    from fastapi.testclient import TestClient

    from contacts_api.app import create_app

    return TestClient(create_app())
