import mongomock
import pytest
from fastapi.testclient import TestClient

from jobportal_api.auth import issue_token
from jobportal_api.config import Settings
from jobportal_api.db import JobStore
from jobportal_api.deps import get_settings, get_store
from jobportal_api.main import app

SECRET = "test-secret-long-enough-for-hs256-signing"


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, ACCESS_TOKEN_SECRET=SECRET, TOKEN_TTL_SECONDS=3600)


@pytest.fixture
def store():
    return JobStore(mongomock.MongoClient()["jobPortal"])


@pytest.fixture
def client(store, test_settings):
    # no `with` block: startup would try to reach a real cluster
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_cookie():
    def _make(email, secret=SECRET, **kwargs):
        return {"Cookie": f"token={issue_token({'email': email}, secret, **kwargs)}"}
    return _make


@pytest.fixture
def seed_job(store):
    def _seed(**fields):
        doc = {
            "title": "Backend Engineer",
            "company": "Acme",
            "company_logo": "https://acme.example/logo.png",
            "location": "Dhaka",
            "hr_email": "hr@acme.example",
        }
        doc.update(fields)
        store.jobs.insert(doc)
        return doc
    return _seed
