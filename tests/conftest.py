"""Shared fixtures: a Flask app wired to an in-memory Supabase client."""

import pytest

from shift_helper.container import build_container
from shift_helper.database.connection import SupabaseConfig, SupabaseConnection
from shift_helper.main import create_app
from supabase_fake import FakeSupabaseClient

EMPLOYEES = [
    {"id": 2, "name": "Bob", "status": "normal"},
    {"id": 1, "name": "Alice", "status": "normal"},
    {"id": 3, "name": "Carol", "status": "resigned"},
]

SHIFTS = [
    # 2026-03-02 is a Monday, 2026-03-08 a Sunday
    {"id": 10, "employee_id": 1, "date": "2026-03-02", "segments": [{"start": "09:00", "end": "17:00"}]},
    {"id": 11, "employee_id": 1, "date": "2026-03-08", "segments": [{"start": "10:00", "end": "12:00"}]},
    {"id": 12, "employee_id": 2, "date": "2026-03-04", "segments": [{"start": "08:00", "end": "12:00"}, {"start": "13:00", "end": "17:00"}]},
    {"id": 13, "employee_id": 2, "date": "2026-03-10", "segments": [{"start": "09:00", "end": "10:00"}]},
]

PRESETS = [
    {"id": 7, "name": "Closing", "segments": [{"start": "17:00", "end": "23:00"}], "created_at": "2026-01-02T09:00:00+00:00"},
    {"id": 5, "name": "Morning", "segments": [{"start": "08:00", "end": "12:00"}], "created_at": "2026-01-01T09:00:00+00:00"},
]


@pytest.fixture
def fake_client():
    return FakeSupabaseClient({"employees": EMPLOYEES, "shifts": SHIFTS, "shift_presets": PRESETS})


@pytest.fixture
def conn(fake_client):
    return SupabaseConnection(
        SupabaseConfig(url="http://localhost:54321", key="test-key"),
        client=fake_client,
        client_factory=lambda: FakeSupabaseClient(auth_server=fake_client.auth_server),
    )


@pytest.fixture
def container(conn, monkeypatch):
    monkeypatch.setattr(SupabaseConnection, "get_instance", classmethod(lambda cls, config: conn))
    return build_container(supabase_config={"url": "http://localhost:54321", "key": "test-key"})


@pytest.fixture
def app(container):
    return create_app(container, settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client):
    """Test client with a signed-in session."""
    response = client.post("/api/auth/login", json={"email": "boss@example.com", "password": "secret"})
    assert response.status_code == 200
    return client
