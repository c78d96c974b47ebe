from backend import settings
from backend.db import normalize_database_url

from conftest import owner_headers


def test_missing_or_wrong_token_is_rejected(client):
    assert client.get("/v1/todos", headers={"X-User-Email": "u1@example.com"}).status_code == 401
    assert client.get("/v1/todos", headers=owner_headers(token="wrong")).status_code == 401


def test_missing_user_is_rejected(client):
    response = client.get("/v1/todos", headers={"X-Backend-Token": "test-secret"})

    assert response.status_code == 401


def test_owner_id_is_case_insensitive(client):
    client.post("/v1/todos", json={"text": "x", "date": "2024-01-01"}, headers=owner_headers("U1@Example.com"))

    items = client.get("/v1/todos", headers=owner_headers("u1@example.com")).json()["items"]

    assert items[0]["owner_id"] == "u1@example.com"


def test_allow_list_blocks_other_users(backend_env, client):
    backend_env.setenv("ALLOWED_EMAILS", "u1@example.com, friend@example.com")
    settings.reset_settings()

    assert client.get("/v1/todos", headers=owner_headers("friend@example.com")).status_code == 200
    assert client.get("/v1/todos", headers=owner_headers("stranger@example.com")).status_code == 403


def test_normalize_database_url():
    assert normalize_database_url("postgres://u:p@h/db?sslmode=require&channel_binding=require") == (
        "postgresql+asyncpg://u:p@h/db?ssl=true"
    )
    assert normalize_database_url("sqlite:///./planner.db") == "sqlite+aiosqlite:///./planner.db"
    assert normalize_database_url("sqlite+aiosqlite:///x.db") == "sqlite+aiosqlite:///x.db"
