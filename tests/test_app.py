import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from habit_tracker.config import ConfigError, Settings
from habit_tracker.database import Database


def test_healthz(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_unknown_route_returns_generic_not_found(client):
    response = client.get("/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"message": "Resource not found"}


def test_unexpected_errors_are_opaque(app):
    @app.get("/boom")
    def boom():
        raise RuntimeError("database password is hunter2")

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/boom")
    assert response.status_code == 500
    assert response.json() == {"message": "Unexpected error occurred"}
    assert "hunter2" not in response.text


def test_non_integer_id_is_a_bad_request(client, auth_headers):
    response = client.delete("/todos/abc", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request"


def test_in_memory_sqlite_shares_one_connection():
    database = Database("sqlite://")
    assert isinstance(database.engine.pool, StaticPool)
    assert database.dialect == "sqlite"
    database.dispose()


@pytest.mark.parametrize("url", ["mysql+pymysql://u:p@localhost/habits", "oracle://u:p@localhost/habits"])
def test_unsupported_backend_is_rejected(url):
    with pytest.raises(ConfigError):
        Database(url)


def test_sqlite_enforces_foreign_keys(database):
    with database.engine.connect() as connection:
        assert connection.exec_driver_sql("PRAGMA foreign_keys").scalar() == 1


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("DATABASE_URL", "SECRET_KEY", "PORT", "CORS_ORIGINS"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setattr("habit_tracker.config.load_dotenv", lambda: None)
        settings = Settings.from_env()
        assert settings.database_url == "sqlite:///./habit_tracker.db"
        assert settings.cors_origins == ["*"]

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setattr("habit_tracker.config.load_dotenv", lambda: None)
        monkeypatch.setenv("DATABASE_URL", "sqlite://")
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        settings = Settings.from_env()
        assert settings.database_url == "sqlite://"
        assert settings.port == 9000
        assert settings.cors_origins == ["http://a.test", "http://b.test"]
        assert settings.log_level == "DEBUG"

    def test_bad_integer(self, monkeypatch):
        monkeypatch.setattr("habit_tracker.config.load_dotenv", lambda: None)
        monkeypatch.setenv("PORT", "eighty")
        with pytest.raises(ConfigError):
            Settings.from_env()
