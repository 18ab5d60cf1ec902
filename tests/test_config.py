"""配置加载测试"""
from todo_api.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.database_url == "sqlite:///./todo.db"
        assert settings.session_header == "x-session-id"
        assert settings.session_query_param == "session"
        assert settings.port == 5000

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://todo@localhost/todo")
        monkeypatch.setenv("SESSION_HEADER", "x-client-session")
        monkeypatch.setenv("PORT", "8080")
        settings = Settings(_env_file=None)
        assert settings.database_url == "postgresql://todo@localhost/todo"
        assert settings.session_header == "x-client-session"
        assert settings.port == 8080

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestCustomSessionHeader:
    def test_configured_header_is_used(self, client, monkeypatch):
        monkeypatch.setattr(get_settings(), "session_header", "x-client-session")

        resp = client.post("/tasks", json={"title": "x"}, headers={"x-client-session": "abc"})
        assert resp.status_code == 201

        resp = client.get("/tasks", headers={"x-session-id": "abc"})
        assert resp.status_code == 400
