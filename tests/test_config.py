from hrapp.core.config import Settings


def test_defaults(monkeypatch):
    for var in ("APP_ENV", "DATABASE_URL", "DB_POOL_SIZE", "LOG_JSON", "CORS_ORIGINS"):
        monkeypatch.delenv(var, raising=False)
    s = Settings(_env_file=None)
    assert s.APP_ENV == "local"
    assert s.DATABASE_URL.startswith("postgresql+psycopg://")
    assert s.DB_POOL_SIZE == 10
    assert s.use_json_logs is False
    assert s.cors_origins_list == ["*"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://u:p@db:5432/other")
    monkeypatch.setenv("DB_POOL_SIZE", "3")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
    s = Settings(_env_file=None)
    assert s.DATABASE_URL == "postgresql+psycopg://u:p@db:5432/other"
    assert s.DB_POOL_SIZE == 3
    assert s.cors_origins_list == ["http://a.test", "http://b.test"]


def test_production_uses_json_logs(monkeypatch):
    monkeypatch.delenv("LOG_JSON", raising=False)
    monkeypatch.setenv("APP_ENV", "Production")
    assert Settings(_env_file=None).use_json_logs is True


def test_log_json_flag(monkeypatch):
    monkeypatch.setenv("APP_ENV", "local")
    monkeypatch.setenv("LOG_JSON", "true")
    assert Settings(_env_file=None).use_json_logs is True
