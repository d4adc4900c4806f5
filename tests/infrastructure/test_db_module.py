"""Tests for the infrastructure.db module."""

import pytest

from src.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("DATABASE_URL", "postgresql://example")

    assert db_module._get_env_var("DATABASE_URL") == "postgresql://example"


def test_get_env_var_raises_when_missing(monkeypatch):
    """Missing env vars should raise a RuntimeError."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        db_module._get_env_var("DATABASE_URL")


def test_create_engine_passes_pool_configuration(monkeypatch):
    """_create_engine should configure QueuePool with health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://ledger")

    assert engine == "engine"
    assert captured["db_url"] == "postgresql://ledger"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["max_overflow"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True


def test_adapter_creates_engine_once_from_environment(monkeypatch):
    """get_engine should memoize the engine built from DATABASE_URL."""
    created = []

    class _Engine:
        def __init__(self, url):
            self.url = url
            self.disposed = False

        def dispose(self):
            self.disposed = True

    def fake_create_engine(url):
        created.append(url)
        return _Engine(url)

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("DATABASE_URL", "postgresql://ledger")

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()
    engine_one = adapter.get_engine()
    engine_two = adapter.get_engine()

    assert engine_one is engine_two
    assert created == ["postgresql://ledger"]


def test_adapter_close_disposes_engine(monkeypatch):
    """Leaving the context should dispose the engine and allow reopening."""
    engines = []

    class _Engine:
        disposed = False

        def dispose(self):
            self.disposed = True

    def fake_create_engine(url):
        engines.append(_Engine())
        return engines[-1]

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)

    with db_module.SqlAlchemyDatabaseEngineAdapter("sqlite://") as adapter:
        adapter.get_engine()

    assert engines[0].disposed is True
    adapter.get_engine()
    assert len(engines) == 2
