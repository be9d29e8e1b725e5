from __future__ import annotations

import pytest

import tenderdesk.core.startup as startup_module


class _Cfg:
    ENV = "development"
    AUTO_CREATE_SCHEMA = False

    @property
    def is_production(self) -> bool:
        return False


def test_startup_raises_when_database_unreachable(monkeypatch):
    monkeypatch.setattr(startup_module, "get_config", lambda: _Cfg())
    monkeypatch.setattr(startup_module, "verify_database_connection", lambda: False)

    with pytest.raises(RuntimeError, match="Database connectivity check failed"):
        startup_module.validate_startup_config()


def test_startup_passes_when_database_reachable(monkeypatch):
    monkeypatch.setattr(startup_module, "get_config", lambda: _Cfg())
    monkeypatch.setattr(startup_module, "verify_database_connection", lambda: True)

    startup_module.validate_startup_config()


def test_bootstrap_creates_schema_when_enabled(monkeypatch):
    cfg = _Cfg()
    cfg.AUTO_CREATE_SCHEMA = True
    created = []
    monkeypatch.setattr(startup_module, "get_config", lambda: cfg)
    monkeypatch.setattr(startup_module, "configure_logging", lambda: None)
    monkeypatch.setattr(startup_module, "verify_database_connection", lambda: True)
    monkeypatch.setattr(startup_module, "create_schema", lambda: created.append(True))

    startup_module.bootstrap()
    assert created == [True]
