from __future__ import annotations

import uuid
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from tenderdesk.models import Base

PROJECT_ROOT = Path(__file__).resolve().parents[3]


def _alembic_config(database_url: str) -> Config:
    cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    cfg.set_main_option("sqlalchemy.url", database_url)
    return cfg


def test_baseline_migration_matches_models():
    tmp_root = Path(".test_tmp")
    tmp_root.mkdir(exist_ok=True)
    db_path = tmp_root / f"tenderdesk_migration_{uuid.uuid4().hex}.db"
    database_url = f"sqlite:///{db_path}"
    cfg = _alembic_config(database_url)

    command.upgrade(cfg, "head")
    engine = create_engine(database_url)
    try:
        inspector = inspect(engine)
        migrated = set(inspector.get_table_names()) - {"alembic_version"}
        assert migrated == set(Base.metadata.tables.keys())
        for table_name, table in Base.metadata.tables.items():
            columns = {column["name"] for column in inspector.get_columns(table_name)}
            assert columns == set(table.columns.keys()), table_name
    finally:
        engine.dispose()

    command.downgrade(cfg, "base")
    engine = create_engine(database_url)
    try:
        assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
    finally:
        engine.dispose()
        db_path.unlink(missing_ok=True)
