"""Alembic migrations applied to a throwaway SQLite file through alembic/env.py."""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import IntegrityError

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture
def database_path(tmp_path):
    return tmp_path / "villas.db"


@pytest.fixture
def alembic_config(database_path):
    config = Config()
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    config.set_main_option("sqlalchemy.url", f"sqlite+aiosqlite:///{database_path}")
    return config


@pytest.fixture
def inspect_engine(database_path):
    engine = create_engine(f"sqlite:///{database_path}")
    yield engine
    engine.dispose()


def test_upgrade_creates_both_tables(alembic_config, inspect_engine):
    command.upgrade(alembic_config, "head")
    tables = set(inspect(inspect_engine).get_table_names())
    assert {"villas", "villa_numbers", "alembic_version"} <= tables


def test_upgrade_records_head_revision(alembic_config, inspect_engine):
    command.upgrade(alembic_config, "head")
    with inspect_engine.connect() as conn:
        assert conn.execute(text("SELECT version_num FROM alembic_version")).scalar() == "0001"


def test_upgraded_schema_fills_column_defaults(alembic_config, inspect_engine):
    command.upgrade(alembic_config, "head")
    with inspect_engine.begin() as conn:
        conn.execute(text("INSERT INTO villas (name, rate) VALUES ('Pool View', 150.0)"))
        row = conn.execute(text("SELECT occupancy, sqft, amenity, created_at FROM villas")).one()
    assert row.occupancy == 0
    assert row.sqft == 0
    assert row.amenity == "[]"
    assert row.created_at is not None


def test_upgraded_schema_rejects_names_differing_only_in_case(alembic_config, inspect_engine):
    command.upgrade(alembic_config, "head")
    with inspect_engine.begin() as conn:
        conn.execute(text("INSERT INTO villas (name, rate) VALUES ('Pool View', 150.0)"))
    with pytest.raises(IntegrityError):
        with inspect_engine.begin() as conn:
            conn.execute(text("INSERT INTO villas (name, rate) VALUES ('POOL VIEW', 150.0)"))


def test_upgraded_schema_indexes_villa_reference(alembic_config, inspect_engine):
    command.upgrade(alembic_config, "head")
    indexes = inspect(inspect_engine).get_indexes("villa_numbers")
    assert any(index["name"] == "ix_villa_numbers_villa_id" for index in indexes)


def test_downgrade_removes_villa_tables(alembic_config, inspect_engine):
    command.upgrade(alembic_config, "head")
    command.downgrade(alembic_config, "base")
    tables = set(inspect(inspect_engine).get_table_names())
    assert "villas" not in tables
    assert "villa_numbers" not in tables
