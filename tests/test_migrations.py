from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _alembic_config(url: str) -> Config:
    cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    cfg.set_main_option("sqlalchemy.url", url)
    cfg.attributes["configure_logger"] = False
    return cfg


def test_upgrade_and_downgrade(tmp_path):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    cfg = _alembic_config(url)

    command.upgrade(cfg, "head")
    engine = create_engine(url)
    try:
        inspector = inspect(engine)
        assert {"companies", "jobs"} <= set(inspector.get_table_names())
        job_columns = {c["name"] for c in inspector.get_columns("jobs")}
        assert job_columns == {"id", "title", "salary", "equity", "company_handle"}
        fks = inspector.get_foreign_keys("jobs")
        assert fks[0]["referred_table"] == "companies"

        command.downgrade(cfg, "base")
        assert not {"companies", "jobs"} & set(inspect(engine).get_table_names())
    finally:
        engine.dispose()
