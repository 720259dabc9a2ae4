# migrations.py
"""Aplica as revisões do Alembic até a head; substitui a sondagem de colunas no boot."""
import logging
from pathlib import Path

from alembic import command
from alembic.config import Config

from infrastructure.database import DATABASE_URL

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]
ALEMBIC_DIR = PROJECT_ROOT / "alembic"


def alembic_config(url: str | None = None) -> Config:
    config = Config()
    config.set_main_option("script_location", str(ALEMBIC_DIR))
    # ConfigParser interpola "%", comum em senhas url-encoded
    config.set_main_option("sqlalchemy.url", (url or DATABASE_URL).replace("%", "%%"))
    return config


def run_migrations(url: str | None = None, revision: str = "head") -> None:
    logger.info("Aplicando migrações até %s", revision)
    command.upgrade(alembic_config(url), revision)
