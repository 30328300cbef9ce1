# backend/alembic/env.py
import os
import sys
from logging.config import fileConfig

from sqlalchemy import create_engine
from sqlalchemy import pool

from alembic import context

# Make the 'economy' package importable when alembic runs from backend/
sys.path.insert(0, os.path.realpath(os.path.join(os.path.dirname(__file__), '..')))

from economy.core.config import settings  # noqa: E402
from economy.db.base_class import Base  # noqa: E402
from economy import models  # noqa: E402,F401  (registers accounts, factions, items)

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def get_url() -> str:
    """
    `alembic -x url=...` wins, then the API's own DATABASE_URL setting (env or .env),
    so migrations always target the database the service connects to.
    """
    x_url = context.get_x_argument(as_dictionary=True).get("url")
    url = x_url or settings.DATABASE_URL
    if not url:
        raise ValueError("No database URL: set DATABASE_URL or pass `-x url=...` to alembic.")
    return url


def _configure_kwargs(url: str) -> dict:
    # SQLite cannot ALTER most constraints in place; batch mode recreates the table instead
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "render_as_batch": url.startswith("sqlite"),
    }


def run_migrations_offline() -> None:
    """Emit the economy schema as SQL without connecting."""
    url = get_url()
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_kwargs(url),
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    url = get_url()
    connectable = create_engine(url, poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(connection=connection, **_configure_kwargs(url))

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
