"""
Alembic environment for the database storage backend.

The target URL is resolved in order:
  1. `alembic -x db_url=...` on the command line
  2. sqlalchemy.url already set on the Config (programmatic runs, tests)
  3. DATABASE_URL_SYNC from settings

Migrations always run over a sync driver even though the app uses the async
one. SQLite targets use batch mode so later ALTERs work there too.
"""

from logging.config import fileConfig
from typing import Optional

from alembic import context
from sqlalchemy import engine_from_config, pool

from tripbook.core.config import get_settings
from tripbook.db.base import Base
from tripbook.models import Booking, Package, Post, User  # noqa: F401 - registers tables on Base.metadata

config = context.config
target_metadata = Base.metadata


def resolve_url() -> str:
    override: Optional[str] = context.get_x_argument(as_dictionary=True).get("db_url")
    return override or config.get_main_option("sqlalchemy.url") or get_settings().DATABASE_URL_SYNC


def migration_options(url: str) -> dict:
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "render_as_batch": url.startswith("sqlite"),
    }


def run_migrations_offline(url: str) -> None:
    """Emit the SQL script instead of executing it."""
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **migration_options(url),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online(url: str) -> None:
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = url
    connectable = engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)
    try:
        with connectable.connect() as connection:
            context.configure(connection=connection, **migration_options(url))
            with context.begin_transaction():
                context.run_migrations()
    finally:
        connectable.dispose()


if config.config_file_name is not None:
    # Keep the app's structlog-configured loggers alive when run in-process
    fileConfig(config.config_file_name, disable_existing_loggers=False)

database_url = resolve_url()
if context.is_offline_mode():
    run_migrations_offline(database_url)
else:
    run_migrations_online(database_url)
