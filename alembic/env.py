"""Alembic entry point: points migrations at the tasks schema and DATABASE_URL."""

from logging.config import fileConfig

from sqlalchemy import pool
from sqlmodel import SQLModel, create_engine

from alembic import context

# Registers the tasks table on SQLModel.metadata
from taskboard.models import Task  # noqa: F401
from taskboard.config import get_settings
from taskboard.db.session import normalize_database_url

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Compared against the database by `alembic revision --autogenerate`
target_metadata = SQLModel.metadata

settings = get_settings()
database_url = normalize_database_url(settings.DATABASE_URL)


def run_migrations_offline() -> None:
    """Render the migration SQL to stdout without connecting (`alembic upgrade --sql`)."""
    context.configure(
        url=database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations over a live connection.

    SQLite cannot ALTER most columns in place, so batch mode is used there.
    """
    connectable = create_engine(database_url, poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
