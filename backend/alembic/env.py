"""
Alembic Migration Environment
===============================

What:  Configures Alembic for the users schema on our async SQLAlchemy setup.
Why:   Migrations must target the same database the app uses, and
       --autogenerate must see the User model to diff the schema.
How:   Overrides the URL from alembic.ini with app settings and runs
       migrations through an async engine.
Who:   Called by `alembic` CLI commands (upgrade, downgrade, revision).
When:  Before first start and on every deploy that ships a new revision.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config
from alembic import context

from app.config import settings
from app.database import Base

# Alembic only sees models that are imported and registered with Base
from app.models.user import User  # noqa: F401

# Gives access to the values in alembic.ini
config = context.config

# Logging sections live in alembic.ini; the app's setup_logging is not used here
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# What: Metadata holding the `users` table definition
# Why: Compared against the live schema by --autogenerate
target_metadata = Base.metadata

# DATABASE_URL from app settings replaces whatever alembic.ini says
# Why: Single source of truth for database configuration
config.set_main_option("sqlalchemy.url", settings.database_url)


def run_migrations_offline() -> None:
    """
    Emit SQL to stdout without connecting to the database.

    Used with `alembic upgrade head --sql` to review DDL before a deploy.
    """
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,  # Inline parameters so the script is runnable as-is
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection):
    # Sync callback: Alembic's migration ops are synchronous
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """
    Connect with an async engine and apply pending migrations via
    connection.run_sync().
    """
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,  # One-shot process: no pool to keep warm
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


# `--sql` selects offline mode
if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
