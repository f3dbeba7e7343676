from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool

from letsgo.core.config import DATABASE_URL
from letsgo.db.session import Base, create_db_engine
import letsgo.models.registry  # noqa: F401  (registers every table)

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# `alembic -x db_url=... upgrade head` targets another database
database_url = context.get_x_argument(as_dictionary=True).get("db_url", DATABASE_URL)
config.set_main_option("sqlalchemy.url", database_url)

target_metadata = Base.metadata


def _configure(**kwargs):
    # SQLite cannot ALTER constraints in place
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=database_url.startswith("sqlite"),
        **kwargs,
    )


def run_migrations_offline():
    """Emit the migration SQL without connecting."""
    _configure(url=database_url, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connectable = create_db_engine(database_url, poolclass=pool.NullPool)
    with connectable.connect() as connection:
        _configure(connection=connection)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
