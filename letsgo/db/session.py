from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from letsgo.core.config import DATABASE_URL

Base = declarative_base()


def create_db_engine(url: str = DATABASE_URL, **kwargs):
    if not url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True, **kwargs)

    # Sessions are used from FastAPI's worker threads; writers wait on the
    # database lock instead of failing straight away.
    connect_args = kwargs.pop("connect_args", {})
    connect_args.setdefault("check_same_thread", False)
    connect_args.setdefault("timeout", 30)
    return create_engine(url, connect_args=connect_args, **kwargs)


engine = create_db_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False)
