from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import NullPool
from videotube.config.environments import DATABASE_URL


def to_async_url(url: str) -> str:
    # psycopg2 / bare postgres URLs are rewritten to the asyncpg driver
    if url.startswith("postgresql+psycopg2"):
        return url.replace("postgresql+psycopg2", "postgresql+asyncpg", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


ASYNC_DB_URL = to_async_url(DATABASE_URL)

if ASYNC_DB_URL.startswith("postgresql+asyncpg"):
    # pgbouncer in transaction mode rejects prepared statements
    engine = create_async_engine(
        ASYNC_DB_URL,
        poolclass=NullPool,
        connect_args={
            "statement_cache_size": 0,
            "prepared_statement_cache_size": 0,
        }
    )
else:
    engine = create_async_engine(ASYNC_DB_URL)

AsyncSessionLocal = sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()
