import logging
import threading

from sqlalchemy import Column, Integer, MetaData, String, Table, create_engine, insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from config import DATABASE_URL

logger = logging.getLogger(__name__)

metadata = MetaData()

users = Table(
    "user",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False),
)

_engine: Engine | None = None
_engine_lock = threading.Lock()

# SQLite INTEGER is a signed 64-bit value
MAX_USER_ID = 2**63 - 1
MIN_USER_ID = -(2**63)


def make_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in {"sqlite://", "sqlite:///:memory:"}:
            # one shared connection, otherwise every checkout sees an empty database
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url)


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        with _engine_lock:
            if _engine is None:
                _engine = make_engine(DATABASE_URL)
    return _engine


def dispose_engine() -> None:
    global _engine
    with _engine_lock:
        if _engine is not None:
            _engine.dispose()
            _engine = None


def create_schema(engine: Engine) -> None:
    metadata.create_all(engine)
    logger.info("User table ready url=%s", engine.url.render_as_string(hide_password=True))


def list_users(engine: Engine) -> list[dict]:
    with engine.connect() as conn:
        rows = conn.execute(select(users.c.id, users.c.name)).mappings().all()
    return [dict(row) for row in rows]


def get_user(engine: Engine, user_id: int) -> dict | None:
    if not MIN_USER_ID <= user_id <= MAX_USER_ID:
        return None
    with engine.connect() as conn:
        row = conn.execute(
            select(users.c.id, users.c.name).where(users.c.id == user_id)
        ).mappings().first()
    return dict(row) if row is not None else None


def create_user(engine: Engine, name: str) -> dict:
    with engine.begin() as conn:
        result = conn.execute(insert(users).values(name=name))
        user_id = result.inserted_primary_key[0]
    logger.info("Created user id=%s", user_id)
    return {"id": user_id, "name": name}
