# rbac_admin/db/session.py
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from rbac_admin.config import settings


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite no aplica las llaves foráneas si no se activan en cada conexión."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# --- Motor y Sesión para la base de datos de administración ---
async_engine = create_async_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
enable_sqlite_foreign_keys(async_engine)

AsyncSessionLocal = async_sessionmaker(
    bind=async_engine,
    class_=AsyncSession,
    expire_on_commit=False
)

Base = declarative_base()


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependencia de FastAPI que provee una sesión y gestiona la transacción.
    Hace COMMIT si todo va bien, y ROLLBACK si hay un error.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
