# rbac_admin/db/init_db.py
import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from rbac_admin.db.session import async_engine, Base

# --- ¡IMPORTANTE! Todos los modelos deben estar importados ANTES de usar Base.metadata ---
import rbac_admin.models  # noqa: F401

logger = logging.getLogger(__name__)


async def initialize_database(engine: AsyncEngine = async_engine) -> None:
    logger.info("Creando tablas en %s...", engine.url.render_as_string(hide_password=True))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tablas creadas/actualizadas.")


async def main():
    await initialize_database(async_engine)
    # El script es standalone: se liberan las conexiones al final.
    await async_engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
