# rbac_admin/crud/activation.py
import logging
from typing import Generic, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError  # type: ignore
from sqlalchemy.ext.asyncio import AsyncSession  # type: ignore

from rbac_admin.models.mixins import Activatable, Auditable, utcnow

logger = logging.getLogger(__name__)

ActivatableType = TypeVar("ActivatableType", bound=Activatable)


class ActivationRepository(Generic[ActivatableType]):
    """Solo el cambio de estado activo/inactivo de un modelo que sea Activatable."""

    def __init__(self, db: AsyncSession, model: Type[ActivatableType]):
        if not (isinstance(model, type) and issubclass(model, Activatable)):
            raise TypeError(f"{getattr(model, '__name__', model)} no soporta activación")
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: int) -> Optional[ActivatableType]:
        return await self.db.get(self.model, entity_id)

    async def change_state(self, entity_id: int, active: bool) -> bool:
        try:
            entity = await self.db.get(self.model, entity_id)
            if entity is None:
                return False
            entity.active = active
            if isinstance(entity, Auditable):
                now = utcnow()
                entity.update_date = now
                entity.delete_date = None if active else now
            await self.db.commit()
            return True
        except SQLAlchemyError:
            logger.exception("Error de base de datos al cambiar el estado de %s (id=%s)", self.model.__name__, entity_id)
            await self.db.rollback()
            raise
