# rbac_admin/crud/base.py
import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError  # type: ignore
from sqlalchemy.ext.asyncio import AsyncSession  # type: ignore
from sqlalchemy.future import select  # type: ignore

from rbac_admin.mappers.profiles import column_names, primary_key_names
from rbac_admin.models.mixins import Activatable, Auditable, AUDIT_FIELDS, utcnow

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType")


class GenericRepository(Generic[ModelType]):
    """
    Acceso a datos CRUD para un modelo. Cada escritura hace su propio commit;
    ante un error de SQLAlchemy se registra, se hace rollback y se relanza.
    """

    model: Type[ModelType]

    def __init__(self, db: AsyncSession, model: Optional[Type[ModelType]] = None):
        self.db = db
        if model is not None:
            self.model = model
        if getattr(self, "model", None) is None:
            raise TypeError(f"{type(self).__name__} necesita un modelo")

    @property
    def model_name(self) -> str:
        return self.model.__name__

    async def _rollback(self, action: str, entity_id: Any = None) -> None:
        logger.exception("Error de base de datos al %s %s (id=%s)", action, self.model_name, entity_id)
        await self.db.rollback()

    async def _fetch_all(self, stmt: Any, action: str) -> List[Any]:
        try:
            result = await self.db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError:
            await self._rollback(action)
            raise

    async def get_all(self) -> List[ModelType]:
        entities = await self._fetch_all(
            select(self.model).order_by(*self.model.__table__.primary_key.columns), "listar"
        )
        # Instantáneas de solo lectura: fuera del seguimiento de la sesión
        for entity in entities:
            self.db.expunge(entity)
        return entities

    async def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        try:
            return await self.db.get(self.model, entity_id)
        except SQLAlchemyError:
            await self._rollback("obtener", entity_id)
            raise

    async def create(self, entity: ModelType) -> ModelType:
        try:
            self.db.add(entity)
            await self.db.commit()
            await self.db.refresh(entity)
            return entity
        except SQLAlchemyError:
            await self._rollback("crear")
            raise

    async def update(self, entity: ModelType) -> bool:
        entity_id = getattr(entity, "id", None)
        try:
            if entity_id is None or await self.db.get(self.model, entity_id) is None:
                return False
            await self.db.merge(entity)
            await self.db.commit()
            return True
        except SQLAlchemyError:
            await self._rollback("actualizar", entity_id)
            raise

    async def patch(self, entity_id: int, partial_entity: ModelType) -> bool:
        """Copia sobre el registro guardado todas las columnas no nulas de partial_entity."""
        protected = set(AUDIT_FIELDS) | primary_key_names(self.model)
        try:
            existing = await self.db.get(self.model, entity_id)
            if existing is None:
                return False
            for name in column_names(self.model) - protected:
                value = getattr(partial_entity, name, None)
                if value is not None:
                    setattr(existing, name, value)
            await self.db.commit()
            return True
        except SQLAlchemyError:
            await self._rollback("modificar", entity_id)
            raise

    async def delete(self, entity_id: int) -> bool:
        try:
            entity = await self.db.get(self.model, entity_id)
            if entity is None:
                return False
            await self.db.delete(entity)
            await self.db.commit()
            return True
        except SQLAlchemyError:
            await self._rollback("eliminar", entity_id)
            raise

    async def soft_delete(self, entity_id: int) -> bool:
        try:
            entity = await self.db.get(self.model, entity_id)
            if entity is None or not isinstance(entity, Activatable):
                return False
            entity.active = False
            if isinstance(entity, Auditable):
                entity.delete_date = utcnow()
            await self.db.commit()
            return True
        except SQLAlchemyError:
            await self._rollback("desactivar", entity_id)
            raise

    async def activate(self, entity_id: int) -> bool:
        try:
            entity = await self.db.get(self.model, entity_id)
            if entity is None or not isinstance(entity, Activatable):
                return False
            entity.active = True
            if isinstance(entity, Auditable):
                entity.delete_date = None
                entity.update_date = utcnow()
            await self.db.commit()
            return True
        except SQLAlchemyError:
            await self._rollback("activar", entity_id)
            raise
