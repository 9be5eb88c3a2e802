# rbac_admin/services/base.py
"""
Servicio de negocio genérico sobre un repositorio y el servicio de mapeo.

Las subclases fijan `model`, `dto` y `entity_name`, e implementan los
ganchos `validate_dto` y `patch_entity_from_dto`. Los errores de validación
y de entidad inexistente se propagan tal cual; cualquier otro fallo de las
capas inferiores se envuelve en ExternalServiceException.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Generic, List, Type, TypeVar

from pydantic import BaseModel

from rbac_admin.core.exceptions import (
    EntityNotFoundException,
    ExternalServiceException,
    RbacAdminError,
    ValidationException,
)
from rbac_admin.crud.base import GenericRepository
from rbac_admin.crud.factory import RepositoryFactory
from rbac_admin.mappers.mapping_service import MappingService
from rbac_admin.models.mixins import Activatable, Auditable, utcnow

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType")
DtoType = TypeVar("DtoType", bound=BaseModel)
T = TypeVar("T")

DATABASE_SERVICE = "Base de datos"


class GenericService(ABC, Generic[ModelType, DtoType]):
    model: Type[ModelType]
    dto: Type[DtoType]
    entity_name: str = "registro"

    def __init__(self, repository: GenericRepository, mapping_service: MappingService):
        self.repository = repository
        self.mapping_service = mapping_service

    @classmethod
    def build(cls, repository_factory: RepositoryFactory, mapping_service: MappingService):
        return cls(repository_factory.create_repository(cls.model), mapping_service)

    # --- Ganchos por entidad ---

    def validate_id(self, entity_id: int) -> None:
        if entity_id is None or entity_id <= 0:
            logger.warning("ID inválido para %s: %s", self.entity_name, entity_id)
            raise ValidationException("id", f"El ID de {self.entity_name} debe ser mayor que cero")

    @abstractmethod
    def validate_dto(self, dto: DtoType) -> None:
        ...

    @abstractmethod
    def patch_entity_from_dto(self, dto: DtoType, entity: ModelType) -> bool:
        """Aplica solo los campos que participan en PATCH. Devuelve si algo cambió."""

    def map_to_dto(self, entity: ModelType) -> DtoType:
        return self.mapping_service.map_to_dto(entity, self.dto)

    def map_to_entity(self, dto: DtoType) -> ModelType:
        return self.mapping_service.map_to_entity(dto, self.model)

    def update_entity_from_dto(self, dto: DtoType, entity: ModelType) -> ModelType:
        return self.mapping_service.update_entity_from_dto(dto, entity)

    # --- Utilidades ---

    async def _guard(self, action: str, awaitable: Awaitable[T]) -> T:
        try:
            return await awaitable
        except RbacAdminError:
            raise
        except Exception as e:
            logger.error("Error al %s: %s", action, e)
            raise ExternalServiceException(DATABASE_SERVICE, f"Error al {action}", e) from e

    async def _get_existing(self, entity_id: int) -> ModelType:
        entity = await self._guard(
            f"recuperar {self.entity_name} con ID {entity_id}",
            self.repository.get_by_id(entity_id),
        )
        if entity is None:
            logger.info("%s con ID %s no encontrado", self.entity_name, entity_id)
            raise EntityNotFoundException(self.entity_name, entity_id)
        return entity

    @staticmethod
    def _stamp_update(entity: Any) -> None:
        if isinstance(entity, Auditable):
            entity.update_date = utcnow()

    @staticmethod
    def _sync_lifecycle(dto: DtoType, entity: Any, previous_active: bool) -> None:
        """Un PUT sin 'active' conserva el estado; si lo cambia, delete_date lo acompaña."""
        if not isinstance(entity, Activatable):
            return
        if "active" not in dto.model_fields_set:
            entity.active = previous_active
        elif isinstance(entity, Auditable) and entity.active != previous_active:
            entity.delete_date = None if entity.active else utcnow()

    # --- Operaciones ---

    async def get_all(self) -> List[DtoType]:
        async def _load() -> List[DtoType]:
            entities = await self.repository.get_all()
            return self.mapping_service.map_collection_to_dto(entities, self.dto)

        return await self._guard(f"recuperar los registros de {self.entity_name}", _load())

    async def get_by_id(self, entity_id: int) -> DtoType:
        self.validate_id(entity_id)
        entity = await self._get_existing(entity_id)
        return self.map_to_dto(entity)

    async def create(self, dto: DtoType) -> DtoType:
        self.validate_dto(dto)

        async def _create() -> DtoType:
            entity = self.map_to_entity(dto)
            if isinstance(entity, Auditable):
                entity.create_date = utcnow()
            created = await self.repository.create(entity)
            logger.info("%s creado con ID %s", self.entity_name, created.id)
            return self.map_to_dto(created)

        return await self._guard(f"crear {self.entity_name}", _create())

    async def update(self, entity_id: int, dto: DtoType) -> DtoType:
        self.validate_id(entity_id)
        self.validate_dto(dto)
        entity = await self._get_existing(entity_id)

        previous_active = getattr(entity, "active", None)

        async def _update() -> bool:
            self.update_entity_from_dto(dto, entity)
            self._sync_lifecycle(dto, entity, previous_active)
            self._stamp_update(entity)
            return await self.repository.update(entity)

        if not await self._guard(f"actualizar {self.entity_name} con ID {entity_id}", _update()):
            raise EntityNotFoundException(self.entity_name, entity_id)
        return self.map_to_dto(entity)

    async def patch(self, entity_id: int, dto: DtoType) -> DtoType:
        self.validate_id(entity_id)
        entity = await self._get_existing(entity_id)
        if not self.patch_entity_from_dto(dto, entity):
            logger.info("PATCH sin cambios para %s con ID %s", self.entity_name, entity_id)
            return self.map_to_dto(entity)

        self._stamp_update(entity)
        if not await self._guard(
            f"modificar {self.entity_name} con ID {entity_id}", self.repository.update(entity)
        ):
            raise EntityNotFoundException(self.entity_name, entity_id)
        return self.map_to_dto(entity)

    async def delete(self, entity_id: int) -> None:
        self.validate_id(entity_id)
        await self._get_existing(entity_id)
        deleted = await self._guard(
            f"eliminar {self.entity_name} con ID {entity_id}", self.repository.delete(entity_id)
        )
        if not deleted:
            raise ExternalServiceException(
                DATABASE_SERVICE, f"No se pudo eliminar {self.entity_name} con ID {entity_id}"
            )
        logger.info("%s con ID %s eliminado", self.entity_name, entity_id)

    async def soft_delete(self, entity_id: int) -> None:
        self.validate_id(entity_id)
        entity = await self._get_existing(entity_id)
        if isinstance(entity, Activatable) and not entity.active:
            logger.info("%s con ID %s ya estaba inactivo", self.entity_name, entity_id)
            return
        done = await self._guard(
            f"desactivar {self.entity_name} con ID {entity_id}", self.repository.soft_delete(entity_id)
        )
        if not done:
            raise ExternalServiceException(
                DATABASE_SERVICE, f"No se pudo desactivar {self.entity_name} con ID {entity_id}"
            )

    async def activate(self, entity_id: int) -> None:
        self.validate_id(entity_id)
        entity = await self._get_existing(entity_id)
        if isinstance(entity, Activatable) and entity.active:
            logger.info("%s con ID %s ya estaba activo", self.entity_name, entity_id)
            return
        done = await self._guard(
            f"activar {self.entity_name} con ID {entity_id}", self.repository.activate(entity_id)
        )
        if not done:
            raise ExternalServiceException(
                DATABASE_SERVICE, f"No se pudo activar {self.entity_name} con ID {entity_id}"
            )
