# rbac_admin/services/activation_service.py
"""
Cambio de estado activo/inactivo con un contrato más laxo que el CRUD:
la ausencia del registro se informa con False en lugar de una excepción,
y el endpoint decide cómo responder.
"""
import logging
from typing import Generic, TypeVar

from rbac_admin.core.exceptions import ExternalServiceException, ValidationException
from rbac_admin.crud.activation import ActivationRepository
from rbac_admin.models.mixins import Activatable

logger = logging.getLogger(__name__)

ActivatableType = TypeVar("ActivatableType", bound=Activatable)


class ActivationService(Generic[ActivatableType]):
    def __init__(self, repository: ActivationRepository):
        self.repository = repository

    @property
    def entity_name(self) -> str:
        return self.repository.model.__name__

    async def activate(self, entity_id: int) -> bool:
        return await self.change_state(entity_id, True)

    async def deactivate(self, entity_id: int) -> bool:
        return await self.change_state(entity_id, False)

    async def change_state(self, entity_id: int, active: bool) -> bool:
        if entity_id is None or entity_id <= 0:
            logger.warning("ID inválido al cambiar el estado de %s: %s", self.entity_name, entity_id)
            raise ValidationException("id", "El ID debe ser mayor que cero")
        try:
            changed = await self.repository.change_state(entity_id, active)
        except Exception as e:
            logger.error("Error al cambiar el estado de %s con ID %s: %s", self.entity_name, entity_id, e)
            raise ExternalServiceException(
                "Base de datos", f"Error al cambiar el estado de {self.entity_name} con ID {entity_id}", e
            ) from e
        if not changed:
            logger.info("%s con ID %s no encontrado al cambiar su estado", self.entity_name, entity_id)
        return changed
