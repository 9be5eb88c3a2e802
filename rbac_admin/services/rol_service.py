# rbac_admin/services/rol_service.py
import logging
from typing import Any, Dict, List

from rbac_admin.core.exceptions import ValidationException
from rbac_admin.crud.base import GenericRepository
from rbac_admin.crud.crud_rol_form import RolFormRepository
from rbac_admin.crud.factory import RepositoryFactory
from rbac_admin.mappers.mapping_service import MappingService
from rbac_admin.models.rol import Rol
from rbac_admin.schemas.schemas import FormDto, RolDto
from rbac_admin.services.base import GenericService
from rbac_admin.services.validators import apply_changes, is_blank, require_text

logger = logging.getLogger(__name__)


class RolService(GenericService[Rol, RolDto]):
    model = Rol
    dto = RolDto
    entity_name = "Rol"

    def __init__(
        self,
        repository: GenericRepository,
        mapping_service: MappingService,
        rol_form_repository: RolFormRepository,
    ):
        super().__init__(repository, mapping_service)
        self.rol_form_repository = rol_form_repository

    @classmethod
    def build(cls, repository_factory: RepositoryFactory, mapping_service: MappingService):
        return cls(
            repository_factory.create_repository(Rol),
            mapping_service,
            repository_factory.create_specific_repository(RolFormRepository),
        )

    def validate_dto(self, dto: RolDto) -> None:
        if dto is None:
            raise ValidationException("Los datos del rol son obligatorios")
        require_text(dto.type_rol, "typeRol", "El tipo de rol es obligatorio")

    def patch_entity_from_dto(self, dto: RolDto, entity: Rol) -> bool:
        changes: Dict[str, Any] = {}
        if not is_blank(dto.type_rol):
            changes["type_rol"] = dto.type_rol
        if dto.description is not None:
            changes["description"] = dto.description
        return apply_changes(entity, changes)

    async def get_forms_by_rol_id(self, rol_id: int) -> List[FormDto]:
        """Formularios asignados a un rol. 404 si el rol no existe."""
        if rol_id is None or rol_id <= 0:
            logger.warning("ID de rol inválido al consultar formularios: %s", rol_id)
            raise ValidationException("rolId", "El ID del rol debe ser mayor que cero")
        await self._get_existing(rol_id)
        forms = await self._guard(
            f"recuperar los formularios del rol con ID {rol_id}",
            self.rol_form_repository.get_forms_by_rol_id(rol_id),
        )
        return self.mapping_service.map_collection_to_dto(forms, FormDto)
