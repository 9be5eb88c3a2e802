# rbac_admin/services/rol_form_service.py
from typing import List

from rbac_admin.core.exceptions import ValidationException
from rbac_admin.crud.crud_rol_form import RolFormRepository
from rbac_admin.crud.factory import RepositoryFactory
from rbac_admin.mappers.mapping_service import MappingService
from rbac_admin.models.rol_form import RolForm
from rbac_admin.schemas.schemas import RolFormDto
from rbac_admin.services.base import GenericService
from rbac_admin.services.validators import apply_changes, require_positive


class RolFormService(GenericService[RolForm, RolFormDto]):
    model = RolForm
    dto = RolFormDto
    entity_name = "RolForm"
    repository: RolFormRepository

    @classmethod
    def build(cls, repository_factory: RepositoryFactory, mapping_service: MappingService):
        return cls(repository_factory.create_specific_repository(RolFormRepository), mapping_service)

    def validate_dto(self, dto: RolFormDto) -> None:
        if dto is None:
            raise ValidationException("Los datos de la asignación rol-formulario son obligatorios")
        require_positive(dto.rol_id, "rolId", "El ID del rol debe ser mayor que cero")
        require_positive(dto.form_id, "formId", "El ID del formulario debe ser mayor que cero")

    def patch_entity_from_dto(self, dto: RolFormDto, entity: RolForm) -> bool:
        # rolId y formId solo se cambian con PUT
        if dto.permission is None:
            return False
        return apply_changes(entity, {"permission": dto.permission})

    async def get_by_rol_id(self, rol_id: int) -> List[RolFormDto]:
        require_positive(rol_id, "rolId", "El ID del rol debe ser mayor que cero")
        rol_forms = await self._guard(
            f"recuperar los permisos del rol con ID {rol_id}", self.repository.get_by_rol_id(rol_id)
        )
        return self.mapping_service.map_collection_to_dto(rol_forms, RolFormDto)

    async def get_by_form_id(self, form_id: int) -> List[RolFormDto]:
        require_positive(form_id, "formId", "El ID del formulario debe ser mayor que cero")
        rol_forms = await self._guard(
            f"recuperar los permisos del formulario con ID {form_id}", self.repository.get_by_form_id(form_id)
        )
        return self.mapping_service.map_collection_to_dto(rol_forms, RolFormDto)
