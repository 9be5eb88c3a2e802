# rbac_admin/services/form_module_service.py
from typing import List

from rbac_admin.core.exceptions import ValidationException
from rbac_admin.crud.crud_form_module import FormModuleRepository
from rbac_admin.crud.factory import RepositoryFactory
from rbac_admin.mappers.mapping_service import MappingService
from rbac_admin.models.form_module import FormModule
from rbac_admin.schemas.schemas import FormModuleDto
from rbac_admin.services.base import GenericService
from rbac_admin.services.validators import apply_changes, require_positive


class FormModuleService(GenericService[FormModule, FormModuleDto]):
    model = FormModule
    dto = FormModuleDto
    entity_name = "FormModule"
    repository: FormModuleRepository

    @classmethod
    def build(cls, repository_factory: RepositoryFactory, mapping_service: MappingService):
        return cls(repository_factory.create_specific_repository(FormModuleRepository), mapping_service)

    def validate_dto(self, dto: FormModuleDto) -> None:
        if dto is None:
            raise ValidationException("Los datos de la asignación formulario-módulo son obligatorios")
        require_positive(dto.form_id, "formId", "El ID del formulario debe ser mayor que cero")
        require_positive(dto.module_id, "moduleId", "El ID del módulo debe ser mayor que cero")

    def patch_entity_from_dto(self, dto: FormModuleDto, entity: FormModule) -> bool:
        if dto.status_procedure is None:
            return False
        return apply_changes(entity, {"status_procedure": dto.status_procedure})

    async def get_forms_by_module_id(self, module_id: int) -> List[FormModuleDto]:
        require_positive(module_id, "moduleId", "El ID del módulo debe ser mayor que cero")
        form_modules = await self._guard(
            f"recuperar los formularios del módulo con ID {module_id}",
            self.repository.get_by_module_id(module_id),
        )
        return self.mapping_service.map_collection_to_dto(form_modules, FormModuleDto)

    async def get_modules_by_form_id(self, form_id: int) -> List[FormModuleDto]:
        require_positive(form_id, "formId", "El ID del formulario debe ser mayor que cero")
        form_modules = await self._guard(
            f"recuperar los módulos del formulario con ID {form_id}",
            self.repository.get_by_form_id(form_id),
        )
        return self.mapping_service.map_collection_to_dto(form_modules, FormModuleDto)
