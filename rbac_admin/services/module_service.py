# rbac_admin/services/module_service.py
from typing import Any, Dict

from rbac_admin.core.exceptions import ValidationException
from rbac_admin.models.module import Module
from rbac_admin.schemas.schemas import ModuleDto
from rbac_admin.services.base import GenericService
from rbac_admin.services.validators import apply_changes, is_blank, require_text


class ModuleService(GenericService[Module, ModuleDto]):
    model = Module
    dto = ModuleDto
    entity_name = "Módulo"

    def validate_dto(self, dto: ModuleDto) -> None:
        if dto is None:
            raise ValidationException("Los datos del módulo son obligatorios")
        require_text(dto.name, "name", "El nombre del módulo es obligatorio")

    def patch_entity_from_dto(self, dto: ModuleDto, entity: Module) -> bool:
        changes: Dict[str, Any] = {}
        if not is_blank(dto.name):
            changes["name"] = dto.name
        if dto.description is not None:
            changes["description"] = dto.description
        return apply_changes(entity, changes)
