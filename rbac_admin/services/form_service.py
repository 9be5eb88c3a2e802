# rbac_admin/services/form_service.py
from typing import Any, Dict

from rbac_admin.core.exceptions import ValidationException
from rbac_admin.models.form import Form
from rbac_admin.schemas.schemas import FormDto
from rbac_admin.services.base import GenericService
from rbac_admin.services.validators import apply_changes, is_blank, require_text

OPTIONAL_FIELDS = ("description", "question", "type_question", "answer")


class FormService(GenericService[Form, FormDto]):
    model = Form
    dto = FormDto
    entity_name = "Formulario"

    def validate_dto(self, dto: FormDto) -> None:
        if dto is None:
            raise ValidationException("Los datos del formulario son obligatorios")
        require_text(dto.name, "name", "El nombre del formulario es obligatorio")

    def patch_entity_from_dto(self, dto: FormDto, entity: Form) -> bool:
        changes: Dict[str, Any] = {}
        if not is_blank(dto.name):
            changes["name"] = dto.name
        for field in OPTIONAL_FIELDS:
            value = getattr(dto, field)
            if value is not None:
                changes[field] = value
        # La ruta es anulable en la base de datos, pero None sigue significando "no enviado"
        if dto.route is not None:
            changes["route"] = dto.route
        return apply_changes(entity, changes)
