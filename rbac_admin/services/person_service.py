# rbac_admin/services/person_service.py
import logging
from typing import Any, Dict

from rbac_admin.core.exceptions import ValidationException
from rbac_admin.models.person import Person
from rbac_admin.schemas.schemas import PersonDto
from rbac_admin.services.base import GenericService
from rbac_admin.services.validators import apply_changes, is_blank, is_valid_email, require_text

logger = logging.getLogger(__name__)

# Campos opcionales: en PATCH pueden vaciarse con "", pero None significa "no enviado".
OPTIONAL_TEXT_FIELDS = ("name", "second_name", "second_last_name", "phone_number", "signing")
REQUIRED_TEXT_FIELDS = ("first_name", "first_last_name", "type_identification")


class PersonService(GenericService[Person, PersonDto]):
    model = Person
    dto = PersonDto
    entity_name = "Persona"

    def _validate_email(self, email: str) -> None:
        if not is_valid_email(email):
            logger.warning("Correo electrónico inválido para persona: %s", email)
            raise ValidationException("email", "El correo electrónico no es válido")

    def validate_dto(self, dto: PersonDto) -> None:
        if dto is None:
            raise ValidationException("Los datos de la persona son obligatorios")
        if dto.email is not None:
            self._validate_email(dto.email)
        require_text(dto.first_name, "firstName", "El primer nombre es obligatorio")
        require_text(dto.first_last_name, "firstLastName", "El primer apellido es obligatorio")
        require_text(dto.type_identification, "typeIdentification", "El tipo de identificación es obligatorio")
        if dto.number_identification is None or dto.number_identification <= 0:
            raise ValidationException("numberIdentification", "El número de identificación debe ser mayor que cero")

    def patch_entity_from_dto(self, dto: PersonDto, entity: Person) -> bool:
        changes: Dict[str, Any] = {}
        for field in REQUIRED_TEXT_FIELDS:
            value = getattr(dto, field)
            if not is_blank(value):
                changes[field] = value
        for field in OPTIONAL_TEXT_FIELDS:
            value = getattr(dto, field)
            if value is not None:
                changes[field] = value
        if not is_blank(dto.email):
            self._validate_email(dto.email)
            changes["email"] = dto.email
        if dto.number_identification and dto.number_identification > 0:
            changes["number_identification"] = dto.number_identification
        return apply_changes(entity, changes)
