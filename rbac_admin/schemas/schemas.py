# rbac_admin/schemas/schemas.py
import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


def to_camel(snake_str: str) -> str:
    """Convierte un string_de_este_tipo a un stringDeEsteTipo."""
    components = snake_str.split('_')
    # Dejamos la primera parte en minúsculas y capitalizamos el resto.
    return components[0] + ''.join(x.title() for x in components[1:])


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# ==========================================================
# ======>   DTOs DE ENTIDADES (entrada y salida)     <======
# ==========================================================
# Los campos de texto valen None cuando no se envían, los IDs/FK valen 0.
# Las fechas de auditoría solo viajan en las respuestas: el mapeo DTO -> entidad las ignora.

class AuditedDto(CamelModel):
    id: int = 0
    active: bool = True
    create_date: Optional[datetime.datetime] = None
    update_date: Optional[datetime.datetime] = None
    delete_date: Optional[datetime.datetime] = None


class PersonDto(AuditedDto):
    name: Optional[str] = Field(None, description="Nombre para mostrar; en las respuestas es 'primer nombre + primer apellido'.")
    first_name: Optional[str] = None
    second_name: Optional[str] = None
    first_last_name: Optional[str] = None
    second_last_name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = Field(None, description="Si no se envía, se genera como nombre.apellido@dominio.")
    type_identification: Optional[str] = None
    number_identification: int = 0
    signing: Optional[str] = None


class UserDto(AuditedDto):
    username: Optional[str] = None
    email: Optional[str] = None
    # Solo de escritura: nunca se serializa en las respuestas.
    password: Optional[str] = Field(None, exclude=True)
    person_id: int = 0


class RolDto(AuditedDto):
    type_rol: Optional[str] = None
    description: Optional[str] = None


class FormDto(AuditedDto):
    name: Optional[str] = None
    description: Optional[str] = None
    route: Optional[str] = None
    question: Optional[str] = None
    type_question: Optional[str] = None
    answer: Optional[str] = None


class ModuleDto(AuditedDto):
    name: Optional[str] = None
    description: Optional[str] = None


class UserRolDto(AuditedDto):
    user_id: int = 0
    rol_id: int = 0


class RolFormDto(AuditedDto):
    rol_id: int = 0
    form_id: int = 0
    permission: Optional[str] = Field(None, description="Texto libre, no se interpreta.")


class FormModuleDto(AuditedDto):
    form_id: int = 0
    module_id: int = 0
    status_procedure: Optional[str] = None


# ==========================================================
# ======>     SCHEMAS AUXILIARES DE LOS ENDPOINTS     <======
# ==========================================================

class UpdatePasswordDto(CamelModel):
    new_password: Optional[str] = None


class ActivationStateDto(CamelModel):
    active: bool


class MessageResponse(BaseModel):
    message: str
