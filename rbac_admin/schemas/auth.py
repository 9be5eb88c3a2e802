# rbac_admin/schemas/auth.py
import datetime
from typing import Optional

from pydantic import BaseModel, Field

from rbac_admin.schemas.schemas import CamelModel


class LoginDto(BaseModel):
    # Opcionales para responder 400 con un mensaje propio en lugar del 422 de FastAPI
    username: Optional[str] = Field(None, description="Nombre de usuario.")
    password: Optional[str] = Field(None, description="Contraseña del usuario.")


class LoggedUserSchema(CamelModel):
    id: int
    username: str
    email: str
    person_id: int


class LoginResponse(BaseModel):
    id: int
    username: str
    token: str
    token_type: str = "bearer"
    user: LoggedUserSchema


class TokenPayloadSchema(BaseModel):  # Para los datos que van DENTRO del JWT
    sub: str  # Subject: id del usuario
    username: Optional[str] = None
    exp: Optional[datetime.datetime] = None
    iat: Optional[datetime.datetime] = None
    token_type: Optional[str] = Field(None, description="Tipo de token (ej. 'session')")


class TokenValidationResponse(BaseModel):
    valid: bool = True
    sub: Optional[str] = None
    username: Optional[str] = None
