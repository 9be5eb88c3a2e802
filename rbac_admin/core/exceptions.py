# rbac_admin/core/exceptions.py
"""
Tipos de error que la capa de negocio expone a los endpoints.

Cada tipo se traduce a un código HTTP en rbac_admin/main.py:
ValidationException -> 400, EntityNotFoundException -> 404,
AuthenticationException -> 401 y ExternalServiceException -> 500
(la causa original solo se registra en el log, nunca se envía al cliente).
"""
from typing import Any, Optional


class RbacAdminError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationException(RbacAdminError):
    """Los datos enviados por el cliente no cumplen una precondición."""

    def __init__(self, field: Optional[str], message: Optional[str] = None):
        # Permite ValidationException("mensaje") sin campo asociado
        if message is None:
            field, message = None, field
        super().__init__(message)
        self.field = field


class EntityNotFoundException(RbacAdminError):
    def __init__(self, entity_name: str, entity_id: Any):
        super().__init__(f"No se encontró {entity_name} con ID {entity_id}")
        self.entity_name = entity_name
        self.entity_id = entity_id


class ExternalServiceException(RbacAdminError):
    """Falló algo por debajo de la capa de negocio (base de datos, restricciones, etc.)."""

    def __init__(self, service: str, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.service = service
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class AuthenticationException(RbacAdminError):
    pass
