# rbac_admin/services/user_service.py
import logging
from typing import Any, Dict, Optional

from rbac_admin.core.exceptions import AuthenticationException, ValidationException
from rbac_admin.crud.crud_user import UserRepository
from rbac_admin.crud.factory import RepositoryFactory
from rbac_admin.mappers.mapping_service import MappingService
from rbac_admin.models.user import User
from rbac_admin.schemas.schemas import UserDto
from rbac_admin.services.base import GenericService
from rbac_admin.services.validators import (
    apply_changes, is_blank, is_valid_email, require_positive, require_text
)
from rbac_admin.utils.security_utils import get_password_hash, verify_password

logger = logging.getLogger(__name__)


class UserService(GenericService[User, UserDto]):
    model = User
    dto = UserDto
    entity_name = "Usuario"
    repository: UserRepository

    @classmethod
    def build(cls, repository_factory: RepositoryFactory, mapping_service: MappingService):
        return cls(repository_factory.create_specific_repository(UserRepository), mapping_service)

    def validate_dto(self, dto: UserDto) -> None:
        if dto is None:
            raise ValidationException("Los datos del usuario son obligatorios")
        require_text(dto.username, "username", "El nombre de usuario es obligatorio")
        if not is_valid_email(dto.email):
            logger.warning("Correo electrónico inválido para usuario '%s': %s", dto.username, dto.email)
            raise ValidationException("email", "El correo electrónico no es válido")
        require_positive(dto.person_id, "personId", "El ID de la persona debe ser mayor que cero")

    # El mapeo nunca copia la contraseña: aquí se hashea en todos los caminos de escritura.

    def map_to_entity(self, dto: UserDto) -> User:
        entity = super().map_to_entity(dto)
        entity.password = get_password_hash(dto.password)
        return entity

    def update_entity_from_dto(self, dto: UserDto, entity: User) -> User:
        super().update_entity_from_dto(dto, entity)
        if not is_blank(dto.password) and not verify_password(dto.password, entity.password):
            entity.password = get_password_hash(dto.password)
        return entity

    async def create(self, dto: UserDto) -> UserDto:
        if dto is not None and is_blank(dto.password):
            raise ValidationException("password", "La contraseña es obligatoria")
        return await super().create(dto)

    def patch_entity_from_dto(self, dto: UserDto, entity: User) -> bool:
        password_only = (
            is_blank(dto.username) and is_blank(dto.email) and (dto.person_id or 0) <= 0
        )
        if password_only:
            if is_blank(dto.password) or verify_password(dto.password, entity.password):
                return False
            logger.info("PATCH de solo contraseña para usuario con ID %s", entity.id)
            entity.password = get_password_hash(dto.password)
            return True

        changes: Dict[str, Any] = {}
        if not is_blank(dto.username):
            changes["username"] = dto.username
        if not is_blank(dto.email):
            if not is_valid_email(dto.email):
                raise ValidationException("email", "El correo electrónico no es válido")
            changes["email"] = dto.email
        if dto.person_id and dto.person_id > 0:
            changes["person_id"] = dto.person_id
        changed = apply_changes(entity, changes)
        if not is_blank(dto.password) and not verify_password(dto.password, entity.password):
            entity.password = get_password_hash(dto.password)
            changed = True
        return changed

    async def authenticate(self, username: str, password: str) -> Optional[UserDto]:
        """Devuelve el usuario si las credenciales son válidas, o None."""
        if is_blank(username) or is_blank(password):
            return None
        user = await self._guard(
            f"buscar el usuario '{username}'", self.repository.get_by_username(username)
        )
        if user is None or not verify_password(password, user.password):
            logger.info("Credenciales inválidas para el usuario '%s'", username)
            return None
        return self.map_to_dto(user)

    async def login(self, username: Optional[str], password: Optional[str]) -> UserDto:
        """Como authenticate, pero exige credenciales válidas y una cuenta activa."""
        if is_blank(username) or is_blank(password):
            raise ValidationException("El nombre de usuario y la contraseña son obligatorios")
        user = await self.authenticate(username, password)
        if user is None:
            raise AuthenticationException("Credenciales inválidas")
        if not user.active:
            logger.info("Intento de inicio de sesión con el usuario inactivo '%s'", username)
            raise AuthenticationException("El usuario está inactivo")
        return user

    async def update_password(self, user_id: int, new_password: Optional[str]) -> None:
        self.validate_id(user_id)
        require_text(new_password, "newPassword", "La nueva contraseña es obligatoria")
        entity = await self._get_existing(user_id)
        entity.password = get_password_hash(new_password)
        self._stamp_update(entity)
        await self._guard(
            f"actualizar la contraseña del usuario con ID {user_id}", self.repository.update(entity)
        )
        logger.info("Contraseña actualizada para el usuario con ID %s", user_id)
