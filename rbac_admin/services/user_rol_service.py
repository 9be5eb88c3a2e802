# rbac_admin/services/user_rol_service.py
import logging
from typing import Any, Dict, List

from rbac_admin.core.exceptions import ValidationException
from rbac_admin.crud.crud_user_rol import UserRolRepository
from rbac_admin.crud.factory import RepositoryFactory
from rbac_admin.mappers.mapping_service import MappingService
from rbac_admin.models.user_rol import UserRol
from rbac_admin.schemas.schemas import UserRolDto
from rbac_admin.services.base import GenericService
from rbac_admin.services.validators import apply_changes, require_positive

logger = logging.getLogger(__name__)


class UserRolService(GenericService[UserRol, UserRolDto]):
    model = UserRol
    dto = UserRolDto
    entity_name = "UserRol"
    repository: UserRolRepository

    @classmethod
    def build(cls, repository_factory: RepositoryFactory, mapping_service: MappingService):
        return cls(repository_factory.create_specific_repository(UserRolRepository), mapping_service)

    def validate_dto(self, dto: UserRolDto) -> None:
        if dto is None:
            raise ValidationException("Los datos de la asignación usuario-rol son obligatorios")
        require_positive(dto.user_id, "userId", "El ID del usuario debe ser mayor que cero")
        require_positive(dto.rol_id, "rolId", "El ID del rol debe ser mayor que cero")

    def patch_entity_from_dto(self, dto: UserRolDto, entity: UserRol) -> bool:
        changes: Dict[str, Any] = {}
        if dto.user_id and dto.user_id > 0:
            changes["user_id"] = dto.user_id
        if dto.rol_id and dto.rol_id > 0:
            changes["rol_id"] = dto.rol_id
        return apply_changes(entity, changes)

    async def get_roles_by_user_id(self, user_id: int) -> List[UserRolDto]:
        require_positive(user_id, "userId", "El ID del usuario debe ser mayor que cero")
        user_roles = await self._guard(
            f"recuperar los roles del usuario con ID {user_id}", self.repository.get_by_user_id(user_id)
        )
        return self.mapping_service.map_collection_to_dto(user_roles, UserRolDto)

    async def get_users_by_rol_id(self, rol_id: int) -> List[UserRolDto]:
        require_positive(rol_id, "rolId", "El ID del rol debe ser mayor que cero")
        user_roles = await self._guard(
            f"recuperar los usuarios del rol con ID {rol_id}", self.repository.get_by_rol_id(rol_id)
        )
        return self.mapping_service.map_collection_to_dto(user_roles, UserRolDto)
