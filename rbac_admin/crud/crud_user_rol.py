# rbac_admin/crud/crud_user_rol.py
from typing import List

from sqlalchemy.future import select  # type: ignore

from rbac_admin.crud.base import GenericRepository
from rbac_admin.models.user_rol import UserRol


class UserRolRepository(GenericRepository[UserRol]):
    model = UserRol

    async def get_by_user_id(self, user_id: int) -> List[UserRol]:
        return await self._fetch_all(
            select(UserRol).filter(UserRol.user_id == user_id).order_by(UserRol.id),
            f"listar por usuario {user_id}",
        )

    async def get_by_rol_id(self, rol_id: int) -> List[UserRol]:
        return await self._fetch_all(
            select(UserRol).filter(UserRol.rol_id == rol_id).order_by(UserRol.id),
            f"listar por rol {rol_id}",
        )
