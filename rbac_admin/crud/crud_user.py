# rbac_admin/crud/crud_user.py
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError  # type: ignore
from sqlalchemy.future import select  # type: ignore

from rbac_admin.crud.base import GenericRepository
from rbac_admin.models.user import User


class UserRepository(GenericRepository[User]):
    model = User

    async def get_by_username(self, username: str) -> Optional[User]:
        try:
            result = await self.db.execute(select(User).filter(User.username == username))
            return result.scalars().first()
        except SQLAlchemyError:
            await self._rollback(f"buscar por username '{username}'")
            raise
