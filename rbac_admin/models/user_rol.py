# rbac_admin/models/user_rol.py
from sqlalchemy import Column, Integer, ForeignKey  # type: ignore
from sqlalchemy.orm import relationship  # type: ignore

from rbac_admin.db.session import Base
from rbac_admin.models.mixins import Activatable, Auditable


class UserRol(Activatable, Auditable, Base):
    __tablename__ = "user_roles"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # Sin ON DELETE CASCADE: borrar un usuario/rol asignado falla en la BD.
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    rol_id = Column(Integer, ForeignKey("roles.id"), nullable=False, index=True)

    user = relationship("User", back_populates="user_roles")
    rol = relationship("Rol", back_populates="user_roles")

    def __repr__(self):
        return f"<UserRol(user_id={self.user_id}, rol_id={self.rol_id})>"
