# rbac_admin/models/rol.py
from sqlalchemy import Column, Integer, String, Text  # type: ignore
from sqlalchemy.orm import relationship  # type: ignore

from rbac_admin.db.session import Base
from rbac_admin.models.mixins import Activatable, Auditable


class Rol(Activatable, Auditable, Base):
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    type_rol = Column(String(50), nullable=False, index=True, comment="Etiqueta del rol (ej. Admin, Instructor)")
    description = Column(Text, nullable=True)

    user_roles = relationship("UserRol", back_populates="rol", passive_deletes="all")
    rol_forms = relationship("RolForm", back_populates="rol", passive_deletes="all")

    def __repr__(self):
        return f"<Rol(id={self.id}, type_rol='{self.type_rol}')>"
