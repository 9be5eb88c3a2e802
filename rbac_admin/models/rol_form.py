# rbac_admin/models/rol_form.py
from sqlalchemy import Column, Integer, String, ForeignKey  # type: ignore
from sqlalchemy.orm import relationship  # type: ignore

from rbac_admin.db.session import Base
from rbac_admin.models.mixins import Activatable, Auditable


class RolForm(Activatable, Auditable, Base):
    __tablename__ = "rol_forms"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    rol_id = Column(Integer, ForeignKey("roles.id"), nullable=False, index=True)
    form_id = Column(Integer, ForeignKey("forms.id"), nullable=False, index=True)
    # Texto libre: no se interpreta ni se valida contra una lista de permisos.
    permission = Column(String(100), nullable=True, comment="Permiso del rol sobre el formulario")

    rol = relationship("Rol", back_populates="rol_forms")
    form = relationship("Form", back_populates="rol_forms")

    def __repr__(self):
        return f"<RolForm(rol_id={self.rol_id}, form_id={self.form_id}, permission='{self.permission}')>"
