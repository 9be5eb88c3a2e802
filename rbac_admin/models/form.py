# rbac_admin/models/form.py
from sqlalchemy import Column, Integer, String, Text  # type: ignore
from sqlalchemy.orm import relationship  # type: ignore

from rbac_admin.db.session import Base
from rbac_admin.models.mixins import Activatable, Auditable


class Form(Activatable, Auditable, Base):
    __tablename__ = "forms"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=True)
    route = Column(String(255), nullable=True, comment="Ruta en el frontend, ej. '/admin/roles'")
    question = Column(Text, nullable=True)
    type_question = Column(String(50), nullable=True)
    answer = Column(Text, nullable=True)

    rol_forms = relationship("RolForm", back_populates="form", passive_deletes="all")
    form_modules = relationship("FormModule", back_populates="form", passive_deletes="all")

    def __repr__(self):
        return f"<Form(id={self.id}, name='{self.name}')>"
