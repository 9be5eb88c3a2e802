# rbac_admin/models/module.py
from sqlalchemy import Column, Integer, String, Text  # type: ignore
from sqlalchemy.orm import relationship  # type: ignore

from rbac_admin.db.session import Base
from rbac_admin.models.mixins import Activatable, Auditable


class Module(Activatable, Auditable, Base):
    __tablename__ = "modules"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=True)

    form_modules = relationship("FormModule", back_populates="module", passive_deletes="all")

    def __repr__(self):
        return f"<Module(id={self.id}, name='{self.name}')>"
