# rbac_admin/models/form_module.py
from sqlalchemy import Column, Integer, String, ForeignKey  # type: ignore
from sqlalchemy.orm import relationship  # type: ignore

from rbac_admin.db.session import Base
from rbac_admin.models.mixins import Activatable, Auditable


class FormModule(Activatable, Auditable, Base):
    __tablename__ = "form_modules"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    form_id = Column(Integer, ForeignKey("forms.id"), nullable=False, index=True)
    module_id = Column(Integer, ForeignKey("modules.id"), nullable=False, index=True)
    status_procedure = Column(String(100), nullable=True)

    form = relationship("Form", back_populates="form_modules")
    module = relationship("Module", back_populates="form_modules")

    def __repr__(self):
        return f"<FormModule(form_id={self.form_id}, module_id={self.module_id})>"
