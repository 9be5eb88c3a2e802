# rbac_admin/models/user.py
from sqlalchemy import Column, Integer, String, ForeignKey  # type: ignore
from sqlalchemy.orm import relationship  # type: ignore

from rbac_admin.db.session import Base
from rbac_admin.models.mixins import Activatable, Auditable


class User(Activatable, Auditable, Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    username = Column(String(100), unique=True, index=True, nullable=False)
    email = Column(String(255), nullable=False)
    password = Column(String(255), nullable=False, comment="Contraseña hasheada (bcrypt)")
    person_id = Column(Integer, ForeignKey("persons.id"), unique=True, nullable=False)

    person = relationship("Person", back_populates="user")
    user_roles = relationship("UserRol", back_populates="user", passive_deletes="all")

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', active={self.active})>"
