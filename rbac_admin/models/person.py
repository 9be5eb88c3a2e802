# rbac_admin/models/person.py
from sqlalchemy import Column, Integer, BigInteger, String, Text  # type: ignore
from sqlalchemy.orm import relationship  # type: ignore

from rbac_admin.db.session import Base
from rbac_admin.models.mixins import Activatable, Auditable


class Person(Activatable, Auditable, Base):
    __tablename__ = "persons"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(200), nullable=True, comment="Nombre para mostrar")
    first_name = Column(String(100), nullable=False)
    second_name = Column(String(100), nullable=True)
    first_last_name = Column(String(100), nullable=False)
    second_last_name = Column(String(100), nullable=True)
    phone_number = Column(String(30), nullable=True)
    email = Column(String(255), nullable=True, index=True)
    type_identification = Column(String(20), nullable=False, comment="Tipo de documento, ej. CC, TI, CE")
    number_identification = Column(BigInteger, nullable=False)
    signing = Column(Text, nullable=True, comment="Firma (texto libre)")

    # Una persona tiene como máximo un usuario
    user = relationship("User", back_populates="person", uselist=False, passive_deletes="all")

    def __repr__(self):
        return f"<Person(id={self.id}, first_name='{self.first_name}', first_last_name='{self.first_last_name}')>"
