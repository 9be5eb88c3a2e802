# rbac_admin/models/mixins.py
from datetime import datetime, timezone

from sqlalchemy import Column, Boolean, DateTime  # type: ignore


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Activatable:
    """Capacidad: la entidad tiene un estado activo/inactivo."""

    active = Column(Boolean, default=True, nullable=False, comment="Si el registro está activo (borrado lógico)")


class Auditable:
    """Capacidad: la entidad registra fechas de creación, actualización y borrado lógico."""

    create_date = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    update_date = Column(DateTime(timezone=True), nullable=True)
    delete_date = Column(DateTime(timezone=True), nullable=True)


# Columnas que solo manejan las capas de negocio/datos; el mapeo desde un DTO nunca las toca.
AUDIT_FIELDS = ("create_date", "update_date", "delete_date")
