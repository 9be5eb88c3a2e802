# rbac_admin/services/validators.py
from typing import Any, Dict, Optional

from email_validator import validate_email, EmailNotValidError

from rbac_admin.core.exceptions import ValidationException


def is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def is_valid_email(email: Optional[str]) -> bool:
    """Validación permisiva: solo se analiza la sintaxis, sin consultar DNS."""
    if is_blank(email):
        return False
    try:
        validate_email(email, check_deliverability=False)
        return True
    except EmailNotValidError:
        return False


def require_text(value: Optional[str], field: str, message: str) -> None:
    if is_blank(value):
        raise ValidationException(field, message)


def require_positive(value: Optional[int], field: str, message: str) -> None:
    if value is None or value <= 0:
        raise ValidationException(field, message)


def apply_changes(entity: Any, changes: Dict[str, Any]) -> bool:
    """Asigna solo los valores que difieren del actual. Devuelve si hubo algún cambio."""
    changed = False
    for field, value in changes.items():
        if getattr(entity, field) != value:
            setattr(entity, field, value)
            changed = True
    return changed
