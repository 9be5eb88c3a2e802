# rbac_admin/utils/security_utils.py
import logging

from passlib.context import CryptContext

from rbac_admin.config import settings

logger = logging.getLogger(__name__)

# Creamos una única instancia de CryptContext.
# bcrypt es el único esquema: todas las rutas de escritura de contraseñas pasan por aquí.
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.PASSWORD_BCRYPT_ROUNDS,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verifica una contraseña en texto plano contra su versión hasheada."""
    if not plain_password or not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Hash no reconocido (ej. contraseñas antiguas guardadas en texto plano)
        logger.warning("No se pudo identificar el hash de contraseña almacenado; se rechaza la autenticación.")
        return False


def get_password_hash(password: str) -> str:
    """Hashea una contraseña en texto plano para guardarla en la base de datos."""
    return pwd_context.hash(password)
