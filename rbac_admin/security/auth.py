# rbac_admin/security/auth.py
import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from rbac_admin.core.exceptions import AuthenticationException
from rbac_admin.schemas.auth import TokenPayloadSchema
from rbac_admin.security.jwt_utils import SESSION_TOKEN_TYPE, decode_access_token

logger = logging.getLogger(__name__)

# auto_error=False: la ausencia del token se responde con nuestro 401 {"message"} y no con el 403 de FastAPI
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_token_payload(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenPayloadSchema:
    if credentials is None or not credentials.credentials:
        raise AuthenticationException("No se proporcionó un token de acceso")

    payload = decode_access_token(credentials.credentials)
    if payload is None or payload.token_type != SESSION_TOKEN_TYPE:
        logger.info("Token rechazado en una ruta protegida.")
        raise AuthenticationException("Token inválido o expirado")
    return payload
