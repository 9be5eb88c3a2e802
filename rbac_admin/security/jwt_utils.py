# rbac_admin/security/jwt_utils.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any, Union

from jose import JWTError, jwt
from pydantic import ValidationError

from rbac_admin.config import settings
from rbac_admin.schemas.auth import TokenPayloadSchema

logger = logging.getLogger(__name__)

SESSION_TOKEN_TYPE = "session"


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    to_encode = {key: value for key, value in data.items() if value is not None}
    now = datetime.now(timezone.utc)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire, "iat": now})
    if settings.JWT_ISSUER:
        to_encode["iss"] = settings.JWT_ISSUER
    if settings.JWT_AUDIENCE:
        to_encode["aud"] = settings.JWT_AUDIENCE
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def create_session_token(user_identifier: Union[str, int], username: str) -> str:
    token_payload = TokenPayloadSchema(
        sub=str(user_identifier),
        username=username,
        token_type=SESSION_TOKEN_TYPE,
    )
    return create_access_token(
        data=token_payload.model_dump(exclude={"exp", "iat"}),
        expires_delta=timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES),
    )


def decode_access_token(token: str) -> Optional[TokenPayloadSchema]:
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
        )
        return TokenPayloadSchema(**payload)
    except (JWTError, ValidationError) as e:
        logger.info("Error decodificando o validando token: %s", e)
        return None
