# rbac_admin/api/endpoints/auth_endpoints.py
import logging

from fastapi import APIRouter, Depends  # type: ignore

from rbac_admin.api.dependencies import service_provider
from rbac_admin.schemas.auth import (
    LoggedUserSchema, LoginDto, LoginResponse, TokenPayloadSchema, TokenValidationResponse
)
from rbac_admin.schemas.schemas import MessageResponse
from rbac_admin.security.auth import get_current_token_payload
from rbac_admin.security.jwt_utils import create_session_token
from rbac_admin.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Autenticación"])


@router.post("/login", response_model=LoginResponse)
async def login_for_access_token(
    login_in: LoginDto,
    user_service: UserService = Depends(service_provider(UserService)),
):
    user = await user_service.login(login_in.username, login_in.password)
    token = create_session_token(user_identifier=user.id, username=user.username)
    logger.info("Usuario '%s' autenticado correctamente.", user.username)
    return LoginResponse(
        id=user.id,
        username=user.username,
        token=token,
        user=LoggedUserSchema(id=user.id, username=user.username, email=user.email, person_id=user.person_id),
    )


@router.get("/validate", response_model=TokenValidationResponse)
async def validate_token(payload: TokenPayloadSchema = Depends(get_current_token_payload)):
    return TokenValidationResponse(valid=True, sub=payload.sub, username=payload.username)


@router.post("/logout", response_model=MessageResponse)
async def logout(payload: TokenPayloadSchema = Depends(get_current_token_payload)):
    # Sin estado en el servidor: el cliente descarta el token.
    logger.info("Cierre de sesión del usuario '%s'.", payload.username)
    return MessageResponse(message="Sesión cerrada correctamente")
