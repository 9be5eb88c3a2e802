# rbac_admin/api/endpoints/user_endpoints.py
from typing import List

from fastapi import Depends, Response, status  # type: ignore

from rbac_admin.api.dependencies import service_provider
from rbac_admin.api.endpoints.crud_router import build_crud_router
from rbac_admin.core.exceptions import AuthenticationException, ValidationException
from rbac_admin.schemas.auth import LoginDto
from rbac_admin.schemas.schemas import UpdatePasswordDto, UserDto, UserRolDto
from rbac_admin.services.user_rol_service import UserRolService
from rbac_admin.services.user_service import UserService
from rbac_admin.services.validators import is_blank

router = build_crud_router(UserService, prefix="/api/user", tags=["Usuarios"])


@router.get("/{user_id}/roles", response_model=List[UserRolDto])
async def get_user_roles(
    user_id: int,
    user_service: UserService = Depends(service_provider(UserService)),
    user_rol_service: UserRolService = Depends(service_provider(UserRolService)),
):
    await user_service.get_by_id(user_id)
    return await user_rol_service.get_roles_by_user_id(user_id)


@router.patch("/{user_id}/password", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def update_user_password(
    user_id: int,
    password_in: UpdatePasswordDto,
    user_service: UserService = Depends(service_provider(UserService)),
):
    await user_service.update_password(user_id, password_in.new_password)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/authenticate", response_model=UserDto)
async def authenticate_user(
    credentials: LoginDto,
    user_service: UserService = Depends(service_provider(UserService)),
):
    """Valida las credenciales y devuelve el usuario, sin emitir token."""
    if is_blank(credentials.username) or is_blank(credentials.password):
        raise ValidationException("Nombre de usuario y contraseña son requeridos")
    user = await user_service.authenticate(credentials.username, credentials.password)
    if user is None:
        raise AuthenticationException("Nombre de usuario o contraseña incorrectos")
    return user
