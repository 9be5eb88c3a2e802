# rbac_admin/api/endpoints/rol_endpoints.py
from typing import List

from fastapi import Depends  # type: ignore

from rbac_admin.api.dependencies import service_provider
from rbac_admin.api.endpoints.crud_router import build_crud_router
from rbac_admin.schemas.schemas import FormDto, UserRolDto
from rbac_admin.services.rol_service import RolService
from rbac_admin.services.user_rol_service import UserRolService

router = build_crud_router(RolService, prefix="/api/rol", tags=["Roles"])


@router.get("/{rol_id}/forms", response_model=List[FormDto])
async def get_rol_forms(rol_id: int, rol_service: RolService = Depends(service_provider(RolService))):
    return await rol_service.get_forms_by_rol_id(rol_id)


@router.get("/{rol_id}/users", response_model=List[UserRolDto])
async def get_rol_users(
    rol_id: int,
    rol_service: RolService = Depends(service_provider(RolService)),
    user_rol_service: UserRolService = Depends(service_provider(UserRolService)),
):
    await rol_service.get_by_id(rol_id)
    return await user_rol_service.get_users_by_rol_id(rol_id)
