# rbac_admin/api/endpoints/rol_form_endpoints.py
from typing import List

from fastapi import Depends  # type: ignore

from rbac_admin.api.dependencies import service_provider
from rbac_admin.api.endpoints.crud_router import build_crud_router
from rbac_admin.schemas.schemas import RolFormDto
from rbac_admin.services.rol_form_service import RolFormService

router = build_crud_router(RolFormService, prefix="/api/rolform", tags=["Roles - Formularios"])


@router.get("/byRol/{rol_id}", response_model=List[RolFormDto])
async def get_permissions_by_rol(
    rol_id: int, service: RolFormService = Depends(service_provider(RolFormService))
):
    return await service.get_by_rol_id(rol_id)


@router.get("/byForm/{form_id}", response_model=List[RolFormDto])
async def get_permissions_by_form(
    form_id: int, service: RolFormService = Depends(service_provider(RolFormService))
):
    return await service.get_by_form_id(form_id)
