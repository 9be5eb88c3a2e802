# rbac_admin/api/endpoints/module_endpoints.py
from typing import List

from fastapi import Depends  # type: ignore

from rbac_admin.api.dependencies import service_provider
from rbac_admin.api.endpoints.crud_router import build_crud_router
from rbac_admin.schemas.schemas import FormModuleDto
from rbac_admin.services.form_module_service import FormModuleService
from rbac_admin.services.module_service import ModuleService

router = build_crud_router(ModuleService, prefix="/api/module", tags=["Módulos"])


@router.get("/{module_id}/forms", response_model=List[FormModuleDto])
async def get_module_forms(
    module_id: int,
    module_service: ModuleService = Depends(service_provider(ModuleService)),
    form_module_service: FormModuleService = Depends(service_provider(FormModuleService)),
):
    # Primero verificamos que el módulo existe
    await module_service.get_by_id(module_id)
    return await form_module_service.get_forms_by_module_id(module_id)
