# rbac_admin/api/endpoints/form_endpoints.py
from typing import List

from fastapi import Depends  # type: ignore

from rbac_admin.api.dependencies import service_provider
from rbac_admin.api.endpoints.crud_router import build_crud_router
from rbac_admin.schemas.schemas import FormModuleDto
from rbac_admin.services.form_module_service import FormModuleService
from rbac_admin.services.form_service import FormService

router = build_crud_router(FormService, prefix="/api/form", tags=["Formularios"])


@router.get("/{form_id}/modules", response_model=List[FormModuleDto])
async def get_form_modules(
    form_id: int,
    form_service: FormService = Depends(service_provider(FormService)),
    form_module_service: FormModuleService = Depends(service_provider(FormModuleService)),
):
    """Módulos en los que está publicado el formulario. 404 si el formulario no existe."""
    await form_service.get_by_id(form_id)
    return await form_module_service.get_modules_by_form_id(form_id)
