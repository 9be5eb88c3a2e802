# rbac_admin/api/endpoints/form_module_endpoints.py
from rbac_admin.api.endpoints.crud_router import build_crud_router
from rbac_admin.services.form_module_service import FormModuleService

router = build_crud_router(FormModuleService, prefix="/api/formmodule", tags=["Formularios - Módulos"])
