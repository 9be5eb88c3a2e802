# rbac_admin/api/endpoints/user_rol_endpoints.py
from rbac_admin.api.endpoints.crud_router import build_crud_router
from rbac_admin.services.user_rol_service import UserRolService

router = build_crud_router(UserRolService, prefix="/api/userrol", tags=["Usuarios - Roles"])
