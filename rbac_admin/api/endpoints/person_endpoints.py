# rbac_admin/api/endpoints/person_endpoints.py
from rbac_admin.api.endpoints.crud_router import build_crud_router
from rbac_admin.services.person_service import PersonService

router = build_crud_router(PersonService, prefix="/api/person", tags=["Personas"])
