# rbac_admin/crud/crud_rol_form.py
from typing import List

from sqlalchemy.future import select  # type: ignore

from rbac_admin.crud.base import GenericRepository
from rbac_admin.models.form import Form
from rbac_admin.models.rol_form import RolForm


class RolFormRepository(GenericRepository[RolForm]):
    model = RolForm

    async def get_by_rol_id(self, rol_id: int) -> List[RolForm]:
        return await self._fetch_all(
            select(RolForm).filter(RolForm.rol_id == rol_id).order_by(RolForm.id),
            f"listar por rol {rol_id}",
        )

    async def get_by_form_id(self, form_id: int) -> List[RolForm]:
        return await self._fetch_all(
            select(RolForm).filter(RolForm.form_id == form_id).order_by(RolForm.id),
            f"listar por formulario {form_id}",
        )

    async def get_forms_by_rol_id(self, rol_id: int) -> List[Form]:
        """Formularios asignados al rol (sin repetir si hay varias asignaciones)."""
        stmt = (
            select(Form)
            .join(RolForm, RolForm.form_id == Form.id)
            .filter(RolForm.rol_id == rol_id)
            .distinct()
            .order_by(Form.id)
        )
        return await self._fetch_all(stmt, f"listar formularios del rol {rol_id}")
