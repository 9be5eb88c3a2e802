# rbac_admin/crud/crud_form_module.py
from typing import List

from sqlalchemy.future import select  # type: ignore

from rbac_admin.crud.base import GenericRepository
from rbac_admin.models.form_module import FormModule


class FormModuleRepository(GenericRepository[FormModule]):
    model = FormModule

    async def get_by_module_id(self, module_id: int) -> List[FormModule]:
        return await self._fetch_all(
            select(FormModule).filter(FormModule.module_id == module_id).order_by(FormModule.id),
            f"listar por módulo {module_id}",
        )

    async def get_by_form_id(self, form_id: int) -> List[FormModule]:
        return await self._fetch_all(
            select(FormModule).filter(FormModule.form_id == form_id).order_by(FormModule.id),
            f"listar por formulario {form_id}",
        )
