"""
Pruebas de la capa de negocio.

Las clases *Contract usan un repositorio simulado (unittest.mock) para
comprobar qué llamadas llegan o no a la capa de datos; el resto corre
contra SQLite en memoria.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from rbac_admin.core.exceptions import (
    AuthenticationException, EntityNotFoundException, ExternalServiceException, ValidationException,
)
from rbac_admin.crud.base import GenericRepository
from rbac_admin.models import Rol
from rbac_admin.schemas.schemas import (
    FormModuleDto, PersonDto, RolDto, RolFormDto, UserDto, UserRolDto,
)
from rbac_admin.services import (
    FormModuleService, PersonService, RolFormService, RolService, UserRolService, UserService,
)
from rbac_admin.utils.security_utils import verify_password


@pytest.fixture
def repository():
    return AsyncMock(spec=GenericRepository)


@pytest.fixture
def rol_service(repository, mapping_service):
    return RolService(repository, mapping_service, rol_form_repository=MagicMock())


# =============================================================================
# Contrato del servicio genérico (repositorio simulado)
# =============================================================================

class TestGenericServiceContract:

    @pytest.mark.parametrize("bad_id", [0, -1])
    @pytest.mark.parametrize(
        "operation, args",
        [
            ("get_by_id", ()),
            ("update", (RolDto(type_rol="Admin"),)),
            ("patch", (RolDto(description="x"),)),
            ("delete", ()),
            ("soft_delete", ()),
            ("activate", ()),
        ],
    )
    async def test_non_positive_id_fails_before_repository_access(
        self, rol_service, repository, operation, args, bad_id
    ):
        with pytest.raises(ValidationException):
            await getattr(rol_service, operation)(bad_id, *args)

        assert repository.mock_calls == []

    async def test_get_by_id_missing_raises_not_found(self, rol_service, repository):
        repository.get_by_id.return_value = None

        with pytest.raises(EntityNotFoundException) as exc_info:
            await rol_service.get_by_id(8)

        assert exc_info.value.entity_id == 8

    async def test_soft_delete_already_inactive_is_a_no_op(self, rol_service, repository):
        repository.get_by_id.return_value = Rol(id=4, type_rol="Admin", active=False)

        await rol_service.soft_delete(4)

        repository.soft_delete.assert_not_awaited()

    async def test_activate_already_active_is_a_no_op(self, rol_service, repository):
        repository.get_by_id.return_value = Rol(id=4, type_rol="Admin", active=True)

        await rol_service.activate(4)

        repository.activate.assert_not_awaited()

    async def test_activate_inactive_delegates_to_repository(self, rol_service, repository):
        repository.get_by_id.return_value = Rol(id=4, type_rol="Admin", active=False)
        repository.activate.return_value = True

        await rol_service.activate(4)

        repository.activate.assert_awaited_once_with(4)

    async def test_empty_patch_does_not_write(self, rol_service, repository):
        repository.get_by_id.return_value = Rol(id=4, type_rol="Admin", description="Acceso total", active=True)

        result = await rol_service.patch(4, RolDto())

        repository.update.assert_not_awaited()
        assert result.type_rol == "Admin"
        assert result.description == "Acceso total"
        assert result.update_date is None

    async def test_update_unknown_id_raises_not_found(self, rol_service, repository):
        repository.get_by_id.return_value = None

        with pytest.raises(EntityNotFoundException):
            await rol_service.update(3, RolDto(type_rol="Admin"))

        repository.update.assert_not_awaited()

    async def test_storage_failure_is_wrapped(self, rol_service, repository):
        failure = OperationalError("SELECT", {}, Exception("base caída"))
        repository.get_all.side_effect = failure

        with pytest.raises(ExternalServiceException) as exc_info:
            await rol_service.get_all()

        assert exc_info.value.cause is failure
        assert exc_info.value.service == "Base de datos"

    async def test_delete_reported_failure_raises_external_error(self, rol_service, repository):
        repository.get_by_id.return_value = Rol(id=4, type_rol="Admin", active=True)
        repository.delete.return_value = False

        with pytest.raises(ExternalServiceException):
            await rol_service.delete(4)


# =============================================================================
# Rol (escenario completo contra la base)
# =============================================================================

class TestRolService:

    async def test_create_patch_soft_delete_scenario(self, service_factory):
        service = service_factory.create_service(RolDto)

        created = await service.create(RolDto(type_rol="Admin", description="Full access"))
        assert created.id > 0
        assert created.active is True
        assert created.create_date is not None

        patched = await service.patch(created.id, RolDto(description="Updated"))
        assert patched.type_rol == "Admin"
        assert patched.description == "Updated"
        assert patched.update_date is not None

        await service.soft_delete(created.id)
        deleted = await service.get_by_id(created.id)
        assert deleted.active is False
        assert deleted.delete_date is not None

        # Segunda vez: sin error
        await service.soft_delete(created.id)

        await service.activate(created.id)
        assert (await service.get_by_id(created.id)).active is True

    async def test_create_ignores_client_id(self, service_factory):
        service = service_factory.create_service(RolDto)

        created = await service.create(RolDto(id=500, type_rol="Admin"))

        assert created.id != 500

    async def test_create_requires_type_rol(self, service_factory):
        with pytest.raises(ValidationException) as exc_info:
            await service_factory.create_service(RolDto).create(RolDto(description="Sin tipo"))

        assert exc_info.value.field == "typeRol"

    async def test_update_replaces_fields(self, service_factory, seed):
        rol = await seed.rol(type_rol="Admin", description="Acceso total")
        service = service_factory.create_service(RolDto)

        updated = await service.update(rol.id, RolDto(type_rol="Supervisor"))

        assert updated.type_rol == "Supervisor"
        assert updated.description is None
        assert updated.update_date is not None

    async def test_update_without_active_keeps_soft_deleted_state(self, service_factory, seed):
        rol = await seed.rol()
        service = service_factory.create_service(RolDto)
        await service.soft_delete(rol.id)

        updated = await service.update(rol.id, RolDto(type_rol="Admin", description="e"))

        assert updated.active is False
        assert updated.delete_date is not None

    async def test_update_toggling_active_keeps_delete_date_consistent(self, service_factory, seed):
        rol = await seed.rol()
        service = service_factory.create_service(RolDto)

        deactivated = await service.update(rol.id, RolDto(type_rol="Admin", active=False))
        assert deactivated.active is False
        assert deactivated.delete_date is not None

        reactivated = await service.update(rol.id, RolDto(type_rol="Admin", active=True))
        assert reactivated.active is True
        assert reactivated.delete_date is None

    async def test_get_forms_by_rol_id(self, service_factory, seed):
        rol = await seed.rol()
        form = await seed.form(name="Notas")
        await seed.rol_form(rol, form)
        service = service_factory.create_specific_service(RolService)

        forms = await service.get_forms_by_rol_id(rol.id)

        assert [dto.name for dto in forms] == ["Notas"]

    async def test_get_forms_by_missing_rol_raises_not_found(self, service_factory):
        with pytest.raises(EntityNotFoundException):
            await service_factory.create_specific_service(RolService).get_forms_by_rol_id(42)

    async def test_physical_delete_with_dependents_is_external_error(self, service_factory, seed):
        rol = await seed.rol()
        await seed.rol_form(rol, await seed.form())
        rol_id = rol.id

        with pytest.raises(ExternalServiceException) as exc_info:
            await service_factory.create_service(RolDto).delete(rol_id)

        assert isinstance(exc_info.value.cause, IntegrityError)


# =============================================================================
# Person
# =============================================================================

def _person_dto(**overrides) -> PersonDto:
    data = {
        "name": "Ana Perez",
        "first_name": "Ana",
        "second_name": "María",
        "first_last_name": "Perez",
        "second_last_name": "Gil",
        "phone_number": "3001234567",
        "email": "ana.perez@acme.org",
        "type_identification": "CC",
        "number_identification": 1001,
        "signing": "A. Perez",
    }
    data.update(overrides)
    return PersonDto(**data)


class TestPersonService:

    async def test_create_then_get_round_trip(self, service_factory):
        service = service_factory.create_service(PersonDto)
        assert isinstance(service, PersonService)
        dto = _person_dto()

        created = await service.create(dto)
        fetched = await service.get_by_id(created.id)

        audit = {"id", "create_date", "update_date", "delete_date"}
        assert fetched.model_dump(exclude=audit) == dto.model_dump(exclude=audit)

    async def test_invalid_email_is_rejected_on_email_field(self, service_factory):
        service = service_factory.create_service(PersonDto)

        with pytest.raises(ValidationException) as exc_info:
            await service.create(PersonDto(email="not-an-email"))
        assert exc_info.value.field == "email"

    async def test_invalid_email_is_rejected_on_update(self, service_factory, seed):
        person = await seed.person()

        with pytest.raises(ValidationException) as exc_info:
            await service_factory.create_service(PersonDto).update(person.id, _person_dto(email="sin-arroba"))
        assert exc_info.value.field == "email"

    async def test_number_identification_must_be_positive(self, service_factory):
        with pytest.raises(ValidationException) as exc_info:
            await service_factory.create_service(PersonDto).create(_person_dto(number_identification=0))
        assert exc_info.value.field == "numberIdentification"

    async def test_email_is_synthesized_when_missing(self, service_factory):
        created = await service_factory.create_service(PersonDto).create(_person_dto(email=None))

        assert created.email == "ana.perez@example.com"

    async def test_patch_can_clear_optional_fields_but_not_required_ones(self, service_factory, seed):
        person = await seed.person(second_name="María", phone_number="300")
        service = service_factory.create_service(PersonDto)

        patched = await service.patch(person.id, PersonDto(second_name="", first_name="", phone_number=None))

        assert patched.second_name == ""
        assert patched.first_name == "Ana"
        assert patched.phone_number == "300"

    async def test_patch_with_invalid_email_leaves_entity_untouched(self, service_factory, seed):
        person = await seed.person()
        service = service_factory.create_service(PersonDto)

        with pytest.raises(ValidationException):
            await service.patch(person.id, PersonDto(first_name="Otra", email="mal"))

        assert (await service.get_by_id(person.id)).first_name == "Ana"


# =============================================================================
# User
# =============================================================================

class TestUserService:

    async def test_create_hashes_password(self, service_factory, seed):
        person = await seed.person()
        service = service_factory.create_service(UserDto)

        created = await service.create(
            UserDto(username="ana", email="ana@acme.org", password="secreto123", person_id=person.id)
        )

        stored = await service.repository.get_by_id(created.id)
        assert stored.password != "secreto123"
        assert verify_password("secreto123", stored.password)
        assert "password" not in created.model_dump(by_alias=True)

    async def test_create_requires_password(self, service_factory, seed):
        person = await seed.person()

        with pytest.raises(ValidationException) as exc_info:
            await service_factory.create_service(UserDto).create(
                UserDto(username="ana", email="ana@acme.org", person_id=person.id)
            )
        assert exc_info.value.field == "password"

    async def test_create_requires_valid_email(self, service_factory, seed):
        person = await seed.person()

        with pytest.raises(ValidationException) as exc_info:
            await service_factory.create_service(UserDto).create(
                UserDto(username="ana", email="ana", password="x", person_id=person.id)
            )
        assert exc_info.value.field == "email"

    async def test_password_only_patch_leaves_other_fields(self, service_factory, seed):
        user = await seed.user(username="ana", email="ana@acme.org", password="vieja")
        service = service_factory.create_service(UserDto)

        patched = await service.patch(user.id, UserDto(password="nueva123"))

        assert patched.username == "ana"
        assert patched.email == "ana@acme.org"
        assert patched.person_id == user.person_id
        stored = await service.repository.get_by_id(user.id)
        assert verify_password("nueva123", stored.password)
        assert not verify_password("vieja", stored.password)

    async def test_password_only_patch_with_same_password_writes_nothing(self, service_factory, seed):
        user = await seed.user(password="secreto123")
        stored_hash = user.password
        service = service_factory.create_service(UserDto)

        patched = await service.patch(user.id, UserDto(password="secreto123"))

        assert patched.update_date is None
        stored = await service.repository.get_by_id(user.id)
        assert stored.password == stored_hash

    async def test_update_keeps_password_when_not_sent(self, service_factory, seed):
        user = await seed.user(password="secreto123")
        service = service_factory.create_service(UserDto)

        await service.update(user.id, UserDto(username="ana2", email="ana2@acme.org", person_id=user.person_id))

        stored = await service.repository.get_by_id(user.id)
        assert stored.username == "ana2"
        assert verify_password("secreto123", stored.password)

    async def test_authenticate(self, service_factory, seed):
        await seed.user(username="ana", password="secreto123")
        service = service_factory.create_specific_service(UserService)

        assert (await service.authenticate("ana", "secreto123")).username == "ana"
        assert await service.authenticate("ana", "otra") is None
        assert await service.authenticate("nadie", "secreto123") is None

    async def test_login_rejects_inactive_user(self, service_factory, seed):
        user = await seed.user(username="ana", password="secreto123")
        service = service_factory.create_specific_service(UserService)
        await service.soft_delete(user.id)

        with pytest.raises(AuthenticationException):
            await service.login("ana", "secreto123")

    async def test_login_requires_both_fields(self, service_factory):
        with pytest.raises(ValidationException):
            await service_factory.create_specific_service(UserService).login("ana", None)

    async def test_update_password(self, service_factory, seed):
        user = await seed.user(password="vieja")
        service = service_factory.create_specific_service(UserService)

        await service.update_password(user.id, "nueva123")

        assert (await service.authenticate("ana", "nueva123")) is not None

    async def test_update_password_requires_value(self, service_factory, seed):
        user = await seed.user()

        with pytest.raises(ValidationException):
            await service_factory.create_specific_service(UserService).update_password(user.id, " ")


# =============================================================================
# Tablas de unión
# =============================================================================

class TestJoinServices:

    async def test_rol_form_patch_only_changes_permission(self, service_factory, seed):
        rol, other_rol = await seed.rol(), await seed.rol(type_rol="Otro")
        form = await seed.form()
        rol_form = await seed.rol_form(rol, form, permission="read")
        service = service_factory.create_service(RolFormDto)

        patched = await service.patch(rol_form.id, RolFormDto(rol_id=other_rol.id, permission="write"))

        assert patched.permission == "write"
        assert patched.rol_id == rol.id

    async def test_rol_form_queries(self, service_factory, seed):
        rol = await seed.rol()
        form = await seed.form()
        await seed.rol_form(rol, form)
        service = service_factory.create_specific_service(RolFormService)

        assert len(await service.get_by_rol_id(rol.id)) == 1
        assert len(await service.get_by_form_id(form.id)) == 1
        with pytest.raises(ValidationException):
            await service.get_by_rol_id(0)

    async def test_rol_form_soft_delete_is_real(self, service_factory, seed):
        rol_form = await seed.rol_form(await seed.rol(), await seed.form())
        service = service_factory.create_service(RolFormDto)

        await service.soft_delete(rol_form.id)

        assert (await service.get_by_id(rol_form.id)).active is False

    async def test_user_rol_create_requires_positive_ids(self, service_factory):
        with pytest.raises(ValidationException) as exc_info:
            await service_factory.create_service(UserRolDto).create(UserRolDto(user_id=1))
        assert exc_info.value.field == "rolId"

    async def test_user_rol_patch_and_queries(self, service_factory, seed):
        user = await seed.user()
        admin, reader = await seed.rol(), await seed.rol(type_rol="Lector")
        assignment = await seed.user_rol(user, admin)
        service = service_factory.create_specific_service(UserRolService)

        patched = await service.patch(assignment.id, UserRolDto(rol_id=reader.id))

        assert patched.rol_id == reader.id
        assert patched.user_id == user.id
        assert [dto.rol_id for dto in await service.get_roles_by_user_id(user.id)] == [reader.id]
        assert await service.get_users_by_rol_id(admin.id) == []

    async def test_form_module_patch_only_changes_status(self, service_factory, seed):
        form, module = await seed.form(), await seed.module()
        form_module = await seed.form_module(form, module, status_procedure="abierto")
        service = service_factory.create_specific_service(FormModuleService)

        patched = await service.patch(form_module.id, FormModuleDto(module_id=999, status_procedure="cerrado"))

        assert patched.status_procedure == "cerrado"
        assert patched.module_id == module.id
        assert len(await service.get_forms_by_module_id(module.id)) == 1
        assert len(await service.get_modules_by_form_id(form.id)) == 1
