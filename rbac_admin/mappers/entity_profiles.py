# rbac_admin/mappers/entity_profiles.py
from typing import List, Optional, Union

from rbac_admin.config import settings
from rbac_admin.mappers.profiles import DtoToEntityProfile, EntityToDtoProfile
from rbac_admin.models import Person, User, Rol, Form, Module, UserRol, RolForm, FormModule
from rbac_admin.schemas.schemas import (
    PersonDto, UserDto, RolDto, FormDto, ModuleDto, UserRolDto, RolFormDto, FormModuleDto
)

Profile = Union[EntityToDtoProfile, DtoToEntityProfile]


def _join_names(*parts: Optional[str]) -> str:
    return " ".join(part.strip() for part in parts if part and part.strip())


def person_display_name(person: Person) -> str:
    return f"{person.first_name} {person.first_last_name}"


def person_email_or_default(dto: PersonDto) -> Optional[str]:
    if dto.email:
        return dto.email
    if not dto.first_name or not dto.first_last_name:
        return dto.email
    local_part = f"{dto.first_name}.{dto.first_last_name}".lower().replace(" ", "")
    return f"{local_part}@{settings.DEFAULT_EMAIL_DOMAIN}"


def person_name_or_default(dto: PersonDto) -> Optional[str]:
    if dto.name:
        return dto.name
    return _join_names(dto.first_name, dto.second_name, dto.first_last_name, dto.second_last_name) or None


def default_profiles() -> List[Profile]:
    return [
        # --- Person ---
        EntityToDtoProfile(Person, PersonDto, computed={"name": person_display_name}),
        DtoToEntityProfile(
            PersonDto,
            Person,
            computed={"email": person_email_or_default, "name": person_name_or_default},
        ),
        # --- User: la contraseña la hashea UserService y el estado va por activar/desactivar ---
        EntityToDtoProfile(User, UserDto, ignore=("password",)),
        DtoToEntityProfile(UserDto, User, ignore=("password", "active")),
        # --- Rol, Form, Module ---
        EntityToDtoProfile(Rol, RolDto),
        DtoToEntityProfile(RolDto, Rol),
        EntityToDtoProfile(Form, FormDto),
        DtoToEntityProfile(FormDto, Form),
        EntityToDtoProfile(Module, ModuleDto),
        DtoToEntityProfile(ModuleDto, Module),
        # --- Tablas de unión ---
        EntityToDtoProfile(UserRol, UserRolDto),
        DtoToEntityProfile(UserRolDto, UserRol),
        EntityToDtoProfile(RolForm, RolFormDto),
        DtoToEntityProfile(RolFormDto, RolForm),
        EntityToDtoProfile(FormModule, FormModuleDto),
        DtoToEntityProfile(FormModuleDto, FormModule),
    ]
