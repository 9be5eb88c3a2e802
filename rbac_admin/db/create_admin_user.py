# rbac_admin/db/create_admin_user.py
"""
Crea el primer usuario administrador (persona + usuario + rol + asignación)
para poder iniciar sesión en una base recién creada.

    python -m rbac_admin.db.create_admin_user --username admin --password 'claveSegura123' \
        --email admin@miempresa.com --first-name Admin --last-name Sistema --identification 1
"""
import argparse
import asyncio
import logging
from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import async_sessionmaker

from rbac_admin.core.exceptions import RbacAdminError, ValidationException
from rbac_admin.crud.crud_user import UserRepository
from rbac_admin.crud.factory import RepositoryFactory
from rbac_admin.db.init_db import initialize_database
from rbac_admin.db.session import AsyncSessionLocal, async_engine
from rbac_admin.mappers.mapping_service import build_mapping_service
from rbac_admin.schemas.schemas import PersonDto, RolDto, UserDto, UserRolDto
from rbac_admin.services.base import GenericService
from rbac_admin.services.factory import ServiceFactory

logger = logging.getLogger(__name__)

DEFAULT_ROL = "Admin"


async def _undo(created: List[Tuple[GenericService, int]]) -> None:
    """Elimina, en orden inverso, los registros creados antes del fallo."""
    for service, entity_id in reversed(created):
        try:
            await service.delete(entity_id)
        except RbacAdminError as e:
            logger.error("No se pudo deshacer %s con ID %s: %s", service.entity_name, entity_id, e.message)


async def create_admin_user(
    session_factory: async_sessionmaker,
    username: str,
    password: str,
    email: str,
    first_name: str,
    first_last_name: str,
    number_identification: int,
    type_identification: str = "CC",
    rol_name: str = DEFAULT_ROL,
) -> UserDto:
    """
    Crea el usuario y le asigna el rol (reutilizando el rol si ya existe).

    Si el username ya está en uso no se crea nada. Si falla un paso posterior,
    se eliminan los registros que este mismo llamado alcanzó a crear.
    """
    async with session_factory() as session:
        repositories = RepositoryFactory(session)
        services = ServiceFactory(repositories, build_mapping_service())

        if await repositories.create_specific_repository(UserRepository).get_by_username(username):
            raise ValidationException("username", f"El usuario '{username}' ya existe")

        created: List[Tuple[GenericService, int]] = []
        try:
            person_service = services.create_service(PersonDto)
            person = await person_service.create(
                PersonDto(
                    first_name=first_name,
                    first_last_name=first_last_name,
                    email=email,
                    type_identification=type_identification,
                    number_identification=number_identification,
                )
            )
            created.append((person_service, person.id))

            user_service = services.create_service(UserDto)
            user = await user_service.create(
                UserDto(username=username, email=email, password=password, person_id=person.id)
            )
            created.append((user_service, user.id))

            rol_service = services.create_service(RolDto)
            rol = next((r for r in await rol_service.get_all() if r.type_rol == rol_name), None)
            if rol is None:
                rol = await rol_service.create(RolDto(type_rol=rol_name, description="Administrador del sistema"))
                created.append((rol_service, rol.id))

            await services.create_service(UserRolDto).create(UserRolDto(user_id=user.id, rol_id=rol.id))
        except Exception:
            logger.error("Falló la creación del usuario '%s'; deshaciendo %s registro(s).", username, len(created))
            await _undo(created)
            raise

        logger.info("Usuario '%s' creado con el rol '%s'.", username, rol_name)
        return user


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Crea el usuario administrador inicial.")
    parser.add_argument("--username", required=True)
    parser.add_argument("--password", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--first-name", required=True)
    parser.add_argument("--last-name", required=True)
    parser.add_argument("--identification", type=int, required=True, help="Número de identificación")
    parser.add_argument("--identification-type", default="CC")
    parser.add_argument("--rol", default=DEFAULT_ROL)
    return parser.parse_args(argv)


async def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    await initialize_database(async_engine)
    try:
        user = await create_admin_user(
            AsyncSessionLocal,
            username=args.username,
            password=args.password,
            email=args.email,
            first_name=args.first_name,
            first_last_name=args.last_name,
            number_identification=args.identification,
            type_identification=args.identification_type,
            rol_name=args.rol,
        )
        logger.info("Ahora puedes iniciar sesión como '%s' (ID %s).", user.username, user.id)
    finally:
        await async_engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
