"""
Configuración compartida de pytest.

Las variables de entorno se fijan antes de importar rbac_admin, porque
rbac_admin.config crea `settings` al importarse.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "clave-secreta-solo-para-pruebas")
os.environ.setdefault("PASSWORD_BCRYPT_ROUNDS", "4")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")
os.environ.setdefault("DEFAULT_EMAIL_DOMAIN", "example.com")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from rbac_admin.crud.factory import RepositoryFactory
from rbac_admin.db.init_db import initialize_database
from rbac_admin.db.session import enable_sqlite_foreign_keys, get_db_session
from rbac_admin.main import app
from rbac_admin.mappers.mapping_service import build_mapping_service
from rbac_admin.models import Person, User, Rol, Form, Module, UserRol, RolForm, FormModule
from rbac_admin.services.factory import ServiceFactory
from rbac_admin.utils.security_utils import get_password_hash


# =============================================================================
# Base de datos
# =============================================================================

@pytest.fixture
async def engine():
    """Motor SQLite en memoria con el esquema creado; uno nuevo por prueba."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)
    await initialize_database(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def mapping_service():
    return build_mapping_service()


@pytest.fixture
def repository_factory(db_session):
    return RepositoryFactory(db_session)


@pytest.fixture
def service_factory(repository_factory, mapping_service):
    return ServiceFactory(repository_factory, mapping_service)


# =============================================================================
# Cliente HTTP
# =============================================================================

@pytest.fixture
async def client(session_factory):
    """Cliente contra la app, con una sesión de la base en memoria por petición."""

    async def _override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _override_get_db_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()


# =============================================================================
# Datos de prueba
# =============================================================================

@pytest.fixture
def seed(db_session):
    """Crea registros directamente en la base, sin pasar por los servicios."""

    class Seeder:
        async def _save(self, entity):
            # Sin refresh: la transacción queda cerrada y la conexión compartida libre
            db_session.add(entity)
            await db_session.commit()
            return entity

        async def person(self, **overrides) -> Person:
            data = {
                "first_name": "Ana",
                "first_last_name": "Perez",
                "type_identification": "CC",
                "number_identification": 1001,
                "email": "ana.perez@acme.org",
            }
            data.update(overrides)
            return await self._save(Person(**data))

        async def user(self, person: Person = None, password: str = "secreto123", **overrides) -> User:
            if person is None:
                person = await self.person()
            data = {
                "username": "ana",
                "email": "ana@acme.org",
                "password": get_password_hash(password),
                "person_id": person.id,
            }
            data.update(overrides)
            return await self._save(User(**data))

        async def rol(self, **overrides) -> Rol:
            data = {"type_rol": "Admin", "description": "Acceso total"}
            data.update(overrides)
            return await self._save(Rol(**data))

        async def form(self, **overrides) -> Form:
            data = {"name": "Inscripción", "route": "/inscripcion"}
            data.update(overrides)
            return await self._save(Form(**data))

        async def module(self, **overrides) -> Module:
            data = {"name": "Académico", "description": "Gestión académica"}
            data.update(overrides)
            return await self._save(Module(**data))

        async def user_rol(self, user: User, rol: Rol) -> UserRol:
            return await self._save(UserRol(user_id=user.id, rol_id=rol.id))

        async def rol_form(self, rol: Rol, form: Form, permission: str = "read") -> RolForm:
            return await self._save(RolForm(rol_id=rol.id, form_id=form.id, permission=permission))

        async def form_module(self, form: Form, module: Module, status_procedure: str = "abierto") -> FormModule:
            return await self._save(
                FormModule(form_id=form.id, module_id=module.id, status_procedure=status_procedure)
            )

    return Seeder()
