# rbac_admin/api/dependencies.py
from functools import lru_cache
from typing import Callable, Type

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from rbac_admin.crud.factory import RepositoryFactory
from rbac_admin.db.session import get_db_session
from rbac_admin.mappers.mapping_service import MappingService, build_mapping_service
from rbac_admin.services.activation_service import ActivationService
from rbac_admin.services.base import GenericService
from rbac_admin.services.factory import ServiceFactory


def get_mapping_service() -> MappingService:
    return build_mapping_service()


def get_repository_factory(db: AsyncSession = Depends(get_db_session)) -> RepositoryFactory:
    """Una fábrica de repositorios por petición, atada a la sesión de esa petición."""
    return RepositoryFactory(db)


def get_service_factory(
    repository_factory: RepositoryFactory = Depends(get_repository_factory),
    mapping_service: MappingService = Depends(get_mapping_service),
) -> ServiceFactory:
    return ServiceFactory(repository_factory, mapping_service)


# ==========================================================
# ======>   PROVEEDORES DE SERVICIOS PARA Depends()    <======
# ==========================================================
# Cacheados para que el mismo servicio sea siempre la misma dependencia
# y FastAPI lo resuelva una sola vez por petición.

@lru_cache(maxsize=None)
def service_provider(service_cls: Type[GenericService]) -> Callable[..., GenericService]:
    def _get_service(factory: ServiceFactory = Depends(get_service_factory)) -> GenericService:
        return factory.create_specific_service(service_cls)

    _get_service.__name__ = f"get_{service_cls.__name__}"
    return _get_service


@lru_cache(maxsize=None)
def activation_service_provider(model: type) -> Callable[..., ActivationService]:
    def _get_activation_service(factory: ServiceFactory = Depends(get_service_factory)) -> ActivationService:
        return factory.create_activation_service(model)

    _get_activation_service.__name__ = f"get_{model.__name__}_activation_service"
    return _get_activation_service
