# rbac_admin/crud/factory.py
from typing import Dict, Mapping, Optional, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession  # type: ignore

from rbac_admin.crud.activation import ActivationRepository
from rbac_admin.crud.base import GenericRepository
from rbac_admin.crud.crud_form_module import FormModuleRepository
from rbac_admin.crud.crud_rol_form import RolFormRepository
from rbac_admin.crud.crud_user import UserRepository
from rbac_admin.crud.crud_user_rol import UserRolRepository
from rbac_admin.models import Person, Rol, Form, Module, Activatable

R = TypeVar("R", bound=GenericRepository)

# Modelo -> clase de repositorio. Los modelos sin repositorio propio usan el genérico.
DEFAULT_REPOSITORIES: Dict[type, Type[GenericRepository]] = {
    Person: GenericRepository,
    UserRepository.model: UserRepository,
    Rol: GenericRepository,
    Form: GenericRepository,
    Module: GenericRepository,
    UserRolRepository.model: UserRolRepository,
    RolFormRepository.model: RolFormRepository,
    FormModuleRepository.model: FormModuleRepository,
}


class RepositoryFactory:
    """Registro tipado de repositorios para una sesión (una fábrica por petición)."""

    def __init__(self, db: AsyncSession, registry: Optional[Mapping[type, Type[GenericRepository]]] = None):
        self.db = db
        self._registry: Dict[type, Type[GenericRepository]] = dict(registry or DEFAULT_REPOSITORIES)
        self._instances: Dict[type, GenericRepository] = {}
        self._activation_instances: Dict[type, ActivationRepository] = {}

    def create_repository(self, model: type) -> GenericRepository:
        repository = self._instances.get(model)
        if repository is None:
            repository_cls = self._registry.get(model)
            if repository_cls is None:
                raise LookupError(f"No hay un repositorio registrado para {model.__name__}")
            repository = repository_cls(self.db, model)
            self._instances[model] = repository
        return repository

    def create_specific_repository(self, repository_cls: Type[R]) -> R:
        model = getattr(repository_cls, "model", None)
        if model is None or self._registry.get(model) is not repository_cls:
            raise LookupError(f"{repository_cls.__name__} no está registrado")
        return self.create_repository(model)  # type: ignore[return-value]

    def create_activation_repository(self, model: type) -> ActivationRepository:
        if model not in self._registry or not issubclass(model, Activatable):
            raise LookupError(f"No hay un repositorio de activación para {model.__name__}")
        repository = self._activation_instances.get(model)
        if repository is None:
            repository = ActivationRepository(self.db, model)
            self._activation_instances[model] = repository
        return repository
