# rbac_admin/services/factory.py
from typing import Dict, Iterable, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel

from rbac_admin.crud.factory import RepositoryFactory
from rbac_admin.mappers.mapping_service import MappingService
from rbac_admin.models import Person, User, Rol, Form, Module, UserRol, RolForm, FormModule
from rbac_admin.services.activation_service import ActivationService
from rbac_admin.services.base import GenericService
from rbac_admin.services.form_module_service import FormModuleService
from rbac_admin.services.form_service import FormService
from rbac_admin.services.module_service import ModuleService
from rbac_admin.services.person_service import PersonService
from rbac_admin.services.rol_form_service import RolFormService
from rbac_admin.services.rol_service import RolService
from rbac_admin.services.user_rol_service import UserRolService
from rbac_admin.services.user_service import UserService

S = TypeVar("S", bound=GenericService)

DEFAULT_SERVICES: Dict[Type[BaseModel], Type[GenericService]] = {
    service_cls.dto: service_cls
    for service_cls in (
        PersonService, UserService, RolService, FormService, ModuleService,
        UserRolService, RolFormService, FormModuleService,
    )
}

ACTIVATABLE_MODELS = (Person, User, Rol, Form, Module, UserRol, RolForm, FormModule)


class ServiceFactory:
    """Registro tipado DTO -> servicio, más los servicios de activación por modelo."""

    def __init__(
        self,
        repository_factory: RepositoryFactory,
        mapping_service: MappingService,
        registry: Optional[Mapping[Type[BaseModel], Type[GenericService]]] = None,
        activatable_models: Iterable[type] = ACTIVATABLE_MODELS,
    ):
        self.repository_factory = repository_factory
        self.mapping_service = mapping_service
        self._registry = dict(registry or DEFAULT_SERVICES)
        self._activatable_models = frozenset(activatable_models)
        self._instances: Dict[type, GenericService] = {}

    def create_service(self, dto_type: Type[BaseModel]) -> GenericService:
        service_cls = self._registry.get(dto_type)
        if service_cls is None:
            raise LookupError(f"No hay un servicio registrado para {dto_type.__name__}")
        service = self._instances.get(service_cls)
        if service is None:
            service = service_cls.build(self.repository_factory, self.mapping_service)
            self._instances[service_cls] = service
        return service

    def create_specific_service(self, service_cls: Type[S]) -> S:
        dto_type = getattr(service_cls, "dto", None)
        if dto_type is None or self._registry.get(dto_type) is not service_cls:
            raise LookupError(f"{service_cls.__name__} no está registrado")
        return self.create_service(dto_type)  # type: ignore[return-value]

    def create_activation_service(self, model: type) -> ActivationService:
        if model not in self._activatable_models:
            raise LookupError(f"No hay un servicio de activación para {model.__name__}")
        return ActivationService(self.repository_factory.create_activation_repository(model))
