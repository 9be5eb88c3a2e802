# rbac_admin/mappers/mapping_service.py
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type, TypeVar

from rbac_admin.mappers.entity_profiles import Profile, default_profiles
from rbac_admin.mappers.profiles import DtoToEntityProfile

logger = logging.getLogger(__name__)

D = TypeVar("D")


class MappingConfigurationError(LookupError):
    """No hay un perfil registrado para el par origen/destino pedido."""


class MappingService:
    def __init__(self, profiles: Iterable[Profile]):
        self._profiles: Dict[Tuple[type, type], Profile] = {}
        for profile in profiles:
            self._profiles[(profile.source, profile.destination)] = profile

    def _get_profile(self, source_type: type, destination_type: type) -> Profile:
        profile = self._profiles.get((source_type, destination_type))
        if profile is None:
            raise MappingConfigurationError(
                f"No existe un mapeo de {source_type.__name__} a {destination_type.__name__}"
            )
        return profile

    def map(self, source: Any, destination_type: Type[D]) -> D:
        return self._get_profile(type(source), destination_type).map(source)

    def map_to_dto(self, entity: Any, dto_type: Type[D]) -> D:
        return self.map(entity, dto_type)

    def map_to_entity(self, dto: Any, entity_type: Type[D]) -> D:
        return self.map(dto, entity_type)

    def update_entity_from_dto(self, dto: Any, entity: D) -> D:
        """Sobrescribe en el sitio todos los campos mapeados de la entidad."""
        profile = self._get_profile(type(dto), type(entity))
        if not isinstance(profile, DtoToEntityProfile):
            raise MappingConfigurationError(
                f"El mapeo de {type(dto).__name__} a {type(entity).__name__} no es DTO -> entidad"
            )
        return profile.apply(dto, entity)

    def map_collection_to_dto(self, entities: Iterable[Any], dto_type: Type[D]) -> List[D]:
        return [self.map_to_dto(entity, dto_type) for entity in entities]


_mapping_service: Optional[MappingService] = None


def build_mapping_service() -> MappingService:
    """Devuelve el servicio de mapeo con todos los perfiles registrados (uno por proceso)."""
    global _mapping_service
    if _mapping_service is None:
        _mapping_service = MappingService(default_profiles())
        logger.debug("Servicio de mapeo construido con %d perfiles.", len(_mapping_service._profiles))
    return _mapping_service
