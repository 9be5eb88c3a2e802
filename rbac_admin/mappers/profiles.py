# rbac_admin/mappers/profiles.py
"""
Perfiles de mapeo entidad <-> DTO.

Cada perfil declara una sola dirección de un par. La correspondencia de campos
es por nombre; los campos calculados reciben el objeto origen completo.
"""
from typing import Any, Callable, Dict, FrozenSet, Iterable, Optional, Type

from pydantic import BaseModel
from sqlalchemy import inspect as sa_inspect

from rbac_admin.models.mixins import AUDIT_FIELDS

ComputedFields = Dict[str, Callable[[Any], Any]]


def column_names(entity_cls: type) -> FrozenSet[str]:
    """Columnas mapeadas del modelo (sin relaciones de navegación)."""
    return frozenset(attr.key for attr in sa_inspect(entity_cls).column_attrs)


def primary_key_names(entity_cls: type) -> FrozenSet[str]:
    mapper = sa_inspect(entity_cls)
    return frozenset(mapper.get_property_by_column(column).key for column in mapper.primary_key)


class EntityToDtoProfile:
    """Entidad -> DTO: copia las columnas que el DTO declara y añade los campos calculados."""

    def __init__(
        self,
        entity: type,
        dto: Type[BaseModel],
        computed: Optional[ComputedFields] = None,
        ignore: Iterable[str] = (),
    ):
        self.source = entity
        self.destination = dto
        self.computed = dict(computed or {})
        self.ignore = frozenset(ignore)
        self._fields = sorted(
            (set(dto.model_fields) & column_names(entity)) - self.ignore - set(self.computed)
        )

    def map(self, entity: Any) -> BaseModel:
        data = {name: getattr(entity, name) for name in self._fields}
        for name, resolver in self.computed.items():
            data[name] = resolver(entity)
        return self.destination.model_validate(data)


class DtoToEntityProfile:
    """
    DTO -> entidad. Nunca escribe la llave primaria, las columnas de auditoría
    ni las relaciones: esas las gestionan las capas de negocio y de datos.
    """

    def __init__(
        self,
        dto: Type[BaseModel],
        entity: type,
        computed: Optional[ComputedFields] = None,
        ignore: Iterable[str] = (),
    ):
        self.source = dto
        self.destination = entity
        protected = set(AUDIT_FIELDS) | primary_key_names(entity) | set(ignore)
        self.computed = {name: resolver for name, resolver in (computed or {}).items() if name not in protected}
        self.ignore = frozenset(ignore)
        self._fields = sorted(
            (set(dto.model_fields) & column_names(entity)) - protected - set(self.computed)
        )

    def map(self, dto: BaseModel) -> Any:
        entity = self.destination()
        self.apply(dto, entity)
        return entity

    def apply(self, dto: BaseModel, entity: Any) -> Any:
        for name in self._fields:
            setattr(entity, name, getattr(dto, name))
        for name, resolver in self.computed.items():
            setattr(entity, name, resolver(dto))
        return entity
