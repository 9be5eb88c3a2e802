# rbac_admin/api/endpoints/crud_router.py
"""
Construye el router CRUD estándar de una entidad:

    GET    /                -> lista
    GET    /{id}            -> detalle
    POST   /                -> crear (201)
    PUT    /{id}            -> reemplazar
    PATCH  /{id}            -> modificación parcial
    DELETE /{id}            -> borrado físico (204)
    DELETE /{id}/soft       -> borrado lógico (204)
    POST   /{id}/activate   -> reactivar (204)
    PATCH  /{id}/enable | /disable | /state -> cambio de estado (200 o 404)
"""
from typing import List, Type

from fastapi import APIRouter, Depends, Response, status  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore

from rbac_admin.api.dependencies import activation_service_provider, service_provider
from rbac_admin.schemas.schemas import ActivationStateDto, MessageResponse
from rbac_admin.services.activation_service import ActivationService
from rbac_admin.services.base import GenericService


def build_crud_router(service_cls: Type[GenericService], prefix: str, tags: List[str]) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=tags)
    dto_type = service_cls.dto
    model = service_cls.model
    label = service_cls.entity_name
    get_service = service_provider(service_cls)
    get_activation_service = activation_service_provider(model)

    @router.get("", response_model=List[dto_type])
    async def list_entities(service: GenericService = Depends(get_service)):
        return await service.get_all()

    @router.get("/{entity_id}", response_model=dto_type)
    async def get_entity(entity_id: int, service: GenericService = Depends(get_service)):
        return await service.get_by_id(entity_id)

    @router.post("", response_model=dto_type, status_code=status.HTTP_201_CREATED)
    async def create_entity(dto: dto_type, service: GenericService = Depends(get_service)):
        return await service.create(dto)

    @router.put("/{entity_id}", response_model=dto_type)
    async def update_entity(entity_id: int, dto: dto_type, service: GenericService = Depends(get_service)):
        return await service.update(entity_id, dto)

    @router.patch("/{entity_id}", response_model=dto_type)
    async def patch_entity(entity_id: int, dto: dto_type, service: GenericService = Depends(get_service)):
        return await service.patch(entity_id, dto)

    @router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
    async def delete_entity(entity_id: int, service: GenericService = Depends(get_service)):
        await service.delete(entity_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete("/{entity_id}/soft", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
    async def soft_delete_entity(entity_id: int, service: GenericService = Depends(get_service)):
        await service.soft_delete(entity_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.post("/{entity_id}/activate", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
    async def activate_entity(entity_id: int, service: GenericService = Depends(get_service)):
        await service.activate(entity_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    # --- Cambio de estado: la ausencia del registro se responde aquí con 404 ---

    async def _change_state(activation: ActivationService, entity_id: int, active: bool):
        if not await activation.change_state(entity_id, active):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"message": f"No se encontró {label} con ID {entity_id}"},
            )
        state = "activado" if active else "desactivado"
        return MessageResponse(message=f"{label} con ID {entity_id} {state} correctamente")

    not_found = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}

    @router.patch("/{entity_id}/enable", response_model=MessageResponse, responses=not_found)
    async def enable_entity(
        entity_id: int, activation: ActivationService = Depends(get_activation_service)
    ):
        return await _change_state(activation, entity_id, True)

    @router.patch("/{entity_id}/disable", response_model=MessageResponse, responses=not_found)
    async def disable_entity(
        entity_id: int, activation: ActivationService = Depends(get_activation_service)
    ):
        return await _change_state(activation, entity_id, False)

    @router.patch("/{entity_id}/state", response_model=MessageResponse, responses=not_found)
    async def change_entity_state(
        entity_id: int,
        state: ActivationStateDto,
        activation: ActivationService = Depends(get_activation_service),
    ):
        return await _change_state(activation, entity_id, state.active)

    return router
