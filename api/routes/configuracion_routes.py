"""Configuracion endpoints: CRUD plus lookups by type, name and active flag."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from core.errors import NotFoundError
from models import Configuracion
from repositories import ConfiguracionRepository
from routes.crud import CrudMessages, register_crud_routes
from schemas import ERROR_RESPONSES, NOT_FOUND_RESPONSES
from services import RequiredField, unwrap

router = APIRouter(prefix="/api/Configuracion", tags=["configuracion"])


def get_configuracion_repository(request: Request) -> ConfiguracionRepository:
    return request.app.state.repositories.configuracion


ConfiguracionRepo = Annotated[
    ConfiguracionRepository, Depends(get_configuracion_repository)
]


@router.get(
    "/tipo/{tipo}", response_model=list[Configuracion], responses=ERROR_RESPONSES
)
async def get_configuraciones_by_tipo(
    tipo: str, repo: ConfiguracionRepo
) -> list[Configuracion]:
    return unwrap(
        await repo.get_by_tipo(tipo), "Error al obtener configuraciones por tipo"
    )


@router.get("/activas", response_model=list[Configuracion], responses=ERROR_RESPONSES)
async def get_configuraciones_activas(repo: ConfiguracionRepo) -> list[Configuracion]:
    return unwrap(await repo.get_activas(), "Error al obtener configuraciones activas")


@router.get(
    "/nombre/{nombre}", response_model=Configuracion, responses=NOT_FOUND_RESPONSES
)
async def get_configuracion_by_nombre(
    nombre: str, repo: ConfiguracionRepo
) -> Configuracion:
    """A single setting by its exact name."""
    configuracion = unwrap(
        await repo.get_by_nombre(nombre), "Error al buscar configuración por nombre"
    )
    if configuracion is None:
        raise NotFoundError(f"Configuración con nombre {nombre} no encontrada")
    return configuracion


register_crud_routes(
    router,
    model=Configuracion,
    get_repository=get_configuracion_repository,
    messages=CrudMessages(
        not_found="Configuración con ID {id} no encontrada",
        list_fault="Error al obtener configuraciones",
        get_fault="Error al obtener configuración",
        create_fault="Error al crear configuración",
        update_fault="Error al actualizar configuración",
        delete_fault="Error al eliminar configuración",
    ),
    required=[
        RequiredField("nombre", "El nombre es requerido"),
        RequiredField("tipo", "El tipo es requerido"),
    ],
    get_route_name="get_configuracion",
)
