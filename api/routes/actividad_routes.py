"""Actividad endpoints: CRUD plus lookups by day, type and mandatory flag."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from models import Actividad
from repositories import ActividadRepository
from routes.crud import CrudMessages, register_crud_routes
from schemas import ERROR_RESPONSES
from services import RequiredField, unwrap

router = APIRouter(prefix="/api/Actividad", tags=["actividades"])


def get_actividad_repository(request: Request) -> ActividadRepository:
    return request.app.state.repositories.actividades


ActividadRepo = Annotated[ActividadRepository, Depends(get_actividad_repository)]


@router.get("/dia/{dia}", response_model=list[Actividad], responses=ERROR_RESPONSES)
async def get_actividades_by_dia(dia: int, repo: ActividadRepo) -> list[Actividad]:
    """Activities scheduled for a given onboarding day."""
    return unwrap(await repo.get_by_dia(dia), "Error al obtener actividades por día")


@router.get("/tipo/{tipo}", response_model=list[Actividad], responses=ERROR_RESPONSES)
async def get_actividades_by_tipo(tipo: str, repo: ActividadRepo) -> list[Actividad]:
    return unwrap(await repo.get_by_tipo(tipo), "Error al obtener actividades por tipo")


@router.get("/obligatorias", response_model=list[Actividad], responses=ERROR_RESPONSES)
async def get_actividades_obligatorias(repo: ActividadRepo) -> list[Actividad]:
    return unwrap(
        await repo.get_obligatorias(), "Error al obtener actividades obligatorias"
    )


register_crud_routes(
    router,
    model=Actividad,
    get_repository=get_actividad_repository,
    messages=CrudMessages(
        not_found="Actividad con ID {id} no encontrada",
        list_fault="Error al obtener actividades",
        get_fault="Error al obtener actividad",
        create_fault="Error al crear actividad",
        update_fault="Error al actualizar actividad",
        delete_fault="Error al eliminar actividad",
    ),
    required=[
        RequiredField("titulo", "El título es requerido"),
        RequiredField("descripcion", "La descripción es requerida"),
    ],
    get_route_name="get_actividad",
)
