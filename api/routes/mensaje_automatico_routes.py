"""MensajeAutomatico endpoints: CRUD plus lookups by type and active flag."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from models import MensajeAutomatico
from repositories import MensajeAutomaticoRepository
from routes.crud import CrudMessages, register_crud_routes
from schemas import ERROR_RESPONSES
from services import RequiredField, unwrap

router = APIRouter(prefix="/api/MensajeAutomatico", tags=["mensajes-automaticos"])


def get_mensaje_automatico_repository(
    request: Request,
) -> MensajeAutomaticoRepository:
    return request.app.state.repositories.mensajes_automaticos


MensajeAutomaticoRepo = Annotated[
    MensajeAutomaticoRepository, Depends(get_mensaje_automatico_repository)
]


@router.get(
    "/tipo/{tipo}", response_model=list[MensajeAutomatico], responses=ERROR_RESPONSES
)
async def get_mensajes_by_tipo(
    tipo: str, repo: MensajeAutomaticoRepo
) -> list[MensajeAutomatico]:
    return unwrap(await repo.get_by_tipo(tipo), "Error al obtener mensajes por tipo")


@router.get(
    "/activos", response_model=list[MensajeAutomatico], responses=ERROR_RESPONSES
)
async def get_mensajes_activos(
    repo: MensajeAutomaticoRepo,
) -> list[MensajeAutomatico]:
    return unwrap(await repo.get_activos(), "Error al obtener mensajes activos")


register_crud_routes(
    router,
    model=MensajeAutomatico,
    get_repository=get_mensaje_automatico_repository,
    messages=CrudMessages(
        not_found="Mensaje automático con ID {id} no encontrado",
        list_fault="Error al obtener mensajes automáticos",
        get_fault="Error al obtener mensaje automático",
        create_fault="Error al crear mensaje automático",
        update_fault="Error al actualizar mensaje automático",
        delete_fault="Error al eliminar mensaje automático",
    ),
    required=[
        RequiredField("titulo", "El título es requerido"),
        RequiredField("contenido", "El contenido es requerido"),
    ],
    get_route_name="get_mensaje_automatico",
)
