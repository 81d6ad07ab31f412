"""Conversacion endpoints: CRUD, lookups, and appending a message."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from core.errors import BadInputError, NotFoundError
from models import Conversacion, Mensaje
from repositories import ConversacionRepository
from routes.crud import CrudMessages, register_crud_routes
from schemas import BAD_INPUT_RESPONSES, ERROR_RESPONSES, NOT_FOUND_RESPONSES, MessageResponse
from services import RequiredField, is_blank, unwrap

router = APIRouter(prefix="/api/Conversacion", tags=["conversaciones"])

NOT_FOUND_MESSAGE = "Conversación con ID {id} no encontrada"


def get_conversacion_repository(request: Request) -> ConversacionRepository:
    return request.app.state.repositories.conversaciones


ConversacionRepo = Annotated[
    ConversacionRepository, Depends(get_conversacion_repository)
]


@router.get(
    "/usuario/{usuario_id}",
    response_model=list[Conversacion],
    responses=ERROR_RESPONSES,
)
async def get_conversaciones_by_usuario(
    usuario_id: str, repo: ConversacionRepo
) -> list[Conversacion]:
    return unwrap(
        await repo.get_by_usuario(usuario_id),
        "Error al obtener conversaciones del usuario",
    )


@router.get("/activas", response_model=list[Conversacion], responses=ERROR_RESPONSES)
async def get_conversaciones_activas(repo: ConversacionRepo) -> list[Conversacion]:
    return unwrap(await repo.get_activas(), "Error al obtener conversaciones activas")


@router.get(
    "/resueltas", response_model=list[Conversacion], responses=ERROR_RESPONSES
)
async def get_conversaciones_resueltas(repo: ConversacionRepo) -> list[Conversacion]:
    return unwrap(
        await repo.get_resueltas(), "Error al obtener conversaciones resueltas"
    )


@router.post(
    "/{entity_id}/mensajes",
    response_model=MessageResponse,
    responses={**BAD_INPUT_RESPONSES, **NOT_FOUND_RESPONSES},
)
async def agregar_mensaje(
    entity_id: str, mensaje: Mensaje, repo: ConversacionRepo
) -> MessageResponse:
    """Append a message to a conversation and bump its last-message time."""
    if is_blank(mensaje.contenido):
        raise BadInputError("El contenido del mensaje es requerido")

    appended = unwrap(
        await repo.append_message(entity_id, mensaje), "Error al agregar mensaje"
    )
    if not appended:
        raise NotFoundError(NOT_FOUND_MESSAGE.format(id=entity_id))
    return MessageResponse(message="Mensaje agregado exitosamente")


register_crud_routes(
    router,
    model=Conversacion,
    get_repository=get_conversacion_repository,
    messages=CrudMessages(
        not_found=NOT_FOUND_MESSAGE,
        list_fault="Error al obtener conversaciones",
        get_fault="Error al obtener conversación",
        create_fault="Error al crear conversación",
        update_fault="Error al actualizar conversación",
        delete_fault="Error al eliminar conversación",
    ),
    required=[RequiredField("usuarioId", "El ID de usuario es requerido")],
    get_route_name="get_conversacion",
)
