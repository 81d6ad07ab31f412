"""Usuario endpoints: CRUD plus lookups by email, DNI, onboarding state and department."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from core.errors import NotFoundError
from models import Usuario
from repositories import UsuarioRepository
from routes.crud import CrudMessages, register_crud_routes
from schemas import ERROR_RESPONSES, NOT_FOUND_RESPONSES
from services import RequiredField, unwrap

router = APIRouter(prefix="/api/Usuario", tags=["usuarios"])


def get_usuario_repository(request: Request) -> UsuarioRepository:
    return request.app.state.repositories.usuarios


UsuarioRepo = Annotated[UsuarioRepository, Depends(get_usuario_repository)]


@router.get("/email/{email}", response_model=Usuario, responses=NOT_FOUND_RESPONSES)
async def get_usuario_by_email(email: str, repo: UsuarioRepo) -> Usuario:
    usuario = unwrap(await repo.get_by_email(email), "Error al buscar usuario por email")
    if usuario is None:
        raise NotFoundError(f"Usuario con email {email} no encontrado")
    return usuario


@router.get("/dni/{dni}", response_model=Usuario, responses=NOT_FOUND_RESPONSES)
async def get_usuario_by_dni(dni: str, repo: UsuarioRepo) -> Usuario:
    usuario = unwrap(await repo.get_by_dni(dni), "Error al buscar usuario por DNI")
    if usuario is None:
        raise NotFoundError(f"Usuario con DNI {dni} no encontrado")
    return usuario


@router.get(
    "/onboarding/{estado}", response_model=list[Usuario], responses=ERROR_RESPONSES
)
async def get_usuarios_by_estado_onboarding(
    estado: str, repo: UsuarioRepo
) -> list[Usuario]:
    return unwrap(
        await repo.get_by_estado_onboarding(estado),
        "Error al obtener usuarios por estado de onboarding",
    )


@router.get("/activos", response_model=list[Usuario], responses=ERROR_RESPONSES)
async def get_usuarios_activos(repo: UsuarioRepo) -> list[Usuario]:
    return unwrap(await repo.get_activos(), "Error al obtener usuarios activos")


@router.get(
    "/departamento/{departamento}",
    response_model=list[Usuario],
    responses=ERROR_RESPONSES,
)
async def get_usuarios_by_departamento(
    departamento: str, repo: UsuarioRepo
) -> list[Usuario]:
    return unwrap(
        await repo.get_by_departamento(departamento),
        "Error al obtener usuarios por departamento",
    )


register_crud_routes(
    router,
    model=Usuario,
    get_repository=get_usuario_repository,
    messages=CrudMessages(
        not_found="Usuario con ID {id} no encontrado",
        list_fault="Error al obtener usuarios",
        get_fault="Error al obtener usuario",
        create_fault="Error al crear usuario",
        update_fault="Error al actualizar usuario",
        delete_fault="Error al eliminar usuario",
    ),
    required=[
        RequiredField("email", "El email es requerido"),
        RequiredField("nombre", "El nombre es requerido"),
    ],
    get_route_name="get_usuario",
)
