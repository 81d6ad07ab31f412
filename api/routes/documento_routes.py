"""Documento endpoints: CRUD plus lookups by category, type and tag."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from models import Documento
from repositories import DocumentoRepository
from routes.crud import CrudMessages, register_crud_routes
from schemas import ERROR_RESPONSES
from services import RequiredField, unwrap

router = APIRouter(prefix="/api/Documento", tags=["documentos"])


def get_documento_repository(request: Request) -> DocumentoRepository:
    return request.app.state.repositories.documentos


DocumentoRepo = Annotated[DocumentoRepository, Depends(get_documento_repository)]


@router.get(
    "/categoria/{categoria}", response_model=list[Documento], responses=ERROR_RESPONSES
)
async def get_documentos_by_categoria(
    categoria: str, repo: DocumentoRepo
) -> list[Documento]:
    return unwrap(
        await repo.get_by_categoria(categoria),
        "Error al obtener documentos por categoría",
    )


@router.get("/tipo/{tipo}", response_model=list[Documento], responses=ERROR_RESPONSES)
async def get_documentos_by_tipo(tipo: str, repo: DocumentoRepo) -> list[Documento]:
    return unwrap(await repo.get_by_tipo(tipo), "Error al obtener documentos por tipo")


@router.get("/tag/{tag}", response_model=list[Documento], responses=ERROR_RESPONSES)
async def get_documentos_by_tag(tag: str, repo: DocumentoRepo) -> list[Documento]:
    """Documents carrying ``tag`` in their tag list."""
    return unwrap(await repo.get_by_tag(tag), "Error al buscar documentos por tag")


register_crud_routes(
    router,
    model=Documento,
    get_repository=get_documento_repository,
    messages=CrudMessages(
        not_found="Documento con ID {id} no encontrado",
        list_fault="Error al obtener documentos",
        get_fault="Error al obtener documento",
        create_fault="Error al crear documento",
        update_fault="Error al actualizar documento",
        delete_fault="Error al eliminar documento",
    ),
    required=[
        RequiredField("titulo", "El título es requerido"),
        RequiredField("url", "La URL es requerida"),
    ],
    get_route_name="get_documento",
)
