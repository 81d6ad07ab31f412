"""FAQ endpoints: CRUD plus free-text search."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from models import FAQ
from repositories import FAQRepository
from routes.crud import CrudMessages, register_crud_routes
from schemas import ERROR_RESPONSES
from services import RequiredField, unwrap

router = APIRouter(prefix="/api/FAQ", tags=["faqs"])


def get_faq_repository(request: Request) -> FAQRepository:
    return request.app.state.repositories.faqs


FAQRepo = Annotated[FAQRepository, Depends(get_faq_repository)]


@router.get("/search", response_model=list[FAQ], responses=ERROR_RESPONSES)
async def search_faqs(repo: FAQRepo, query: str = "") -> list[FAQ]:
    """Search question, answer and keywords. A missing or blank query lists all."""
    return unwrap(await repo.search(query), "Error al buscar FAQs")


register_crud_routes(
    router,
    model=FAQ,
    get_repository=get_faq_repository,
    messages=CrudMessages(
        not_found="FAQ con ID {id} no encontrada",
        list_fault="Error al obtener las FAQs",
        get_fault="Error al obtener la FAQ",
        create_fault="Error al crear la FAQ",
        update_fault="Error al actualizar la FAQ",
        delete_fault="Error al eliminar la FAQ",
    ),
    required=[
        RequiredField("pregunta", "La pregunta es requerida"),
        RequiredField("respuesta", "La respuesta es requerida"),
        RequiredField("categoria", "La categoría es requerida"),
    ],
    get_route_name="get_faq",
)
