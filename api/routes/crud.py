"""Shared CRUD endpoints registered on every entity router.

Each entity router declares its own filter routes first and then calls
``register_crud_routes`` so literal segments such as ``/activos`` are matched
before the ``/{entity_id}`` catch-all.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from starlette import status

from core.errors import NotFoundError
from models import DocumentModel
from repositories.base import MongoRepository
from schemas import BAD_INPUT_RESPONSES, ERROR_RESPONSES, NOT_FOUND_RESPONSES
from services import RequiredField, unwrap, validate_required


@dataclass(frozen=True, slots=True)
class CrudMessages:
    """User-facing texts for one entity's CRUD routes.

    ``not_found`` is a template with an ``{id}`` placeholder.
    """

    not_found: str
    list_fault: str
    get_fault: str
    create_fault: str
    update_fault: str
    delete_fault: str


def register_crud_routes[T: DocumentModel](
    router: APIRouter,
    *,
    model: type[T],
    get_repository: Callable[[Request], MongoRepository[T]],
    messages: CrudMessages,
    required: Sequence[RequiredField],
    get_route_name: str,
) -> None:
    """Add list/get/create/update/delete routes for ``model`` to ``router``.

    ``get_route_name`` must be unique across the app; it is used to build the
    ``Location`` header of a created entity.
    """
    Repository = Annotated[MongoRepository[T], Depends(get_repository)]

    @router.get("", response_model=list[model], responses=ERROR_RESPONSES)
    async def list_entities(repo: Repository) -> list[T]:
        return unwrap(await repo.list_all(), messages.list_fault)

    @router.get(
        "/{entity_id}",
        response_model=model,
        responses=NOT_FOUND_RESPONSES,
        name=get_route_name,
    )
    async def get_entity(entity_id: str, repo: Repository) -> T:
        entity = unwrap(await repo.get_by_id(entity_id), messages.get_fault)
        if entity is None:
            raise NotFoundError(messages.not_found.format(id=entity_id))
        return entity

    @router.post(
        "",
        response_model=model,
        status_code=status.HTTP_201_CREATED,
        responses=BAD_INPUT_RESPONSES,
    )
    async def create_entity(
        payload: model, request: Request, response: Response, repo: Repository
    ) -> T:
        validate_required(payload, required)
        created = unwrap(await repo.create(payload), messages.create_fault)
        response.headers["Location"] = str(
            request.url_for(get_route_name, entity_id=created.id)
        )
        return created

    @router.put(
        "/{entity_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        responses={**BAD_INPUT_RESPONSES, **NOT_FOUND_RESPONSES},
    )
    async def update_entity(entity_id: str, payload: model, repo: Repository) -> Response:
        validate_required(payload, required)
        updated = unwrap(await repo.update(entity_id, payload), messages.update_fault)
        if not updated:
            raise NotFoundError(messages.not_found.format(id=entity_id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete(
        "/{entity_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        responses=NOT_FOUND_RESPONSES,
    )
    async def delete_entity(entity_id: str, repo: Repository) -> Response:
        deleted = unwrap(await repo.delete(entity_id), messages.delete_fault)
        if not deleted:
            raise NotFoundError(messages.not_found.format(id=entity_id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)
