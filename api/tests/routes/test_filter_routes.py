"""Route tests for the entity-specific filtered list routes.

Literal segments (``obligatorias``, ``activos``, ...) must reach their own
handler, never the ``/{entity_id}`` catch-all.
"""

import pytest
from bson import ObjectId
from httpx import AsyncClient

from repositories import Fault, Ok
from tests.factories import ActividadFactory

FILTER_ROUTES = [
    ("/api/Actividad/dia/3", "actividades", "get_by_dia", (3,), "Error al obtener actividades por día"),
    ("/api/Actividad/tipo/taller", "actividades", "get_by_tipo", ("taller",), "Error al obtener actividades por tipo"),
    ("/api/Actividad/obligatorias", "actividades", "get_obligatorias", (), "Error al obtener actividades obligatorias"),
    ("/api/Configuracion/tipo/chatbot", "configuracion", "get_by_tipo", ("chatbot",), "Error al obtener configuraciones por tipo"),
    ("/api/Configuracion/activas", "configuracion", "get_activas", (), "Error al obtener configuraciones activas"),
    ("/api/Conversacion/usuario/u-1", "conversaciones", "get_by_usuario", ("u-1",), "Error al obtener conversaciones del usuario"),
    ("/api/Conversacion/activas", "conversaciones", "get_activas", (), "Error al obtener conversaciones activas"),
    ("/api/Conversacion/resueltas", "conversaciones", "get_resueltas", (), "Error al obtener conversaciones resueltas"),
    ("/api/Documento/categoria/rrhh", "documentos", "get_by_categoria", ("rrhh",), "Error al obtener documentos por categoría"),
    ("/api/Documento/tipo/pdf", "documentos", "get_by_tipo", ("pdf",), "Error al obtener documentos por tipo"),
    ("/api/Documento/tag/legal", "documentos", "get_by_tag", ("legal",), "Error al buscar documentos por tag"),
    ("/api/MensajeAutomatico/tipo/bienvenida", "mensajes_automaticos", "get_by_tipo", ("bienvenida",), "Error al obtener mensajes por tipo"),
    ("/api/MensajeAutomatico/activos", "mensajes_automaticos", "get_activos", (), "Error al obtener mensajes activos"),
    ("/api/Usuario/onboarding/completado", "usuarios", "get_by_estado_onboarding", ("completado",), "Error al obtener usuarios por estado de onboarding"),
    ("/api/Usuario/activos", "usuarios", "get_activos", (), "Error al obtener usuarios activos"),
    ("/api/Usuario/departamento/Ventas", "usuarios", "get_by_departamento", ("Ventas",), "Error al obtener usuarios por departamento"),
]


@pytest.mark.unit
@pytest.mark.parametrize(("url", "repository", "method", "args", "fault_message"), FILTER_ROUTES)
class TestFilterRoutes:
    async def test_delegates_to_filter(
        self, client: AsyncClient, fake_repositories, url, repository, method, args, fault_message
    ):
        repo = getattr(fake_repositories, repository)
        getattr(repo, method).return_value = Ok([])

        response = await client.get(url)

        assert response.status_code == 200
        assert response.json() == []
        getattr(repo, method).assert_awaited_once_with(*args)
        repo.get_by_id.assert_not_awaited()

    async def test_fault(
        self, client: AsyncClient, fake_repositories, url, repository, method, args, fault_message
    ):
        repo = getattr(fake_repositories, repository)
        getattr(repo, method).return_value = Fault(
            operation=f"{repository}.{method}", description="timed out", error_type="NetworkTimeout"
        )

        response = await client.get(url)

        assert response.status_code == 500
        assert response.json() == {"message": fault_message, "error": "timed out"}


@pytest.mark.unit
class TestActividadFilters:
    async def test_dia_returns_matching(self, client: AsyncClient, fake_repositories):
        actividades = [ActividadFactory.build(id=str(ObjectId()), dia=2)]
        fake_repositories.actividades.get_by_dia.return_value = Ok(actividades)

        response = await client.get("/api/Actividad/dia/2")

        assert response.status_code == 200
        assert [a["dia"] for a in response.json()] == [2]

    async def test_non_integer_dia_is_400(self, client: AsyncClient, fake_repositories):
        response = await client.get("/api/Actividad/dia/lunes")

        assert response.status_code == 400
        fake_repositories.actividades.get_by_dia.assert_not_awaited()
