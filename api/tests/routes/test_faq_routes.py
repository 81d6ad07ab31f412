"""Route tests for GET /api/FAQ/search."""

import pytest
from bson import ObjectId
from httpx import AsyncClient

from repositories import Fault, Ok
from tests.factories import FAQFactory


@pytest.mark.unit
class TestSearchFaqs:
    async def test_passes_query(self, client: AsyncClient, fake_repositories):
        faqs = [FAQFactory.build(id=str(ObjectId()))]
        fake_repositories.faqs.search.return_value = Ok(faqs)

        response = await client.get("/api/FAQ/search", params={"query": "vacaciones"})

        assert response.status_code == 200
        assert [f["id"] for f in response.json()] == [faqs[0].id]
        fake_repositories.faqs.search.assert_awaited_once_with("vacaciones")

    async def test_missing_query_is_blank(self, client: AsyncClient, fake_repositories):
        fake_repositories.faqs.search.return_value = Ok([])

        response = await client.get("/api/FAQ/search")

        assert response.status_code == 200
        fake_repositories.faqs.search.assert_awaited_once_with("")
        fake_repositories.faqs.get_by_id.assert_not_awaited()

    async def test_fault(self, client: AsyncClient, fake_repositories):
        fake_repositories.faqs.search.return_value = Fault(
            operation="faqs.search", description="boom", error_type="OperationFailure"
        )

        response = await client.get("/api/FAQ/search", params={"query": "x"})

        assert response.status_code == 500
        assert response.json() == {"message": "Error al buscar FAQs", "error": "boom"}
