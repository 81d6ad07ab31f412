"""FAQ repository for the ``faqs`` collection."""

import re
from typing import Any

from models import FAQ
from repositories.base import MongoRepository
from repositories.utils import store_operation


def build_search_filter(query: str) -> dict[str, Any]:
    """Filter matching ``query`` against question, answer and keywords.

    Question and answer match on a case-insensitive substring; the query is
    escaped so regex metacharacters are taken literally. Keywords must
    contain the query exactly.
    """
    pattern = re.escape(query)
    return {
        "$or": [
            {"pregunta": {"$regex": pattern, "$options": "i"}},
            {"respuesta": {"$regex": pattern, "$options": "i"}},
            {"palabrasClave": {"$in": [query]}},
        ]
    }


class FAQRepository(MongoRepository[FAQ]):
    collection_name = "faqs"
    model = FAQ
    created_fields = ("fechaCreacion",)
    updated_fields = ("fechaActualizacion",)

    @store_operation("search")
    async def search(self, query: str) -> list[FAQ]:
        """FAQs matching ``query``; a blank query returns every FAQ."""
        if not query or not query.strip():
            self.log.info("repository.search.blank")
            return await self._find({})

        results = await self._find(build_search_filter(query))
        self.log.info("repository.search", query=query, results=len(results))
        return results
