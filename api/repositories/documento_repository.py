"""Documento repository for the ``documentos`` collection."""

from models import Documento
from repositories.base import MongoRepository
from repositories.utils import store_operation


class DocumentoRepository(MongoRepository[Documento]):
    collection_name = "documentos"
    model = Documento
    created_fields = ("fechaPublicacion",)
    updated_fields = ("fechaActualizacion",)

    @store_operation("get_by_categoria")
    async def get_by_categoria(self, categoria: str) -> list[Documento]:
        self.log.info("repository.get_by_categoria", categoria=categoria)
        return await self._find({"categoria": categoria})

    @store_operation("get_by_tipo")
    async def get_by_tipo(self, tipo: str) -> list[Documento]:
        self.log.info("repository.get_by_tipo", tipo=tipo)
        return await self._find({"tipo": tipo})

    @store_operation("get_by_tag")
    async def get_by_tag(self, tag: str) -> list[Documento]:
        """Documents whose ``tags`` array contains ``tag`` (exact match)."""
        self.log.info("repository.get_by_tag", tag=tag)
        return await self._find({"tags": tag})
