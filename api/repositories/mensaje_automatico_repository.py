"""MensajeAutomatico repository for the ``mensajesAutomaticos`` collection."""

from models import MensajeAutomatico
from repositories.base import MongoRepository
from repositories.utils import store_operation


class MensajeAutomaticoRepository(MongoRepository[MensajeAutomatico]):
    collection_name = "mensajesAutomaticos"
    model = MensajeAutomatico
    created_fields = ("fechaCreacion",)

    @store_operation("get_by_tipo")
    async def get_by_tipo(self, tipo: str) -> list[MensajeAutomatico]:
        self.log.info("repository.get_by_tipo", tipo=tipo)
        return await self._find({"tipo": tipo})

    @store_operation("get_activos")
    async def get_activos(self) -> list[MensajeAutomatico]:
        self.log.info("repository.get_activos")
        return await self._find({"activo": True})
