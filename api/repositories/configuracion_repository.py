"""Configuracion repository for the ``configuracion`` collection."""

from models import Configuracion
from repositories.base import MongoRepository
from repositories.utils import store_operation


class ConfiguracionRepository(MongoRepository[Configuracion]):
    collection_name = "configuracion"
    model = Configuracion
    created_fields = ("fechaCreacion",)
    updated_fields = ("fechaActualizacion",)

    @store_operation("get_by_tipo")
    async def get_by_tipo(self, tipo: str) -> list[Configuracion]:
        self.log.info("repository.get_by_tipo", tipo=tipo)
        return await self._find({"tipo": tipo})

    @store_operation("get_activas")
    async def get_activas(self) -> list[Configuracion]:
        self.log.info("repository.get_activas")
        return await self._find({"activo": True})

    @store_operation("get_by_nombre")
    async def get_by_nombre(self, nombre: str) -> Configuracion | None:
        """First setting with exactly this name, or None."""
        self.log.info("repository.get_by_nombre", nombre=nombre)
        return await self._find_one({"nombre": nombre})
