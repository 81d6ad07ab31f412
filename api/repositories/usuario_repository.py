"""Usuario repository for the ``usuarios`` collection."""

from models import Usuario
from repositories.base import MongoRepository
from repositories.utils import store_operation


class UsuarioRepository(MongoRepository[Usuario]):
    """Repository for new hires.

    Email and DNI are not enforced unique by the store; the single lookups
    return the first match.
    """

    collection_name = "usuarios"
    model = Usuario
    created_fields = ("fechaCreacion",)
    updated_fields = ("fechaActualizacion",)

    @store_operation("get_by_email")
    async def get_by_email(self, email: str) -> Usuario | None:
        self.log.info("repository.get_by_email", email=email)
        return await self._find_one({"email": email})

    @store_operation("get_by_dni")
    async def get_by_dni(self, dni: str) -> Usuario | None:
        self.log.info("repository.get_by_dni", dni=dni)
        return await self._find_one({"dni": dni})

    @store_operation("get_by_estado_onboarding")
    async def get_by_estado_onboarding(self, estado: str) -> list[Usuario]:
        self.log.info("repository.get_by_estado_onboarding", estado=estado)
        return await self._find({"estadoOnboarding": estado})

    @store_operation("get_activos")
    async def get_activos(self) -> list[Usuario]:
        self.log.info("repository.get_activos")
        return await self._find({"activo": True})

    @store_operation("get_by_departamento")
    async def get_by_departamento(self, departamento: str) -> list[Usuario]:
        self.log.info("repository.get_by_departamento", departamento=departamento)
        return await self._find({"departamento": departamento})
