"""Repository layer: one Entity Access Component per collection.

Repositories encapsulate every MongoDB query, keeping routes focused on
request/response handling. Operations return a ``Result`` (``Ok`` or
``Fault``) instead of raising for store faults.
"""

from dataclasses import dataclass

from pymongo.asynchronous.database import AsyncDatabase

from core.config import Settings
from repositories.actividad_repository import ActividadRepository
from repositories.base import MongoRepository
from repositories.configuracion_repository import ConfiguracionRepository
from repositories.conversacion_repository import ConversacionRepository
from repositories.documento_repository import DocumentoRepository
from repositories.faq_repository import FAQRepository
from repositories.mensaje_automatico_repository import MensajeAutomaticoRepository
from repositories.result import Fault, Ok, Result
from repositories.usuario_repository import UsuarioRepository


@dataclass(frozen=True, slots=True)
class RepositorySet:
    """The repositories built once at startup and shared by all requests."""

    actividades: ActividadRepository
    configuracion: ConfiguracionRepository
    conversaciones: ConversacionRepository
    documentos: DocumentoRepository
    faqs: FAQRepository
    mensajes_automaticos: MensajeAutomaticoRepository
    usuarios: UsuarioRepository


def build_repositories(db: AsyncDatabase, settings: Settings) -> RepositorySet:
    """Construct every repository against ``db``.

    Raises if any collection cannot be obtained, which aborts startup.
    """
    options = {"count_matched_as_updated": settings.count_matched_as_updated}
    return RepositorySet(
        actividades=ActividadRepository(db, **options),
        configuracion=ConfiguracionRepository(db, **options),
        conversaciones=ConversacionRepository(db, **options),
        documentos=DocumentoRepository(db, **options),
        faqs=FAQRepository(db, **options),
        mensajes_automaticos=MensajeAutomaticoRepository(db, **options),
        usuarios=UsuarioRepository(db, **options),
    )


__all__ = [
    "ActividadRepository",
    "ConfiguracionRepository",
    "ConversacionRepository",
    "DocumentoRepository",
    "FAQRepository",
    "Fault",
    "MensajeAutomaticoRepository",
    "MongoRepository",
    "Ok",
    "RepositorySet",
    "Result",
    "UsuarioRepository",
    "build_repositories",
]
