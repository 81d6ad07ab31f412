"""Document models for the onboarding chatbot collections.

Field names are the stored (and JSON) names used by the chatbot, so a model
dumps straight to the MongoDB document shape. The identifier is exposed as
``id`` (24-hex string) and stored as ``_id`` (ObjectId).

Embedded structures (Direccion, Supervisor, Preferencias, Estadisticas,
Mensaje) have no identity of their own; they live and die with their parent.
"""

from datetime import UTC, datetime
from typing import Any, Self

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field


def utcnow() -> datetime:
    return datetime.now(UTC)


class EmbeddedModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_document(self) -> dict[str, Any]:
        """Dump to the stored shape; fields left as None are omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


class DocumentModel(BaseModel):
    """Base for every top-level document.

    ``id`` is None until the store assigns one on insert.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        validate_assignment=True,
    )

    id: str | None = None

    def to_document(self) -> dict[str, Any]:
        """Dump to the stored shape, without ``_id``.

        Fields left as None are omitted rather than stored as null, both at
        the top level and inside embedded structures. Free-form dict fields
        are stored untouched.
        """
        data = self.model_dump(by_alias=True, exclude={"id"})
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            key = field.alias or name
            if isinstance(value, EmbeddedModel):
                data[key] = value.to_document()
            elif isinstance(value, list) and any(
                isinstance(item, EmbeddedModel) for item in value
            ):
                data[key] = [
                    item.to_document() if isinstance(item, EmbeddedModel) else item
                    for item in value
                ]
        return {key: value for key, value in data.items() if value is not None}

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> Self:
        data = dict(document)
        raw_id = data.pop("_id", None)
        data["id"] = str(raw_id) if isinstance(raw_id, ObjectId) else raw_id
        return cls.model_validate(data)


# =============================================================================
# Actividad
# =============================================================================


class Actividad(DocumentModel):
    """A scheduled onboarding activity."""

    titulo: str = ""
    descripcion: str = ""
    dia: int = 0
    duracionHoras: float = 0
    horaInicio: str = ""
    horaFin: str = ""
    lugar: str = ""
    modalidad: str = ""
    tipo: str = ""
    categoria: str = ""
    responsable: str = ""
    emailResponsable: str | None = None
    capacidadMaxima: int = 0
    obligatorio: bool = False
    materialesNecesarios: list[str] = Field(default_factory=list)
    materialesProporcionados: list[str] = Field(default_factory=list)
    preparacionPrevia: str | None = None
    actividadesSiguientes: list[str] = Field(default_factory=list)
    estado: str = "activo"
    fechaCreacion: datetime = Field(default_factory=utcnow)


# =============================================================================
# Configuracion
# =============================================================================


class Configuracion(DocumentModel):
    """A named system setting.

    ``configuracion`` is an arbitrary nested document; it is stored and
    returned exactly as the caller sent it.
    """

    tipo: str = ""
    nombre: str = ""
    descripcion: str = ""
    configuracion: dict[str, Any] = Field(default_factory=dict)
    activo: bool = True
    fechaCreacion: datetime = Field(default_factory=utcnow)
    fechaActualizacion: datetime = Field(default_factory=utcnow)
    modificadoPor: str = ""


# =============================================================================
# Conversacion
# =============================================================================


class Mensaje(EmbeddedModel):
    """One message inside a conversation."""

    tipo: str = ""
    contenido: str = ""
    timestamp: datetime = Field(default_factory=utcnow)
    faqRelacionada: str | None = None


class Conversacion(DocumentModel):
    usuarioId: str = ""
    mensajes: list[Mensaje] = Field(default_factory=list)
    fechaInicio: datetime = Field(default_factory=utcnow)
    fechaUltimaMensaje: datetime = Field(default_factory=utcnow)
    activa: bool = True
    satisfaccion: int | None = None
    resuelto: bool = False


# =============================================================================
# Documento
# =============================================================================


class Documento(DocumentModel):
    """A document or resource linked from the chatbot."""

    titulo: str = ""
    descripcion: str = ""
    url: str = ""
    tipo: str = ""
    categoria: str = ""
    subcategoria: str = ""
    tags: list[str] = Field(default_factory=list)
    icono: str = ""
    tamano: str | None = Field(default=None, alias="tamaño")
    idioma: str = ""
    version: str = ""
    publico: str = ""
    obligatorio: bool = False
    fechaPublicacion: datetime = Field(default_factory=utcnow)
    fechaActualizacion: datetime = Field(default_factory=utcnow)
    autor: str = ""
    descargas: int | None = None
    accesos: int | None = None
    valoracion: int = 0


# =============================================================================
# FAQ
# =============================================================================


class FAQ(DocumentModel):
    pregunta: str = ""
    respuesta: str = ""
    categoria: str = ""
    subcategoria: str | None = None
    palabrasClave: list[str] = Field(default_factory=list)
    prioridad: str | None = None
    activa: bool = True
    vecesUsada: int = 0
    rating: float = 0
    fechaCreacion: datetime = Field(default_factory=utcnow)
    fechaActualizacion: datetime = Field(default_factory=utcnow)
    creadoPor: str | None = None
    respuestaLarga: str | None = None
    documentosRelacionados: list[str] = Field(default_factory=list)
    actividadesRelacionadas: list[str] = Field(default_factory=list)


# =============================================================================
# MensajeAutomatico
# =============================================================================


class MensajeAutomatico(DocumentModel):
    """A message the chatbot sends on its own (e.g. on onboarding day N)."""

    titulo: str = ""
    contenido: str = ""
    tipo: str = ""
    diaGatillo: int | None = None
    prioridad: str = ""
    canal: list[str] = Field(default_factory=list)
    activo: bool = True
    segmento: str = ""
    horaEnvio: str = ""
    condicion: str | None = None
    fechaCreacion: datetime = Field(default_factory=utcnow)
    creadoPor: str = ""


# =============================================================================
# Usuario
# =============================================================================


class Direccion(EmbeddedModel):
    calle: str = ""
    distrito: str = ""
    ciudad: str = ""
    pais: str = ""
    codigoPostal: str = ""


class Supervisor(EmbeddedModel):
    nombre: str = ""
    email: str = ""
    telefono: str = ""
    puesto: str = ""


class Preferencias(EmbeddedModel):
    notificaciones: bool = True
    notificacionesEmail: bool = True
    notificacionesPush: bool = True
    idioma: str = "es"
    temaOscuro: bool = False


class Estadisticas(EmbeddedModel):
    mensajesEnviados: int = 0
    preguntasRealizadas: int = 0
    documentosDescargados: int = 0
    ultimaInteraccion: datetime | None = None
    satisfaccionPromedio: float | None = None


class Usuario(DocumentModel):
    """A new hire going through onboarding."""

    nombre: str = ""
    apellidos: str = ""
    nombreCompleto: str = ""
    email: str = ""
    telefono: str = ""
    dni: str = ""
    fechaNacimiento: datetime | None = None
    edad: int = 0
    genero: str = ""
    estadoCivil: str = ""
    direccion: Direccion = Field(default_factory=Direccion)
    area: str = ""
    departamento: str = ""
    puesto: str = ""
    nivel: str = ""
    tipoContrato: str = ""
    fechaIngreso: datetime | None = None
    diasDesdeIngreso: int = 0
    supervisor: Supervisor = Field(default_factory=Supervisor)
    estadoOnboarding: str = ""
    progresoOnboarding: int = 0
    actividadesCompletadas: list[str] = Field(default_factory=list)
    actividadesPendientes: list[str] = Field(default_factory=list)
    documentosEntregados: list[str] = Field(default_factory=list)
    documentosPendientes: list[str] = Field(default_factory=list)
    cursosAsignados: list[str] = Field(default_factory=list)
    cursosCompletados: list[str] = Field(default_factory=list)
    certificaciones: list[str] = Field(default_factory=list)
    favoritosChat: list[str] = Field(default_factory=list)
    preferencias: Preferencias = Field(default_factory=Preferencias)
    estadisticas: Estadisticas = Field(default_factory=Estadisticas)
    activo: bool = True
    verificado: bool = False
    primerLogin: datetime | None = None
    ultimoLogin: datetime | None = None
    fechaCreacion: datetime = Field(default_factory=utcnow)
    fechaActualizacion: datetime = Field(default_factory=utcnow)
    creadoPor: str = ""
