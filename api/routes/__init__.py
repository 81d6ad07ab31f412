"""API route modules."""

from .actividad_routes import router as actividad_router
from .configuracion_routes import router as configuracion_router
from .conversacion_routes import router as conversacion_router
from .documento_routes import router as documento_router
from .faq_routes import router as faq_router
from .health_routes import router as health_router
from .mensaje_automatico_routes import router as mensaje_automatico_router
from .usuario_routes import router as usuario_router

__all__ = [
    "actividad_router",
    "configuracion_router",
    "conversacion_router",
    "documento_router",
    "faq_router",
    "health_router",
    "mensaje_automatico_router",
    "usuario_router",
]
