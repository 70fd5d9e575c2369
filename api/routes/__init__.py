"""API route modules."""

from api.routes.health import router as health_router
from api.routes.strength import router as strength_router

__all__ = ["health_router", "strength_router"]
