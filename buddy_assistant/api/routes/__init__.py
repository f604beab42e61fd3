"""Routes package: exports every FastAPI router."""

from .children import router as children_router
from .diapers import router as diapers_router
from .feedings import router as feedings_router
from .health import router as health_router
from .sleep import router as sleep_router
from .timers import router as timers_router
from .tummy_times import router as tummy_times_router

__all__ = [
    "children_router", "diapers_router", "feedings_router", "health_router",
    "sleep_router", "timers_router", "tummy_times_router",
]
