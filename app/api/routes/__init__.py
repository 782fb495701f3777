from .health import router as health_router
from .notes import router as notes_router
from .projects import router as projects_router
from .tasks import router as tasks_router
from .users import router as users_router

__all__ = ["health_router", "notes_router", "projects_router", "tasks_router", "users_router"]
