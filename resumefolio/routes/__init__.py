from .auth import router as auth_router
from .resume import router as resume_router
from .templates import router as templates_router

__all__ = ["auth_router", "resume_router", "templates_router"]
