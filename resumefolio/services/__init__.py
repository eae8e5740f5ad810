from .auth_service import AuthService
from .portfolio_service import PortfolioService
from .render_service import RenderService
from .resume_service import ResumeService

__all__ = [
    "AuthService",
    "PortfolioService",
    "RenderService",
    "ResumeService",
]
