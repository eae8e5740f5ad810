from .auth_dependencies import (
    get_auth_service,
    get_current_user_id,
    get_user_repository,
)
from .portfolio_dependencies import get_portfolio_service, get_portfolio_repository
from .resume_dependencies import get_resume_service, get_resume_parser, get_text_extractor
from .render_dependencies import get_render_service

__all__ = [
    "get_auth_service",
    "get_current_user_id",
    "get_user_repository",
    "get_portfolio_service",
    "get_portfolio_repository",
    "get_resume_service",
    "get_resume_parser",
    "get_text_extractor",
    "get_render_service",
]
