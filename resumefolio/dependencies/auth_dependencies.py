from fastapi import Depends, Request
from sqlalchemy.orm import Session

from ..auth.services import verify_token
from ..database import get_db
from ..database.repositories.user_repository import UserRepository
from ..services.auth_service import AuthService

AUTH_HEADER = "auth-token"


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_auth_service(
    user_repo: UserRepository = Depends(get_user_repository),
) -> AuthService:
    return AuthService(user_repo=user_repo)


def get_current_user_id(request: Request) -> str:
    return verify_token(request.headers.get(AUTH_HEADER))
