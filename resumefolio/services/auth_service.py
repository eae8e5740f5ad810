from ..database.models import User
from ..database.repositories.user_repository import UserRepository
from ..auth.services import create_access_token
from ..auth.validators import normalize_and_validated_email
from ..auth.exceptions import (
    InvalidCredentialsException,
    UserAlreadyExistsException,
    UserNotFoundException,
    ValidationException,
)
from ..core.logger import logger


class AuthService:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo
    
    def register_user(self, name: str, email: str, password: str) -> str:
        normalized_email = normalize_and_validated_email(email)
        if not normalized_email:
            raise ValidationException("Enter a valid email")
        
        if self.user_repo.email_exists(normalized_email):
            logger.warning("Registration rejected: email already registered")
            raise UserAlreadyExistsException("Sorry, a user with this email already exists")
        
        user = self.user_repo.create(name=name, email=normalized_email, password=password)
        return create_access_token(user.id)
    
    def login_user(self, email: str, password: str) -> str:
        normalized_email = normalize_and_validated_email(email)
        user = self.user_repo.verify_credentials(normalized_email or email, password)
        
        if not user:
            logger.warning("Failed login attempt")
            raise InvalidCredentialsException("Please try to login with correct credentials")
        
        logger.info(f"User logged in successfully: {user.id}")
        return create_access_token(user.id)
    
    def get_user(self, user_id: str) -> User:
        user = self.user_repo.get_by_id(user_id)
        if not user:
            raise UserNotFoundException("User not found")
        return user
