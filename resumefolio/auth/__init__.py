from .security import get_password_hash, verify_password, verify_against_dummy
from .validators import validate_name, validate_password, normalize_and_validated_email
from .services import create_access_token, verify_token
from .exceptions import (
    AuthException, InvalidCredentialsException, UserAlreadyExistsException,
    UserNotFoundException, NotAuthenticatedException, TokenExpiredException,
    ValidationException,
)

__all__ = [
    "get_password_hash", "verify_password", "verify_against_dummy",
    "validate_name", "validate_password", "normalize_and_validated_email",
    "create_access_token", "verify_token",
    "AuthException", "InvalidCredentialsException", "UserAlreadyExistsException",
    "UserNotFoundException", "NotAuthenticatedException", "TokenExpiredException",
    "ValidationException",
]
