class AuthException(Exception):
    """Base class for account and session errors."""

    pass


class InvalidCredentialsException(AuthException):
    """Unknown e-mail or wrong password."""

    pass


class UserAlreadyExistsException(AuthException):
    """An account with this e-mail is already registered."""

    pass


class UserNotFoundException(AuthException):
    """The token points at an account that no longer exists."""

    pass


class NotAuthenticatedException(AuthException):
    """Missing, malformed or forged session token."""

    pass


class TokenExpiredException(NotAuthenticatedException):
    """Session token is well-formed but past its expiry."""

    pass


class ValidationException(AuthException):
    """Account fields failed validation."""

    pass
