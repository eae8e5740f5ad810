import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import ExpiredSignatureError, JWTError, jwt
from ..config import settings
from ..core.logger import logger
from .exceptions import NotAuthenticatedException, TokenExpiredException

TOKEN_ISSUER = "resumefolio-auth"
TOKEN_AUDIENCE = "resumefolio-app"


def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    
    payload = {
        "sub": str(user_id),
        "exp": expire,
        "iat": now,
        "jti": secrets.token_urlsafe(16),
        "type": "access",
        "iss": TOKEN_ISSUER,
        "aud": TOKEN_AUDIENCE,
    }
    
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_token(token: Optional[str]) -> str:
    """Return the user id embedded in ``token``.

    Raises ``TokenExpiredException`` for a correctly signed token past its
    ``exp`` and ``NotAuthenticatedException`` for anything else that fails.
    """
    if not token:
        raise NotAuthenticatedException("Please authenticate using a valid token")
    
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            issuer=TOKEN_ISSUER,
            audience=TOKEN_AUDIENCE,
        )
    except ExpiredSignatureError:
        raise TokenExpiredException("Session expired, please log in again")
    except JWTError as e:
        logger.warning(f"JWT decoding error: {e}")
        raise NotAuthenticatedException("Please authenticate using a valid token")
    
    if payload.get("type") != "access" or not payload.get("sub"):
        raise NotAuthenticatedException("Please authenticate using a valid token")
    
    return payload["sub"]
