import secrets
from passlib.context import CryptContext

pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
    argon2__rounds=10,
)

# verified against when the e-mail is unknown so both login failures cost the same
_DUMMY_HASH = pwd_context.hash(secrets.token_urlsafe(32))


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def verify_against_dummy(plain_password: str) -> bool:
    pwd_context.verify(plain_password, _DUMMY_HASH)
    return False
