from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from ..models.user import User
from ...auth.exceptions import UserAlreadyExistsException
from ...auth.security import get_password_hash, verify_password, verify_against_dummy
from ...core.logger import logger


class UserRepository:
    def __init__(self, db: Session):
        self.db = db
    
    def get_by_id(self, user_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()
    
    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()
    
    def email_exists(self, email: str) -> bool:
        return self.get_by_email(email) is not None
    
    def create(self, name: str, email: str, password: str) -> User:
        user = User(
            name=name.strip(),
            email=email,
            hashed_password=get_password_hash(password),
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning(f"Email already exists: {email}")
            raise UserAlreadyExistsException("Sorry, a user with this email already exists")
        self.db.refresh(user)
        logger.info(f"User created successfully: {user.id}")
        return user
    
    def verify_credentials(self, email: str, password: str) -> Optional[User]:
        user = self.get_by_email(email)
        if not user:
            verify_against_dummy(password)
            return None
        if verify_password(password, user.hashed_password):
            return user
        return None
