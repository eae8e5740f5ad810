from typing import Any, Dict, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from ..models.portfolio import Portfolio
from ...core.logger import logger


class PortfolioRepository:
    def __init__(self, db: Session):
        self.db = db
    
    def get_by_user_id(self, user_id: str) -> Optional[Portfolio]:
        return self.db.query(Portfolio).filter(Portfolio.user_id == user_id).first()
    
    def create(self, user_id: str, fields: Dict[str, Any]) -> Portfolio:
        """Insert the first portfolio for ``user_id``.

        The unique constraint on ``user_id`` rejects a second insert; the
        ``IntegrityError`` is re-raised after rollback so the caller can
        fall back to updating the row that won.
        """
        portfolio = Portfolio(user_id=user_id, **fields)
        self.db.add(portfolio)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning(f"Portfolio insert lost a race for user {user_id}")
            raise
        self.db.refresh(portfolio)
        return portfolio
    
    def replace(self, portfolio: Portfolio, fields: Dict[str, Any]) -> Portfolio:
        for key, value in fields.items():
            setattr(portfolio, key, value)
        self.db.commit()
        self.db.refresh(portfolio)
        return portfolio
