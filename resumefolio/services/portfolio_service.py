import uuid
from sqlalchemy.exc import IntegrityError

from ..database.models import Portfolio
from ..database.repositories.portfolio_repository import PortfolioRepository
from ..dto.portfolio import PortfolioIn
from ..core.logger import logger
from .exceptions import PortfolioConflictError, PortfolioNotFoundError, InvalidUserIdError


def parse_user_id(raw_id: str) -> str:
    """Canonical form of a public user id, or ``InvalidUserIdError``."""
    try:
        return str(uuid.UUID(str(raw_id)))
    except (ValueError, AttributeError, TypeError):
        raise InvalidUserIdError("Invalid User ID format.")


class PortfolioService:
    def __init__(self, portfolio_repo: PortfolioRepository):
        self.portfolio_repo = portfolio_repo
    
    def save_portfolio(self, user_id: str, data: PortfolioIn) -> Portfolio:
        """Create or fully replace the owner's portfolio.

        Every editable field is taken from ``data``; anything the caller
        left out is cleared rather than kept from the stored document.
        """
        fields = data.to_fields()
        
        existing = self.portfolio_repo.get_by_user_id(user_id)
        if existing is None:
            try:
                portfolio = self.portfolio_repo.create(user_id, fields)
                logger.info(f"Portfolio created for user {user_id}")
                return portfolio
            except IntegrityError:
                existing = self.portfolio_repo.get_by_user_id(user_id)
                if existing is None:
                    raise PortfolioConflictError("Portfolio is being saved concurrently, try again")
                logger.info(f"Retrying portfolio save as update for user {user_id}")
        
        portfolio = self.portfolio_repo.replace(existing, fields)
        logger.info(f"Portfolio updated for user {user_id}")
        return portfolio
    
    def get_own_portfolio(self, user_id: str) -> Portfolio:
        portfolio = self.portfolio_repo.get_by_user_id(user_id)
        if not portfolio:
            raise PortfolioNotFoundError("Portfolio not found for this user.")
        return portfolio
    
    def get_public_portfolio(self, raw_user_id: str) -> Portfolio:
        user_id = parse_user_id(raw_user_id)
        portfolio = self.portfolio_repo.get_by_user_id(user_id)
        if not portfolio:
            raise PortfolioNotFoundError("Portfolio not found for the given user ID.")
        return portfolio
