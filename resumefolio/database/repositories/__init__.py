from .user_repository import UserRepository
from .portfolio_repository import PortfolioRepository

__all__ = ["UserRepository", "PortfolioRepository"]
