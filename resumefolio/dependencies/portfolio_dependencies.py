from fastapi import Depends
from sqlalchemy.orm import Session
from ..services.portfolio_service import PortfolioService
from ..database.repositories.portfolio_repository import PortfolioRepository
from ..database import get_db

def get_portfolio_repository(db: Session = Depends(get_db)) -> PortfolioRepository:
    return PortfolioRepository(db)

def get_portfolio_service(
    portfolio_repo: PortfolioRepository = Depends(get_portfolio_repository),
) -> PortfolioService:
    return PortfolioService(portfolio_repo=portfolio_repo)
