from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ..dto.auth import AuthTokenResponse, CreateUserRequest, LoginRequest, UserResponse
from ..dto.portfolio import PortfolioIn, PortfolioResponse
from ..services.auth_service import AuthService
from ..services.portfolio_service import PortfolioService
from ..dependencies.auth_dependencies import get_auth_service, get_current_user_id
from ..dependencies.portfolio_dependencies import get_portfolio_service
from ..core.logger import logger

router = APIRouter(prefix="/api/auth")


@router.post("/createuser", response_model=AuthTokenResponse, status_code=201)
def create_user(
    payload: CreateUserRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    token = auth_service.register_user(
        name=payload.name,
        email=payload.email,
        password=payload.password,
    )
    return AuthTokenResponse(authtoken=token)


@router.post("/login", response_model=AuthTokenResponse)
def login(
    payload: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    token = auth_service.login_user(email=payload.email, password=payload.password)
    return AuthTokenResponse(authtoken=token)


@router.post("/getuser", response_model=UserResponse)
def get_user(
    user_id: str = Depends(get_current_user_id),
    auth_service: AuthService = Depends(get_auth_service),
):
    return auth_service.get_user(user_id)


@router.post("/portfolio", response_model=PortfolioResponse)
def save_portfolio(
    payload: PortfolioIn,
    user_id: str = Depends(get_current_user_id),
    portfolio_service: PortfolioService = Depends(get_portfolio_service),
):
    return portfolio_service.save_portfolio(user_id, payload)


@router.get("/myportfolio", response_model=PortfolioResponse)
def my_portfolio(
    user_id: str = Depends(get_current_user_id),
    portfolio_service: PortfolioService = Depends(get_portfolio_service),
):
    return portfolio_service.get_own_portfolio(user_id)


@router.get("/portfolio/{user_id}", response_model=PortfolioResponse)
def public_portfolio(
    user_id: str,
    portfolio_service: PortfolioService = Depends(get_portfolio_service),
):
    return portfolio_service.get_public_portfolio(user_id)


@router.get("/cron/ping", response_class=PlainTextResponse)
def cron_ping():
    logger.info("Cron ping received")
    return "Cron job ping received"
