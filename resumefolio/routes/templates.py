from fastapi import APIRouter, Depends

from ..dto.portfolio import PortfolioResponse
from ..services.portfolio_service import PortfolioService
from ..services.render_service import RenderService
from ..dependencies.auth_dependencies import get_current_user_id
from ..dependencies.portfolio_dependencies import get_portfolio_service
from ..dependencies.render_dependencies import get_render_service

router = APIRouter()


@router.get("/api/templates")
def list_templates(render_service: RenderService = Depends(get_render_service)):
    return render_service.list_templates()


@router.get("/templates/{template_id}")
def own_template(
    template_id: str,
    user_id: str = Depends(get_current_user_id),
    portfolio_service: PortfolioService = Depends(get_portfolio_service),
    render_service: RenderService = Depends(get_render_service),
):
    render_service.template_name(template_id)
    portfolio = portfolio_service.get_own_portfolio(user_id)
    return render_service.render_portfolio(template_id, PortfolioResponse.model_validate(portfolio))


@router.get("/public-template/{template_id}/{user_id}")
def public_template(
    template_id: str,
    user_id: str,
    portfolio_service: PortfolioService = Depends(get_portfolio_service),
    render_service: RenderService = Depends(get_render_service),
):
    render_service.template_name(template_id)
    portfolio = portfolio_service.get_public_portfolio(user_id)
    return render_service.render_portfolio(template_id, PortfolioResponse.model_validate(portfolio))
