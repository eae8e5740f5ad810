from typing import Any, Dict, List
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ..dto.portfolio import PortfolioResponse
from ..templates import TEMPLATE_CATALOG
from .exceptions import TemplateNotFoundError


class RenderService:
    def __init__(self, templates: Jinja2Templates):
        self.templates = templates

    def list_templates(self) -> List[Dict[str, str]]:
        return [{"id": template_id, "name": name} for template_id, (name, _) in TEMPLATE_CATALOG.items()]

    def template_name(self, template_id: str) -> str:
        entry = TEMPLATE_CATALOG.get(str(template_id))
        if entry is None:
            raise TemplateNotFoundError("Template not found.")
        return entry[1]

    def build_context(self, portfolio: PortfolioResponse, template_id: str) -> Dict[str, Any]:
        return {
            "portfolio": portfolio.model_dump(),
            "template_id": str(template_id),
            "template_title": TEMPLATE_CATALOG[str(template_id)][0],
        }

    def render_html(self, template_id: str, portfolio: PortfolioResponse) -> str:
        name = self.template_name(template_id)
        return self.templates.get_template(name).render(self.build_context(portfolio, template_id))

    def render_portfolio(self, template_id: str, portfolio: PortfolioResponse) -> HTMLResponse:
        return HTMLResponse(self.render_html(template_id, portfolio))
