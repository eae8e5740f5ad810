from fastapi.templating import Jinja2Templates
from pathlib import Path

BASE_DIR = Path(__file__).parent.parent
TEMPLATES_DIR = BASE_DIR / "front" / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

TEMPLATE_CATALOG = {
    "1": ("Modern & Clean", "portfolio/template1.html"),
    "2": ("Minimalist & Professional", "portfolio/template2.html"),
    "3": ("Clean & Structured", "portfolio/template3.html"),
    "4": ("Dark & Dynamic", "portfolio/template4.html"),
    "5": ("Minimalist B&W", "portfolio/template5.html"),
    "6": ("Classy Gradients", "portfolio/template6.html"),
}
