from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

BASE_DIR = Path(__file__).resolve().parent.parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
router = APIRouter()


# Страница каталога: список товаров и форма добавления
@router.get("/catalog", response_class=HTMLResponse)
async def catalog_page(request: Request):
    ctx = {"api_base_url": request.app.state.settings.api_base_url}
    return templates.TemplateResponse(request, "catalog.html", ctx)
