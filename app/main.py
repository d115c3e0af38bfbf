# app/main.py
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
import uvicorn

from . import pages, products
from .config import get_settings
from .database import create_store, init_store
from .errors import register_error_handlers

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level)
    engine, session_maker = create_store(settings.database_url, echo=settings.sql_echo)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_maker = session_maker
    # a store that can't be opened is logged, the service still starts
    app.state.store_ready = await init_store(engine)
    try:
        yield
    finally:
        await engine.dispose()


app = FastAPI(
    title="Product Catalog",
    description="CRUD API de productos sobre SQLite",
    version="1.0.0",
    lifespan=lifespan,
)

# Absolute path to /static
BASE_DIR = Path(__file__).resolve().parent.parent
STATIC_DIR = BASE_DIR / "static"
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# CORS: the catalog page may be served from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Routers
app.include_router(products.router)
app.include_router(pages.router)


@app.get("/")
async def root():
    return {"message": "¡Bienvenido a la API de Productos con FastAPI y SQLite!"}


if __name__ == "__main__":
    settings = get_settings()
    logger.info("Servidor corriendo en http://localhost:%s", settings.port)
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
