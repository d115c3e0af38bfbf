# app/errors.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

MISSING_FIELDS_CREATE = "El nombre y el precio son obligatorios."
MISSING_FIELDS_UPDATE = "El nombre y el precio son obligatorios para la actualización."


class CatalogError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_content(self) -> dict:
        return {"error": self.message}


class MissingProductFields(CatalogError):
    status_code = status.HTTP_400_BAD_REQUEST


class ProductNotFound(CatalogError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, product_id: int):
        super().__init__(f"Producto con id {product_id} no encontrado.")
        self.product_id = product_id

    def to_content(self) -> dict:
        return {"message": self.message}


def store_error_text(exc: SQLAlchemyError) -> str:
    # DBAPIError wraps the driver exception; its text is what the client sees
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Petición inválida."


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_content())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": describe_validation_error(exc)},
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Error de base de datos en %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": store_error_text(exc)},
        )
