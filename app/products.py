# app/products.py
import logging

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from .database import get_session
from .errors import (
    MISSING_FIELDS_CREATE,
    MISSING_FIELDS_UPDATE,
    MissingProductFields,
    ProductNotFound,
)
from .models import Product
from .schemas import ProductIn, ProductDetail, ProductList, ProductSaved, Message

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])

# SQLite INTEGER is a signed 64-bit value; larger ids cannot even be bound
ID_RANGE = {"ge": -2**63, "le": 2**63 - 1}


@router.post("", response_model=ProductSaved, status_code=status.HTTP_201_CREATED)
async def create_product(payload: ProductIn, session: AsyncSession = Depends(get_session)):
    if not payload.is_complete():
        raise MissingProductFields(MISSING_FIELDS_CREATE)

    product = Product(name=payload.name, price=payload.price)
    session.add(product)
    await session.commit()
    logger.info("Producto %s creado", product.id)
    return {"message": "Producto creado exitosamente", "product": product.to_dict()}


@router.get("", response_model=ProductList)
async def list_products(session: AsyncSession = Depends(get_session)):
    result = await session.execute(select(Product).order_by(Product.id))
    return {"products": [p.to_dict() for p in result.scalars().all()]}


@router.get("/{product_id}", response_model=ProductDetail)
async def get_product(product_id: int = Path(..., **ID_RANGE), session: AsyncSession = Depends(get_session)):
    product = await session.get(Product, product_id)
    if product is None:
        raise ProductNotFound(product_id)
    return {"product": product.to_dict()}


@router.put("/{product_id}", response_model=ProductSaved)
async def update_product(
    payload: ProductIn,
    product_id: int = Path(..., **ID_RANGE),
    session: AsyncSession = Depends(get_session),
):
    if not payload.is_complete():
        raise MissingProductFields(MISSING_FIELDS_UPDATE)

    result = await session.execute(
        update(Product)
        .where(Product.id == product_id)
        .values(name=payload.name, price=payload.price)
        .execution_options(synchronize_session=False)
    )
    found = result.rowcount > 0
    await session.commit()
    if not found:
        raise ProductNotFound(product_id)

    logger.info("Producto %s actualizado", product_id)
    return {
        "message": f"Producto con id {product_id} actualizado.",
        "product": {"id": product_id, "name": payload.name, "price": payload.price},
    }


@router.delete("/{product_id}", response_model=Message)
async def delete_product(product_id: int = Path(..., **ID_RANGE), session: AsyncSession = Depends(get_session)):
    result = await session.execute(
        delete(Product)
        .where(Product.id == product_id)
        .execution_options(synchronize_session=False)
    )
    found = result.rowcount > 0
    await session.commit()
    if not found:
        raise ProductNotFound(product_id)

    logger.info("Producto %s eliminado", product_id)
    return {"message": f"Producto con id {product_id} eliminado."}
