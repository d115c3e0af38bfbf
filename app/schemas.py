# app/schemas.py
from pydantic import AliasChoices, AllowInfNan, BaseModel, Field, Strict
from typing import Annotated, Optional, List

# JSON numbers only: no "1.5" strings or booleans, no NaN/Infinity
Price = Annotated[float, Strict(), AllowInfNan(False)]


# Both fields are optional in the schema so a missing field gets the
# 400 missing-fields message instead of a validation error.
# The Spanish keys are accepted on input only; responses always use name/price.
class ProductIn(BaseModel):
    name: Optional[str] = Field(default=None, validation_alias=AliasChoices("name", "nombre"))
    price: Optional[Price] = Field(default=None, validation_alias=AliasChoices("price", "precio"))

    def is_complete(self) -> bool:
        return bool(self.name) and self.price is not None


class ProductOut(BaseModel):
    id: int
    name: str
    price: float


class ProductDetail(BaseModel):
    product: ProductOut


class ProductSaved(BaseModel):
    message: str
    product: ProductOut


class ProductList(BaseModel):
    products: List[ProductOut]


class Message(BaseModel):
    message: str
