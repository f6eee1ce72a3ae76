"""Pydantic schemas for the product API.

Request and response bodies are the flat record: {"id", "name", "category"}.
A field that is missing or null binds as "" (the row is still inserted);
a field holding a non-string value is rejected.
"""

from pydantic import BaseModel, ConfigDict, field_validator

from src.sf_product.domain.models import Product


class CreateProductRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    id: str = ""
    name: str = ""
    category: str = ""

    @field_validator("id", "name", "category", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return "" if value is None else value

    def to_domain(self) -> Product:
        return Product(id=self.id, name=self.name, category=self.category)


class ProductResponse(BaseModel):
    id: str
    name: str
    category: str

    @classmethod
    def from_domain(cls, product: Product) -> "ProductResponse":
        return cls(id=product.id, name=product.name, category=product.category)
