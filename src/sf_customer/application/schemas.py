"""Pydantic schemas for the customer API: {"id", "name", "gender"}.

Missing or null fields bind as "", matching the product request.
"""

from pydantic import BaseModel, ConfigDict, field_validator

from src.sf_customer.domain.models import Customer


class CreateCustomerRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    id: str = ""
    name: str = ""
    gender: str = ""

    @field_validator("id", "name", "gender", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return "" if value is None else value

    def to_domain(self) -> Customer:
        return Customer(id=self.id, name=self.name, gender=self.gender)


class CustomerResponse(BaseModel):
    id: str
    name: str
    gender: str

    @classmethod
    def from_domain(cls, customer: Customer) -> "CustomerResponse":
        return cls(id=customer.id, name=customer.name, gender=customer.gender)
