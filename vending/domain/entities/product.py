"""
Product entities sold by the machine.

Uses Pydantic for validation; the concrete kinds form a union
discriminated by the ``kind`` field.
"""

from abc import ABC, abstractmethod
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class Product(BaseModel, ABC):
    """
    Common shape of every product.

    Attributes:
        id: Unique catalog identifier, e.g. ``"D1"``.
        name: Display name.
        cost: Price in whole kronor.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Catalog identifier")
    name: str = Field(..., min_length=1, description="Display name")
    cost: int = Field(..., gt=0, description="Price in kronor")

    @field_validator("id", "name", mode="before")
    @classmethod
    def clean_string(cls, v: str) -> str:
        if isinstance(v, str):
            return " ".join(v.split())
        return v

    @abstractmethod
    def describe(self) -> str:
        """Human readable description of the product."""

    @abstractmethod
    def use(self) -> str:
        """Message shown once the product has been bought."""

    def summary(self) -> str:
        return f"Id: {self.id}, Name: {self.name}, Cost: {self.cost} kr"


class Drink(Product):
    kind: Literal["drink"] = "drink"
    flavor: str = Field(..., min_length=1)

    def describe(self) -> str:
        return (
            f"Drink: {self.name}, Flavor: {self.flavor}, Cost: {self.cost} kr"
        )

    def use(self) -> str:
        return f"Enjoy your {self.flavor} drink!"


class Snack(Product):
    kind: Literal["snack"] = "snack"
    type: str = Field(..., min_length=1)

    def describe(self) -> str:
        return f"Snack: {self.name}, Type: {self.type}, Cost: {self.cost} kr"

    def use(self) -> str:
        return f"Enjoy your {self.type} snack!"


class Toy(Product):
    kind: Literal["toy"] = "toy"
    category: str = Field(..., min_length=1)

    def describe(self) -> str:
        return (
            f"Toy: {self.name}, Category: {self.category}, "
            f"Cost: {self.cost} kr"
        )

    def use(self) -> str:
        return f"Play with your {self.category} toy!"


AnyProduct = Annotated[Union[Drink, Snack, Toy], Field(discriminator="kind")]

ProductAdapter: TypeAdapter[AnyProduct] = TypeAdapter(AnyProduct)
