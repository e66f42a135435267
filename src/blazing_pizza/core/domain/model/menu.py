from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from blazing_pizza.core.domain.model.price import format_price

DEFAULT_IMAGE_URL = "img/pizzas/cheese.jpg"


@dataclass(frozen=True)
class PizzaSpecial:
    """A pre-configured template for a pizza a user can order."""

    id: int
    name: str
    base_price: Decimal
    description: str = ""
    image_url: str = DEFAULT_IMAGE_URL

    def get_formatted_base_price(self) -> str:
        return format_price(self.base_price)


@dataclass(frozen=True)
class Topping:
    id: int
    name: str
    price: Decimal

    def get_formatted_price(self) -> str:
        return format_price(self.price)
