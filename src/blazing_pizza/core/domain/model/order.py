from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Tuple
from uuid import UUID, uuid4

from returns.result import Failure, Result, Success

from blazing_pizza.core.domain.model.errors import PricingError
from blazing_pizza.core.domain.model.pizza import Pizza
from blazing_pizza.core.domain.model.price import ZERO, format_price


@dataclass(frozen=True)
class OrderId:
    value: UUID

    @staticmethod
    def new() -> "OrderId":
        return OrderId(uuid4())


@dataclass(frozen=True)
class UserId:
    value: str


@dataclass(frozen=True)
class Address:
    name: str
    line1: str
    city: str
    region: str
    postal_code: str
    line2: str = ""


@dataclass(frozen=True)
class Order:
    order_id: OrderId
    user_id: UserId
    created_at: datetime
    delivery_address: Address
    pizzas: Tuple[Pizza, ...] = ()

    def get_total_price(self) -> Result[Decimal, PricingError]:
        return total_price(self.pizzas)

    def get_formatted_total_price(self) -> Result[str, PricingError]:
        return self.get_total_price().map(format_price)


def total_price(pizzas: Tuple[Pizza, ...]) -> Result[Decimal, PricingError]:
    """Sum of the pizzas' totals; the first pricing failure wins."""
    total = ZERO
    for pizza in pizzas:
        priced = pizza.get_total_price()
        if isinstance(priced, Failure):
            return priced
        total = total + priced.unwrap()
    return Success(total)


def now_utc() -> datetime:
    return datetime.now(timezone.utc)
