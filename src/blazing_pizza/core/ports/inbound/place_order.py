from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol, Sequence

from returns.result import Result

from blazing_pizza.core.domain.model.errors import OrderError
from blazing_pizza.core.domain.model.order import OrderId, UserId
from blazing_pizza.core.ports.inbound.quote_order import ConfigurePizzaLine


@dataclass(frozen=True)
class AddressLine:
    name: str
    line1: str
    city: str
    region: str
    postal_code: str
    line2: str = ""


@dataclass(frozen=True)
class PlaceOrderCommand:
    user_id: str
    pizzas: Sequence[ConfigurePizzaLine]
    address: AddressLine


@dataclass(frozen=True)
class OrderReceipt:
    order_id: OrderId
    user_id: UserId
    total: Decimal
    status: str


class PlaceOrderUseCase(Protocol):
    def place_order(
        self, command: PlaceOrderCommand
    ) -> Result[OrderReceipt, OrderError]: ...
