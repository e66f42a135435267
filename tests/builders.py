from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from returns.result import Failure, Result, Success

from blazing_pizza.core.domain.model.errors import OrderError, PublishError
from blazing_pizza.core.domain.model.menu import PizzaSpecial, Topping
from blazing_pizza.core.domain.model.pizza import Pizza, PizzaTopping
from blazing_pizza.core.ports.outbound.events import OrderPlaced

PLACED_AT = datetime(2024, 5, 1, 18, 30, tzinfo=timezone.utc)


@dataclass
class RecordingEventPublisher:
    fail: bool = False
    events: list[OrderPlaced] = field(default_factory=list)

    def publish(self, event: OrderPlaced) -> Result[None, OrderError]:
        if self.fail:
            return Failure(PublishError(message="publisher is down"))
        self.events.append(event)
        return Success(None)


def make_toppings(*prices: str) -> tuple[PizzaTopping, ...]:
    return tuple(
        PizzaTopping(topping=Topping(id=i + 1, name=f"T{i + 1}", price=Decimal(p)))
        for i, p in enumerate(prices)
    )


def make_pizza(size: int, base_price: str, *topping_prices: str) -> Pizza:
    return Pizza(
        special=PizzaSpecial(id=1, name="House special", base_price=Decimal(base_price)),
        size=size,
        toppings=make_toppings(*topping_prices),
    )
