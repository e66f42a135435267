from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Protocol, Sequence

from returns.result import Result

from blazing_pizza.core.domain.model.errors import OrderError
from blazing_pizza.core.domain.model.pizza import DEFAULT_SIZE


@dataclass(frozen=True)
class ConfigurePizzaLine:
    special_id: int
    size: int = DEFAULT_SIZE
    topping_ids: Sequence[int] = field(default_factory=tuple)


@dataclass(frozen=True)
class QuoteOrderCommand:
    pizzas: Sequence[ConfigurePizzaLine]


@dataclass(frozen=True)
class QuoteLine:
    special_name: str
    size: int
    topping_names: Sequence[str]
    total: Decimal


@dataclass(frozen=True)
class OrderQuote:
    lines: Sequence[QuoteLine]
    total: Decimal


class QuoteOrderUseCase(Protocol):
    def quote_order(self, command: QuoteOrderCommand) -> Result[OrderQuote, OrderError]: ...
