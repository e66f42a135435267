from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

from returns.pipeline import flow
from returns.pointfree import bind
from returns.result import Failure, Result, Success

from blazing_pizza.core.domain.model.errors import OrderError
from blazing_pizza.core.domain.model.pizza import Pizza
from blazing_pizza.core.domain.model.price import sum_prices
from blazing_pizza.core.domain.service.configure_pizza import configure_pizzas
from blazing_pizza.core.domain.service.validation import validate_pizza_lines
from blazing_pizza.core.ports.inbound.quote_order import (
    OrderQuote,
    QuoteLine,
    QuoteOrderCommand,
    QuoteOrderUseCase,
)
from blazing_pizza.core.ports.outbound.menu import MenuCatalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuoteOrderDeps:
    menu: MenuCatalog


@dataclass(frozen=True)
class QuoteOrderService(QuoteOrderUseCase):
    deps: QuoteOrderDeps

    def quote_order(self, command: QuoteOrderCommand) -> Result[OrderQuote, OrderError]:
        result = flow(
            command.pizzas,
            validate_pizza_lines,
            bind(lambda lines: configure_pizzas(self.deps.menu, lines)),
            bind(_to_quote),
        )
        if isinstance(result, Failure):
            logger.warning("quote rejected: %s", result.failure())
        return result


def _to_quote(pizzas: Tuple[Pizza, ...]) -> Result[OrderQuote, OrderError]:
    lines = []
    for pizza in pizzas:
        priced = pizza.get_total_price()
        if isinstance(priced, Failure):
            return priced
        lines.append(_to_line(pizza, priced.unwrap()))
    return Success(OrderQuote(tuple(lines), sum_prices(ln.total for ln in lines)))


def _to_line(pizza: Pizza, total: Decimal) -> QuoteLine:
    return QuoteLine(
        special_name=pizza.special.name if pizza.special else "",
        size=pizza.size,
        topping_names=tuple(pt.topping.name for pt in pizza.toppings if pt.topping),
        total=total,
    )
