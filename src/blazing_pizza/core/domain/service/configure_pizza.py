from __future__ import annotations

from typing import Sequence, Tuple

from returns.result import Failure, Result, Success

from blazing_pizza.core.domain.model.errors import OrderError
from blazing_pizza.core.domain.model.pizza import Pizza, PizzaTopping
from blazing_pizza.core.ports.inbound.quote_order import ConfigurePizzaLine
from blazing_pizza.core.ports.outbound.menu import MenuCatalog


def configure_pizza(
    menu: MenuCatalog, line: ConfigurePizzaLine
) -> Result[Pizza, OrderError]:
    """Resolve a configured line against the menu into a ``Pizza``."""
    special = menu.get_special(line.special_id)
    if isinstance(special, Failure):
        return special

    toppings = []
    for topping_id in line.topping_ids:
        topping = menu.get_topping(topping_id)
        if isinstance(topping, Failure):
            return topping
        toppings.append(PizzaTopping(topping=topping.unwrap()))

    return Success(
        Pizza(special=special.unwrap(), size=line.size, toppings=tuple(toppings))
    )


def configure_pizzas(
    menu: MenuCatalog, lines: Sequence[ConfigurePizzaLine]
) -> Result[Tuple[Pizza, ...], OrderError]:
    pizzas = []
    for line in lines:
        pizza = configure_pizza(menu, line)
        if isinstance(pizza, Failure):
            return pizza
        pizzas.append(pizza.unwrap())
    return Success(tuple(pizzas))
