from __future__ import annotations

from typing import Protocol, Sequence

from returns.result import Result

from blazing_pizza.core.domain.model.errors import OrderError
from blazing_pizza.core.domain.model.menu import PizzaSpecial, Topping


class MenuCatalog(Protocol):
    def get_special(self, special_id: int) -> Result[PizzaSpecial, OrderError]: ...

    def get_topping(self, topping_id: int) -> Result[Topping, OrderError]: ...

    def list_specials(self) -> Result[Sequence[PizzaSpecial], OrderError]: ...

    def list_toppings(self) -> Result[Sequence[Topping], OrderError]: ...
