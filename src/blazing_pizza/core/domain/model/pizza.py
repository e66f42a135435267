from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

from returns.result import Failure, Result, Success

from blazing_pizza.core.domain.model.errors import MissingReference, PricingError
from blazing_pizza.core.domain.model.menu import PizzaSpecial, Topping
from blazing_pizza.core.domain.model.price import format_price, sum_prices

DEFAULT_SIZE = 12
MINIMUM_SIZE = 9
MAXIMUM_SIZE = 17
MAXIMUM_TOPPINGS = 6


@dataclass(frozen=True)
class PizzaTopping:
    topping: Topping | None


@dataclass(frozen=True)
class Pizza:
    """A customized order line: a special at some size, plus toppings.

    ``special`` and each ``PizzaTopping.topping`` may be ``None`` while a
    pizza is being assembled; pricing such a pizza yields a
    ``MissingReference`` failure instead of a defaulted price.
    """

    special: PizzaSpecial | None
    size: int = DEFAULT_SIZE
    toppings: Tuple[PizzaTopping, ...] = ()

    def get_base_price(self) -> Result[Decimal, PricingError]:
        if self.special is None:
            return Failure(
                MissingReference(message="pizza.special is required", field="special")
            )
        scale = Decimal(self.size) / Decimal(DEFAULT_SIZE)
        return Success(scale * self.special.base_price)

    def get_total_price(self) -> Result[Decimal, PricingError]:
        return self.get_base_price().bind(
            lambda base: self._toppings_price().map(lambda tops: base + tops)
        )

    def get_formatted_total_price(self) -> Result[str, PricingError]:
        return self.get_total_price().map(format_price)

    def _toppings_price(self) -> Result[Decimal, PricingError]:
        for i, pt in enumerate(self.toppings):
            if pt.topping is None:
                return Failure(
                    MissingReference(
                        message=f"toppings[{i}].topping is required", field="topping"
                    )
                )
        return Success(sum_prices(pt.topping.price for pt in self.toppings))
