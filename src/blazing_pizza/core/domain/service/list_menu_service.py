from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from returns.result import Result

from blazing_pizza.core.domain.model.errors import OrderError
from blazing_pizza.core.domain.model.menu import PizzaSpecial, Topping
from blazing_pizza.core.ports.inbound.list_menu import (
    ListMenuUseCase,
    MenuView,
    SpecialView,
    ToppingView,
)
from blazing_pizza.core.ports.outbound.menu import MenuCatalog


@dataclass(frozen=True)
class ListMenuDeps:
    menu: MenuCatalog


@dataclass(frozen=True)
class ListMenuService(ListMenuUseCase):
    deps: ListMenuDeps

    def list_menu(self) -> Result[MenuView, OrderError]:
        return self.deps.menu.list_specials().bind(
            lambda specials: self.deps.menu.list_toppings().map(
                lambda toppings: MenuView(
                    specials=_to_special_views(specials),
                    toppings=_to_topping_views(toppings),
                )
            )
        )


def _to_special_views(specials: Sequence[PizzaSpecial]) -> Sequence[SpecialView]:
    return tuple(
        SpecialView(
            id=s.id,
            name=s.name,
            description=s.description,
            base_price=s.get_formatted_base_price(),
            image_url=s.image_url,
        )
        for s in sorted(specials, key=lambda s: s.base_price, reverse=True)
    )


def _to_topping_views(toppings: Sequence[Topping]) -> Sequence[ToppingView]:
    return tuple(
        ToppingView(id=t.id, name=t.name, price=t.get_formatted_price())
        for t in sorted(toppings, key=lambda t: t.name)
    )
