from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from returns.result import Result

from blazing_pizza.core.domain.model.errors import OrderError


@dataclass(frozen=True)
class SpecialView:
    id: int
    name: str
    description: str
    base_price: str  # formatted "0.00"
    image_url: str


@dataclass(frozen=True)
class ToppingView:
    id: int
    name: str
    price: str  # formatted "0.00"


@dataclass(frozen=True)
class MenuView:
    specials: Sequence[SpecialView]
    toppings: Sequence[ToppingView]


class ListMenuUseCase(Protocol):
    def list_menu(self) -> Result[MenuView, OrderError]: ...
