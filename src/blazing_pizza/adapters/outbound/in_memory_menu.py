from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Dict, Sequence

from pydantic import BaseModel, Field, model_validator
from returns.result import Failure, Result, Success

from blazing_pizza.core.domain.model.errors import (
    OrderError,
    UnknownSpecial,
    UnknownTopping,
)
from blazing_pizza.core.domain.model.menu import (
    DEFAULT_IMAGE_URL,
    PizzaSpecial,
    Topping,
)
from blazing_pizza.core.ports.outbound.menu import MenuCatalog

# ---- menu file DTOs ---------------------------------------------------------


class SpecialIn(BaseModel):
    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    base_price: Decimal = Field(ge=0)
    description: str = ""
    image_url: str = DEFAULT_IMAGE_URL


class ToppingIn(BaseModel):
    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    price: Decimal = Field(ge=0)


class MenuFile(BaseModel):
    specials: list[SpecialIn] = Field(default_factory=list)
    toppings: list[ToppingIn] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_ids(self) -> "MenuFile":
        for kind, items in (("specials", self.specials), ("toppings", self.toppings)):
            ids = [item.id for item in items]
            if len(set(ids)) != len(ids):
                raise ValueError(f"{kind} ids must be unique")
        return self


# ---- adapter ----------------------------------------------------------------


@dataclass
class InMemoryMenu(MenuCatalog):
    specials_by_id: Dict[int, PizzaSpecial]
    toppings_by_id: Dict[int, Topping]

    def get_special(self, special_id: int) -> Result[PizzaSpecial, OrderError]:
        special = self.specials_by_id.get(special_id)
        if special is None:
            return Failure(
                UnknownSpecial(message="special not on the menu", special_id=special_id)
            )
        return Success(special)

    def get_topping(self, topping_id: int) -> Result[Topping, OrderError]:
        topping = self.toppings_by_id.get(topping_id)
        if topping is None:
            return Failure(
                UnknownTopping(message="topping not on the menu", topping_id=topping_id)
            )
        return Success(topping)

    def list_specials(self) -> Result[Sequence[PizzaSpecial], OrderError]:
        return Success(tuple(self.specials_by_id.values()))

    def list_toppings(self) -> Result[Sequence[Topping], OrderError]:
        return Success(tuple(self.toppings_by_id.values()))

    @staticmethod
    def of(
        specials: Sequence[PizzaSpecial], toppings: Sequence[Topping]
    ) -> "InMemoryMenu":
        return InMemoryMenu(
            specials_by_id={s.id: s for s in specials},
            toppings_by_id={t.id: t for t in toppings},
        )

    @staticmethod
    def from_json(raw: str) -> "InMemoryMenu":
        """Build a menu from JSON text; raises pydantic.ValidationError on bad input."""
        menu = MenuFile.model_validate_json(raw)
        return InMemoryMenu.of(
            specials=[
                PizzaSpecial(
                    id=s.id,
                    name=s.name,
                    base_price=s.base_price,
                    description=s.description,
                    image_url=s.image_url,
                )
                for s in menu.specials
            ],
            toppings=[
                Topping(id=t.id, name=t.name, price=t.price) for t in menu.toppings
            ],
        )

    @staticmethod
    def from_file(path: Path) -> "InMemoryMenu":
        return InMemoryMenu.from_json(path.read_text(encoding="utf-8"))


def default_menu() -> InMemoryMenu:
    D = Decimal
    return InMemoryMenu.of(
        specials=[
            PizzaSpecial(1, "Basic Cheese Pizza", D("9.99"),
                         "It's cheesy and delicious. Why wouldn't you want one?",
                         "img/pizzas/cheese.jpg"),
            PizzaSpecial(2, "The Baconatorizor", D("11.99"),
                         "It has EVERY kind of bacon", "img/pizzas/bacon.jpg"),
            PizzaSpecial(3, "Classic pepperoni", D("10.50"),
                         "It's the pizza you grew up with, but Blazing hot!",
                         "img/pizzas/pepperoni.jpg"),
            PizzaSpecial(4, "Buffalo chicken", D("12.75"),
                         "Spicy chicken, hot sauce and bleu cheese, guaranteed to warm you up",
                         "img/pizzas/meaty.jpg"),
            PizzaSpecial(5, "Mushroom Lovers", D("11.00"),
                         "It has mushrooms. Isn't that obvious?",
                         "img/pizzas/mushroom.jpg"),
            PizzaSpecial(6, "Veggie Delight", D("11.50"),
                         "It's like salad, but on a pizza", "img/pizzas/salad.jpg"),
            PizzaSpecial(7, "Margherita", D("9.99"),
                         "Traditional Italian pizza with tomatoes and basil",
                         "img/pizzas/margherita.jpg"),
        ],
        toppings=[
            Topping(1, "Extra cheese", D("2.50")),
            Topping(2, "American bacon", D("2.99")),
            Topping(3, "Canadian bacon", D("2.99")),
            Topping(4, "Bell peppers", D("1.00")),
            Topping(5, "Onions", D("1.00")),
            Topping(6, "Mushrooms", D("1.00")),
            Topping(7, "Pepperoni", D("1.00")),
            Topping(8, "Artichoke hearts", D("3.40")),
            Topping(9, "Fresh tomatoes", D("1.50")),
            Topping(10, "Basil", D("1.50")),
            Topping(11, "Blazing hot peppers", D("4.20")),
            Topping(12, "Blue cheese", D("2.50")),
        ],
    )
