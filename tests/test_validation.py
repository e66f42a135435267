from dataclasses import replace

import pytest
from returns.result import Failure, Success

from blazing_pizza.core.domain.model.errors import ValidationError
from blazing_pizza.core.domain.service.validation import (
    validate_address,
    validate_pizza_lines,
    validate_place_order,
)
from blazing_pizza.core.ports.inbound.place_order import PlaceOrderCommand
from blazing_pizza.core.ports.inbound.quote_order import ConfigurePizzaLine


def _message(result) -> str:
    assert isinstance(result, Failure)
    assert isinstance(result.failure(), ValidationError)
    return str(result.failure())


def test_lines_within_bounds_pass():
    lines = (
        ConfigurePizzaLine(special_id=1, size=9),
        ConfigurePizzaLine(special_id=2, size=17, topping_ids=(1, 2, 3, 4, 5, 6)),
    )

    assert validate_pizza_lines(lines) == Success(lines)


@pytest.mark.parametrize(
    "lines, fragment",
    [
        ((), "at least one pizza"),
        ((ConfigurePizzaLine(special_id=1, size=8),), "pizzas[0].size"),
        (
            (ConfigurePizzaLine(special_id=1), ConfigurePizzaLine(special_id=1, size=18)),
            "pizzas[1].size",
        ),
        (
            (ConfigurePizzaLine(special_id=1, topping_ids=(1, 2, 3, 4, 5, 6, 7)),),
            "more than 6 toppings",
        ),
        ((ConfigurePizzaLine(special_id=1, topping_ids=(2, 2)),), "must not repeat"),
    ],
)
def test_invalid_lines(lines, fragment):
    assert fragment in _message(validate_pizza_lines(lines))


def test_address_line2_is_optional(address):
    assert validate_address(address) == Success(address)


@pytest.mark.parametrize(
    "changes, fragment",
    [
        ({"name": "  "}, "address.name is required"),
        ({"city": ""}, "address.city is required"),
        ({"postal_code": ""}, "address.postal_code is required"),
        ({"region": "R" * 21}, "address.region must be at most 20"),
        ({"line2": "x" * 101}, "address.line2 must be at most 100"),
    ],
)
def test_invalid_address(address, changes, fragment):
    assert fragment in _message(validate_address(replace(address, **changes)))


def test_place_order_requires_user(address):
    cmd = PlaceOrderCommand(
        user_id=" ", pizzas=(ConfigurePizzaLine(special_id=1),), address=address
    )

    assert _message(validate_place_order(cmd)) == "user_id is required"


def test_place_order_checks_pizzas_before_address(address):
    cmd = PlaceOrderCommand(user_id="u-1", pizzas=(), address=replace(address, city=""))

    assert "at least one pizza" in _message(validate_place_order(cmd))
