from __future__ import annotations

from typing import Sequence

from returns.result import Failure, Result, Success

from blazing_pizza.core.domain.model.errors import OrderError, ValidationError
from blazing_pizza.core.domain.model.pizza import (
    MAXIMUM_SIZE,
    MAXIMUM_TOPPINGS,
    MINIMUM_SIZE,
)
from blazing_pizza.core.ports.inbound.place_order import AddressLine, PlaceOrderCommand
from blazing_pizza.core.ports.inbound.quote_order import ConfigurePizzaLine

# field -> max length; all but line2 are required
ADDRESS_LIMITS = {
    "name": 100,
    "line1": 100,
    "line2": 100,
    "city": 50,
    "region": 20,
    "postal_code": 20,
}
OPTIONAL_ADDRESS_FIELDS = {"line2"}


def validate_pizza_lines(
    lines: Sequence[ConfigurePizzaLine],
) -> Result[Sequence[ConfigurePizzaLine], OrderError]:
    if not lines:
        return Failure(ValidationError("at least one pizza is required"))
    for i, ln in enumerate(lines):
        if not MINIMUM_SIZE <= ln.size <= MAXIMUM_SIZE:
            return Failure(
                ValidationError(
                    f"pizzas[{i}].size must be between {MINIMUM_SIZE} and {MAXIMUM_SIZE}"
                )
            )
        if len(ln.topping_ids) > MAXIMUM_TOPPINGS:
            return Failure(
                ValidationError(
                    f"pizzas[{i}] has more than {MAXIMUM_TOPPINGS} toppings"
                )
            )
        if len(set(ln.topping_ids)) != len(ln.topping_ids):
            return Failure(
                ValidationError(f"pizzas[{i}].topping_ids must not repeat a topping")
            )
    return Success(lines)


def validate_address(address: AddressLine) -> Result[AddressLine, OrderError]:
    for name, limit in ADDRESS_LIMITS.items():
        value = getattr(address, name)
        if name not in OPTIONAL_ADDRESS_FIELDS and not value.strip():
            return Failure(ValidationError(f"address.{name} is required"))
        if len(value) > limit:
            return Failure(
                ValidationError(f"address.{name} must be at most {limit} characters")
            )
    return Success(address)


def validate_user_id(cmd: PlaceOrderCommand) -> Result[PlaceOrderCommand, OrderError]:
    if not cmd.user_id.strip():
        return Failure(ValidationError("user_id is required"))
    return Success(cmd)


def validate_place_order(
    cmd: PlaceOrderCommand,
) -> Result[PlaceOrderCommand, OrderError]:
    return (
        Success(cmd)
        .bind(validate_user_id)
        .bind(lambda c: validate_pizza_lines(c.pizzas).map(lambda _: c))
        .bind(lambda c: validate_address(c.address).map(lambda _: c))
    )
