from __future__ import annotations

from decimal import Decimal

from returns.result import Failure

from blazing_pizza.core.domain.model.errors import MissingReference
from blazing_pizza.core.domain.model.order import Address, Order, OrderId, UserId
from blazing_pizza.core.domain.model.pizza import Pizza, PizzaTopping
from builders import PLACED_AT, make_pizza


def _order(*pizzas: Pizza) -> Order:
    return Order(
        order_id=OrderId.new(),
        user_id=UserId("u-1"),
        created_at=PLACED_AT,
        delivery_address=Address(
            name="Ada", line1="1 Main St", city="Leeds", region="WY", postal_code="LS1"
        ),
        pizzas=pizzas,
    )


def _sum_of_pizzas(order: Order) -> Decimal:
    return sum((p.get_total_price().unwrap() for p in order.pizzas), Decimal(0))


def test_empty_order_total_is_zero():
    order = _order()

    assert order.get_total_price().unwrap() == 0
    assert order.get_formatted_total_price().unwrap() == "0.00"


def test_single_pizza_order_total_equals_pizza_total():
    pizza = make_pizza(12, "10.00", "1.00")
    order = _order(pizza)

    assert order.get_total_price().unwrap() == pizza.get_total_price().unwrap()
    assert order.get_formatted_total_price().unwrap() == "11.00"


def test_identical_pizzas_sum():
    order = _order(*(make_pizza(12, "10.00", "1.00") for _ in range(4)))

    assert order.get_total_price().unwrap() == Decimal("44.00")
    assert order.get_formatted_total_price().unwrap() == "44.00"


def test_mixed_sizes_and_toppings_sum():
    order = _order(
        make_pizza(9, "8.00"),
        make_pizza(17, "12.00", "0.50", "0.50"),
        make_pizza(12, "10.00", "1.00"),
        make_pizza(12, "10.00"),
    )

    assert order.get_total_price().unwrap() == _sum_of_pizzas(order)
    assert order.get_formatted_total_price().unwrap() == "45.00"


def test_order_total_propagates_missing_special():
    order = _order(make_pizza(12, "10.00", "1.00"), Pizza(special=None))

    result = order.get_total_price()

    assert isinstance(result, Failure)
    assert isinstance(result.failure(), MissingReference)
    assert "special" in str(result.failure())


def test_order_total_propagates_missing_topping():
    bad = Pizza(
        special=make_pizza(12, "9.99").special,
        toppings=make_pizza(12, "0", "1.00").toppings + (PizzaTopping(None),),
    )
    order = _order(bad, make_pizza(12, "10.00"))

    result = order.get_formatted_total_price()

    assert isinstance(result, Failure)
    assert result.failure().field == "topping"
