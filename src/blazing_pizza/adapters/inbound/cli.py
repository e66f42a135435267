from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic import ValidationError as RequestValidationError
from returns.result import Success

from blazing_pizza.core.domain.model.pizza import DEFAULT_SIZE
from blazing_pizza.core.domain.model.price import format_price
from blazing_pizza.core.ports.inbound.list_menu import ListMenuUseCase
from blazing_pizza.core.ports.inbound.place_order import (
    AddressLine,
    PlaceOrderCommand,
    PlaceOrderUseCase,
)
from blazing_pizza.core.ports.inbound.quote_order import (
    ConfigurePizzaLine,
    QuoteOrderCommand,
    QuoteOrderUseCase,
)

# ---- input DTOs (adapter layer) ---------------------------------------------


class PizzaLineIn(BaseModel):
    special_id: int = Field(gt=0, examples=[1])
    size: int = Field(DEFAULT_SIZE, examples=[12])
    topping_ids: list[int] = Field(default_factory=list, examples=[[1, 4]])


class AddressIn(BaseModel):
    name: str
    line1: str
    line2: str = ""
    city: str
    region: str
    postal_code: str


class QuoteRequest(BaseModel):
    pizzas: list[PizzaLineIn] = Field(min_length=1)


class PlaceOrderRequest(BaseModel):
    user_id: str = Field(min_length=1, examples=["u-1"])
    pizzas: list[PizzaLineIn] = Field(min_length=1)
    address: AddressIn


def _to_lines(pizzas: list[PizzaLineIn]) -> tuple[ConfigurePizzaLine, ...]:
    return tuple(
        ConfigurePizzaLine(
            special_id=p.special_id, size=p.size, topping_ids=tuple(p.topping_ids)
        )
        for p in pizzas
    )


def _to_place_command(req: PlaceOrderRequest) -> PlaceOrderCommand:
    a = req.address
    return PlaceOrderCommand(
        user_id=req.user_id,
        pizzas=_to_lines(req.pizzas),
        address=AddressLine(
            name=a.name,
            line1=a.line1,
            line2=a.line2,
            city=a.city,
            region=a.region,
            postal_code=a.postal_code,
        ),
    )


# ---- commands ---------------------------------------------------------------


def run_menu(usecase: ListMenuUseCase, currency: str = "$") -> int:
    result = usecase.list_menu()
    if not isinstance(result, Success):
        print("[ng]", str(result.failure()))
        return 1

    menu = result.unwrap()
    print(
        "[ok]",
        {
            "specials": [
                {"id": s.id, "name": s.name, "base_price": f"{currency}{s.base_price}"}
                for s in menu.specials
            ],
            "toppings": [
                {"id": t.id, "name": t.name, "price": f"{currency}{t.price}"}
                for t in menu.toppings
            ],
        },
    )
    return 0


def run_quote(usecase: QuoteOrderUseCase, raw: str, currency: str = "$") -> int:
    """
    raw: JSON string.
    Example:
      {"pizzas":[{"special_id":3,"size":12,"topping_ids":[1,4]}]}
    """
    try:
        req = QuoteRequest.model_validate_json(raw)
    except RequestValidationError as e:
        print(f"invalid_input: {e.error_count()} error(s): {_first_error(e)}")
        return 2

    cmd = QuoteOrderCommand(pizzas=_to_lines(req.pizzas))
    result = usecase.quote_order(cmd)

    if isinstance(result, Success):
        quote = result.unwrap()
        print(
            "[ok]",
            {
                "lines": [
                    {
                        "special": ln.special_name,
                        "size": ln.size,
                        "toppings": list(ln.topping_names),
                        "total": f"{currency}{format_price(ln.total)}",
                    }
                    for ln in quote.lines
                ],
                "total": f"{currency}{format_price(quote.total)}",
            },
        )
        return 0

    print("[ng]", str(result.failure()))
    return 1


def run_place_order(usecase: PlaceOrderUseCase, raw: str, currency: str = "$") -> int:
    """
    raw: JSON string.
    Example:
      {"user_id":"u-1","pizzas":[{"special_id":1}],
       "address":{"name":"Ann","line1":"1 Main St","city":"Leeds",
                  "region":"WY","postal_code":"LS1"}}
    """
    try:
        cmd = _to_place_command(PlaceOrderRequest.model_validate_json(raw))
    except RequestValidationError as e:
        print(f"invalid_input: {e.error_count()} error(s): {_first_error(e)}")
        return 2

    result = usecase.place_order(cmd)

    if isinstance(result, Success):
        receipt = result.unwrap()
        print(
            "[ok]",
            {
                "order_id": str(receipt.order_id.value),
                "user_id": receipt.user_id.value,
                "total": f"{currency}{format_price(receipt.total)}",
                "status": receipt.status,
            },
        )
        return 0

    print("[ng]", str(result.failure()))
    return 1


def _first_error(e: RequestValidationError) -> str:
    err: dict[str, Any] = e.errors()[0]
    loc = ".".join(str(p) for p in err["loc"])
    return f"{loc}: {err['msg']}" if loc else err["msg"]
