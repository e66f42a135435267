from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Callable

from returns.pipeline import flow
from returns.pointfree import bind, map_
from returns.result import Failure, Result

from blazing_pizza.core.domain.model.errors import OrderError
from blazing_pizza.core.domain.model.order import (
    Address,
    Order,
    OrderId,
    UserId,
    now_utc,
)
from blazing_pizza.core.domain.model.status import OrderWithStatus
from blazing_pizza.core.domain.service.configure_pizza import configure_pizzas
from blazing_pizza.core.domain.service.validation import validate_place_order
from blazing_pizza.core.ports.inbound.place_order import (
    OrderReceipt,
    PlaceOrderCommand,
    PlaceOrderUseCase,
)
from blazing_pizza.core.ports.outbound.events import EventPublisher, OrderPlaced
from blazing_pizza.core.ports.outbound.menu import MenuCatalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaceOrderDeps:
    menu: MenuCatalog
    events: EventPublisher
    clock: Callable[[], datetime] = now_utc


@dataclass(frozen=True)
class PlaceOrderContext:
    order: Order
    total: Decimal | None = None


@dataclass(frozen=True)
class PlaceOrderService(PlaceOrderUseCase):
    deps: PlaceOrderDeps

    def place_order(
        self, command: PlaceOrderCommand
    ) -> Result[OrderReceipt, OrderError]:
        result = flow(
            command,
            validate_place_order,
            bind(self._build_context),
            bind(_price),
            bind(self._publish),
            map_(self._to_receipt),
        )
        if isinstance(result, Failure):
            logger.warning("order rejected: %s", result.failure())
        return result

    def _build_context(
        self, cmd: PlaceOrderCommand
    ) -> Result[PlaceOrderContext, OrderError]:
        addr = cmd.address
        address = Address(
            name=addr.name.strip(),
            line1=addr.line1.strip(),
            line2=addr.line2.strip(),
            city=addr.city.strip(),
            region=addr.region.strip(),
            postal_code=addr.postal_code.strip(),
        )
        return configure_pizzas(self.deps.menu, cmd.pizzas).map(
            lambda pizzas: PlaceOrderContext(
                order=Order(
                    order_id=OrderId.new(),
                    user_id=UserId(cmd.user_id.strip()),
                    created_at=self.deps.clock(),
                    delivery_address=address,
                    pizzas=pizzas,
                )
            )
        )

    def _publish(
        self, ctx: PlaceOrderContext
    ) -> Result[PlaceOrderContext, OrderError]:
        event = OrderPlaced(order_id=ctx.order.order_id, total=ctx.total)
        return self.deps.events.publish(event).map(lambda _: ctx)

    def _to_receipt(self, ctx: PlaceOrderContext) -> OrderReceipt:
        tracked = OrderWithStatus.from_order(ctx.order, self.deps.clock())
        return OrderReceipt(
            order_id=ctx.order.order_id,
            user_id=ctx.order.user_id,
            total=ctx.total,
            status=tracked.status,
        )


def _price(ctx: PlaceOrderContext) -> Result[PlaceOrderContext, OrderError]:
    return ctx.order.get_total_price().map(
        lambda total: PlaceOrderContext(order=ctx.order, total=total)
    )
