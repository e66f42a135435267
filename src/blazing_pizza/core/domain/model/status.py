from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from blazing_pizza.core.domain.model.order import Order

PREPARATION_DURATION = timedelta(seconds=10)
DELIVERY_DURATION = timedelta(minutes=1)

PREPARING = "Preparing"
OUT_FOR_DELIVERY = "Out for delivery"
DELIVERED = "Delivered"


@dataclass(frozen=True)
class OrderWithStatus:
    order: Order
    status: str
    is_delivered: bool

    @staticmethod
    def from_order(order: Order, now: datetime) -> "OrderWithStatus":
        status = status_at(order.created_at, now)
        return OrderWithStatus(
            order=order, status=status, is_delivered=status == DELIVERED
        )


def status_at(created_at: datetime, now: datetime) -> str:
    dispatch_time = created_at + PREPARATION_DURATION
    if now < dispatch_time:
        return PREPARING
    if now < dispatch_time + DELIVERY_DURATION:
        return OUT_FOR_DELIVERY
    return DELIVERED
