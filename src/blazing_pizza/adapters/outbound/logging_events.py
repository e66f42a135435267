from __future__ import annotations

import logging
from dataclasses import dataclass

from returns.result import Failure, Result, Success

from blazing_pizza.core.domain.model.errors import OrderError, PublishError
from blazing_pizza.core.domain.model.price import format_price
from blazing_pizza.core.ports.outbound.events import EventPublisher, OrderPlaced

logger = logging.getLogger(__name__)


@dataclass
class LoggingEventPublisher(EventPublisher):
    fail: bool = False

    def publish(self, event: OrderPlaced) -> Result[None, OrderError]:
        if self.fail:
            return Failure(PublishError(message="publisher is down"))
        logger.info(
            "order_placed: %s total=%s", event.order_id.value, format_price(event.total)
        )
        return Success(None)
