from __future__ import annotations

import logging
from dataclasses import dataclass

from pydantic import ValidationError as MenuFileError

from blazing_pizza.adapters.outbound.in_memory_menu import InMemoryMenu, default_menu
from blazing_pizza.adapters.outbound.logging_events import LoggingEventPublisher
from blazing_pizza.config import ConfigurationError, Settings
from blazing_pizza.core.domain.service.list_menu_service import (
    ListMenuDeps,
    ListMenuService,
)
from blazing_pizza.core.domain.service.place_order_service import (
    PlaceOrderDeps,
    PlaceOrderService,
)
from blazing_pizza.core.domain.service.quote_order_service import (
    QuoteOrderDeps,
    QuoteOrderService,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UseCases:
    list_menu: ListMenuService
    quote_order: QuoteOrderService
    place_order: PlaceOrderService


def build_menu(settings: Settings) -> InMemoryMenu:
    if settings.menu_file is None:
        return default_menu()
    logger.info("loading menu from %s", settings.menu_file)
    try:
        return InMemoryMenu.from_file(settings.menu_file)
    except (MenuFileError, OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"invalid menu file {settings.menu_file}: {e}") from e


def build_usecases(settings: Settings | None = None) -> UseCases:
    settings = settings or Settings()
    menu = build_menu(settings)
    events = LoggingEventPublisher()

    return UseCases(
        list_menu=ListMenuService(ListMenuDeps(menu=menu)),
        quote_order=QuoteOrderService(QuoteOrderDeps(menu=menu)),
        place_order=PlaceOrderService(PlaceOrderDeps(menu=menu, events=events)),
    )
