from __future__ import annotations

import logging

import pytest

from blazing_pizza import logging_setup
from blazing_pizza.adapters.outbound.in_memory_menu import InMemoryMenu, default_menu
from blazing_pizza.core.ports.inbound.place_order import AddressLine
from builders import RecordingEventPublisher


@pytest.fixture
def menu() -> InMemoryMenu:
    return default_menu()


@pytest.fixture
def events() -> RecordingEventPublisher:
    return RecordingEventPublisher()


@pytest.fixture
def address() -> AddressLine:
    return AddressLine(
        name="Ada Lovelace",
        line1="12 St James's Square",
        city="London",
        region="Greater London",
        postal_code="SW1Y 4JH",
    )


@pytest.fixture(autouse=True)
def _detach_console_handler():
    yield
    if logging_setup._console_handler is not None:
        logging.getLogger().removeHandler(logging_setup._console_handler)
        logging_setup._console_handler = None
