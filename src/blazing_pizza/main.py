from __future__ import annotations

import sys

from blazing_pizza.adapters.inbound.cli import run_menu, run_place_order, run_quote
from blazing_pizza.bootstrap import build_usecases
from blazing_pizza.config import ConfigurationError, load_settings
from blazing_pizza.logging_setup import configure_logging

USAGE = "usage: blazing-pizza menu | quote '<json>' | order '<json>'"


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv or argv[0] not in {"menu", "quote", "order"}:
        print(USAGE)
        return 2
    if argv[0] != "menu" and len(argv) < 2:
        print(USAGE)
        return 2

    try:
        settings = load_settings()
        configure_logging(settings.log_level_value)
        usecases = build_usecases(settings)
    except ConfigurationError as e:
        print(f"invalid_config: {e}")
        return 2

    currency = settings.currency_symbol

    if argv[0] == "menu":
        return run_menu(usecases.list_menu, currency)
    if argv[0] == "quote":
        return run_quote(usecases.quote_order, argv[1], currency)
    return run_place_order(usecases.place_order, argv[1], currency)


if __name__ == "__main__":
    raise SystemExit(main())
