from __future__ import annotations

import json
import logging

import pytest

from blazing_pizza.bootstrap import build_usecases
from blazing_pizza.config import ConfigurationError, Settings, load_settings


def test_defaults():
    settings = load_settings({})

    assert settings == Settings()
    assert settings.log_level_value == logging.INFO
    assert settings.menu_file is None


def test_reads_environment(tmp_path):
    path = tmp_path / "menu.json"
    path.write_text("{}", encoding="utf-8")

    settings = load_settings(
        {
            "PIZZA_LOG_LEVEL": " debug ",
            "PIZZA_CURRENCY_SYMBOL": "€",
            "PIZZA_MENU_FILE": str(path),
        }
    )

    assert settings.log_level == "DEBUG"
    assert settings.log_level_value == logging.DEBUG
    assert settings.currency_symbol == "€"
    assert settings.menu_file == path


def test_unknown_log_level():
    with pytest.raises(ConfigurationError, match="PIZZA_LOG_LEVEL"):
        load_settings({"PIZZA_LOG_LEVEL": "chatty"})


def test_missing_menu_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_settings({"PIZZA_MENU_FILE": str(tmp_path / "nope.json")})


def test_invalid_menu_file_is_a_configuration_error(tmp_path):
    path = tmp_path / "menu.json"
    path.write_text(json.dumps({"specials": [{"id": -1}]}), encoding="utf-8")

    with pytest.raises(ConfigurationError, match="invalid menu file"):
        build_usecases(Settings(menu_file=path))


def test_undecodable_menu_file_is_a_configuration_error(tmp_path):
    path = tmp_path / "menu.json"
    path.write_bytes(b'{"specials": [{"id": 1, "name": "Caf\xe9", "base_price": "7"}]}')

    with pytest.raises(ConfigurationError, match="invalid menu file"):
        build_usecases(Settings(menu_file=path))


def test_unreadable_menu_file_is_a_configuration_error(tmp_path):
    # reading a directory raises IsADirectoryError
    with pytest.raises(ConfigurationError, match="invalid menu file"):
        build_usecases(Settings(menu_file=tmp_path))
