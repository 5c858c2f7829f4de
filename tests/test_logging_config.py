from __future__ import annotations

import logging

import pytest

from weather_news import logging_config


def test_configures_root_logger_once(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(logging_config, "_configured", False)
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    logging_config.configure_logging("debug")
    logging_config.configure_logging("info")

    assert calls == [{"level": logging.DEBUG, "format": logging_config.LOG_FORMAT}]


def test_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="verbose"):
        logging_config.configure_logging("verbose")


def test_create_app_configures_logging(monkeypatch, config) -> None:
    from app import create_app

    levels = []
    monkeypatch.setattr("app.configure_logging", levels.append)

    create_app(config)

    assert levels == ["INFO"]
