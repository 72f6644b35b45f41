"""Tests for the command-line entry point."""

import pytest

import main
from biots.config.display import INITIAL_POPULATION


def test_headless_run_from_cli():
    main.main(
        ["--headless", "--max-frames", "3", "--stats-interval", "1", "--population", "20", "--seed", "7"]
    )


def test_build_config_from_args(monkeypatch):
    captured = {}
    monkeypatch.setattr(
        main, "run_headless", lambda config, frames, interval: captured.update(config=config)
    )

    main.main(["--headless", "--width", "320", "--height", "240", "--require-contact"])

    config = captured["config"]
    assert config.headless is True
    assert config.display.screen_width == 320
    assert config.display.screen_height == 240
    assert config.require_contact is True
    assert config.initial_population == INITIAL_POPULATION


def test_invalid_arguments_exit():
    with pytest.raises(SystemExit):
        main.main(["--headless", "--width", "0"])


def test_window_mode_is_the_default(monkeypatch):
    calls = []
    monkeypatch.setattr(main, "run_window", lambda config: calls.append(("window", config)))
    monkeypatch.setattr(main, "run_headless", lambda *args: calls.append(("headless", args)))

    main.main(["--population", "5"])

    assert [kind for kind, _ in calls] == ["window"]
    assert calls[0][1].headless is False
