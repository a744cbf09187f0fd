"""
Tests for high score parsing and the JSON store
"""

import json

import pytest

from conftest import wait_for_input
from simon_system import Signal
from simon_system.high_score import HIGH_SCORE_KEY, JsonHighScoreStore, parse_high_score


@pytest.mark.parametrize("raw, expected", [
    (0, 0),
    (12, 12),
    ("12", 12),
    (" 7 ", 7),
])
def test_parse_accepts_ints_and_numeric_strings(raw, expected):
    assert parse_high_score(raw) == expected


@pytest.mark.parametrize("raw", [None, -1, "-3", "abc", "", 1.5, True, [3]])
def test_parse_rejects_unusable_values(raw):
    with pytest.raises(ValueError):
        parse_high_score(raw)


def test_missing_file_loads_zero(tmp_path, logger):
    store = JsonHighScoreStore(tmp_path / "scores.json", logger)
    assert store.load_high_score() == 0


def test_save_then_load(tmp_path, logger):
    path = tmp_path / "scores.json"
    JsonHighScoreStore(path, logger).save_high_score(9)

    assert json.loads(path.read_text(encoding="utf-8")) == {HIGH_SCORE_KEY: "9"}
    assert JsonHighScoreStore(path, logger).load_high_score() == 9


def test_save_keeps_other_keys(tmp_path, logger):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"volume": 3, HIGH_SCORE_KEY: "1"}), encoding="utf-8")

    JsonHighScoreStore(path, logger).save_high_score(4)

    assert json.loads(path.read_text(encoding="utf-8")) == {"volume": 3, HIGH_SCORE_KEY: "4"}


def test_save_creates_parent_directories(tmp_path, logger):
    path = tmp_path / "data" / "simon" / "scores.json"
    JsonHighScoreStore(path, logger).save_high_score(2)
    assert JsonHighScoreStore(path, logger).load_high_score() == 2


@pytest.mark.parametrize("content", [
    "{not json",
    "[1, 2, 3]",
    json.dumps({HIGH_SCORE_KEY: "abc"}),
    json.dumps({HIGH_SCORE_KEY: -5}),
    json.dumps({"other": 1}),
])
def test_unusable_file_loads_zero(tmp_path, logger, content):
    path = tmp_path / "scores.json"
    path.write_text(content, encoding="utf-8")
    assert JsonHighScoreStore(path, logger).load_high_score() == 0


def test_corrupt_file_is_replaced_on_save(tmp_path, logger):
    path = tmp_path / "scores.json"
    path.write_text("{not json", encoding="utf-8")

    JsonHighScoreStore(path, logger).save_high_score(3)

    assert json.loads(path.read_text(encoding="utf-8")) == {HIGH_SCORE_KEY: "3"}


def test_custom_key(tmp_path, logger):
    path = tmp_path / "scores.json"
    JsonHighScoreStore(path, logger, key="bestRun").save_high_score(6)

    assert json.loads(path.read_text(encoding="utf-8")) == {"bestRun": "6"}
    assert JsonHighScoreStore(path, logger).load_high_score() == 0


def test_failed_write_does_not_raise(tmp_path, logger):
    # The target path is a directory, so opening it for writing fails
    path = tmp_path / "scores.json"
    path.mkdir()
    store = JsonHighScoreStore(path, logger)

    store.save_high_score(5)
    assert store.load_high_score() == 0


def test_controller_persists_through_json_store(tmp_path, logger, make_controller, clock):
    path = tmp_path / "scores.json"
    controller = make_controller(script=[Signal.GREEN, Signal.BLUE],
                                 high_score_store=JsonHighScoreStore(path, logger))
    controller.start()
    wait_for_input(controller, clock)
    controller.handle_signal(Signal.GREEN)
    wait_for_input(controller, clock)
    controller.handle_signal(Signal.BLUE)  # expected GREEN

    assert JsonHighScoreStore(path, logger).load_high_score() == 1
