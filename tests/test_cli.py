import io
import logging
import math

import pytest

from segmentdistance import config
from segmentdistance.console import (
    INVALID_INPUT_MESSAGE,
    format_distance,
    parse_point,
    points_from_coordinates,
    read_point,
    read_points,
)
from segmentdistance.logging_config import setup_logging
from segmentdistance.main import main
from segmentdistance.model.geometry_primitives import Point


def scripted_input(lines):
    """Stand-in for input() that replays `lines` and records the prompts."""
    prompts = []
    remaining = list(lines)

    def _input(prompt):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    _input.prompts = prompts
    return _input


@pytest.mark.parametrize("text", ["1 2 3", "  1\t2   3 ", "1,2,3", "1; 2; 3", "1e0 2.0 +3"])
def test_parse_point_separators(text):
    assert parse_point(text) == Point(1.0, 2.0, 3.0)


@pytest.mark.parametrize("text", ["", "1 2", "1 2 3 4", "a b c", "1 2 nan", "inf 0 0"])
def test_parse_point_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_point(text)


def test_points_from_coordinates():
    points = points_from_coordinates([0, 0, 0, 1, 0, 0])
    assert points == [Point(0.0, 0.0, 0.0), Point(1.0, 0.0, 0.0)]
    with pytest.raises(ValueError):
        points_from_coordinates([0, 0, 0, 1])


def test_read_point_retries_until_valid():
    fake = scripted_input(["one two three", "1 2", "4 5 6"])
    err = io.StringIO()
    point = read_point(2, input_func=fake, err=err)
    assert point == Point(4.0, 5.0, 6.0)
    assert fake.prompts == ["Enter coordinates for point 2 (x y z): "] * 3
    assert err.getvalue().count(INVALID_INPUT_MESSAGE) == 2


def test_read_points_numbers_prompts():
    fake = scripted_input(["0 0 0", "1 0 0", "0 1 0", "1 1 0"])
    points = read_points(4, input_func=fake, err=io.StringIO())
    assert len(points) == 4
    assert fake.prompts == [f"Enter coordinates for point {i} (x y z): " for i in range(1, 5)]


def test_read_point_eof():
    with pytest.raises(EOFError):
        read_point(1, input_func=scripted_input([]), err=io.StringIO())


def test_format_distance():
    assert format_distance(1.0) == "Minimal distance: 1"
    assert format_distance(math.sqrt(2.0)) == "Minimal distance: 1.41421"


def test_get_log_level(monkeypatch):
    monkeypatch.delenv(config.LOG_LEVEL_ENV_VAR, raising=False)
    assert config.get_log_level() == logging.WARNING
    assert config.get_log_level("debug") == logging.DEBUG
    monkeypatch.setenv(config.LOG_LEVEL_ENV_VAR, "info")
    assert config.get_log_level() == logging.INFO
    with pytest.raises(ValueError):
        config.get_log_level("verbose")


def test_setup_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "run.log"
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))
    assert len(logger.handlers) == 2
    logger = setup_logging(level=logging.INFO)
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_main_with_points_argument(capsys):
    code = main(["--points", "0", "0", "0", "1", "0", "0", "0", "1", "0", "1", "1", "0"])
    assert code == 0
    assert capsys.readouterr().out.strip().endswith("Minimal distance: 1")


def test_main_degenerate_segment(capsys):
    code = main(["--points", "0", "0", "0", "0", "0", "0", "1", "0", "0", "2", "0", "0"])
    captured = capsys.readouterr()
    assert code == 1
    assert "Minimal distance:" not in captured.out
    assert "Segment 1 is degenerate" in captured.err


def test_main_interactive(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", scripted_input(["0 0 0", "x", "1 0 0", "0 1 1", "1 1 1"]))
    code = main([])
    captured = capsys.readouterr()
    assert code == 0
    assert "Minimal distance: 1.41421" in captured.out
    assert INVALID_INPUT_MESSAGE in captured.err


def test_main_interactive_input_ends(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", scripted_input(["0 0 0"]))
    assert main([]) == 1
    assert "Input ended" in capsys.readouterr().err


def test_main_rejects_non_finite_points(capsys):
    code = main(["--points", "nan", "0", "0", "1", "0", "0", "0", "1", "0", "1", "1", "0"])
    assert code == 2
    assert "Invalid coordinates" in capsys.readouterr().err
