from __future__ import annotations

import json
import logging
import sys

import pytest
from typer.testing import CliRunner

from cli.main import app


def test_no_args_shows_help(runner: CliRunner) -> None:
    result = runner.invoke(app, [])

    assert "f-to-c" in result.output
    assert "twelve-days" in result.output


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.output.startswith("drills ")


def test_f_to_c_converts(runner: CliRunner) -> None:
    result = runner.invoke(app, ["f-to-c"], input="100\n")

    assert result.exit_code == 0
    assert "Enter Fahrenheit value" in result.output
    assert result.output.rstrip().endswith("100f is 37c")


def test_f_to_c_reprompts_on_invalid_input(runner: CliRunner) -> None:
    result = runner.invoke(app, ["f-to-c"], input="abc\n12.5\n-40\n")

    assert result.exit_code == 0
    assert result.output.count("Enter Fahrenheit value") == 3
    assert result.output.count("Error: Invalid value") == 2
    assert "-40f is -40c" in result.output


def test_f_to_c_json(runner: CliRunner) -> None:
    result = runner.invoke(app, ["f-to-c", "--json"], input="212\n")

    assert result.exit_code == 0
    payload = json.loads(result.output[result.output.index("{"):])
    assert payload == {"celsius": 100, "fahrenheit": 212}


def test_fibonacci_reprompts_then_computes(runner: CliRunner) -> None:
    result = runner.invoke(app, ["fibonacci"], input="-3\nx\n20\n")

    assert result.exit_code == 0
    assert result.output.count("Error: Invalid number") == 2
    assert result.output.rstrip().endswith("20 fibonacci number is 6765")


def test_fibonacci_warns_above_threshold(
    runner: CliRunner,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    monkeypatch.setenv("DRILLS_FIBONACCI_SLOW_THRESHOLD", "5")

    with caplog.at_level(logging.WARNING, logger="cli.main"):
        result = runner.invoke(app, ["fibonacci"], input="10\n")

    assert result.exit_code == 0
    assert "10 fibonacci number is 55" in result.output
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "above 5" in warnings[0].getMessage()


@pytest.fixture
def restore_recursion_limit():
    limit = sys.getrecursionlimit()
    yield
    sys.setrecursionlimit(limit)


@pytest.mark.usefixtures("restore_recursion_limit")
def test_fibonacci_deep_index_does_not_hit_recursion_limit(
    runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    seen_limits: list[int] = []

    def _fake_fib(n: int) -> int:
        seen_limits.append(sys.getrecursionlimit())
        return 0

    monkeypatch.setattr("core.services.fibonacci.fib", _fake_fib)

    result = runner.invoke(app, ["fibonacci"], input="1500\n")

    assert result.exit_code == 0, result.exception
    assert "1500 fibonacci number is 0" in result.output
    assert seen_limits and seen_limits[0] >= 1500 + 100


def test_f_to_c_reprompts_on_empty_line(runner: CliRunner) -> None:
    result = runner.invoke(app, ["f-to-c"], input="\n32\n")

    assert result.exit_code == 0
    assert result.output.count("Error: Invalid value") == 1
    assert result.output.rstrip().endswith("32f is 0c")


def test_f_to_c_reprompts_on_oversized_number(runner: CliRunner) -> None:
    result = runner.invoke(app, ["f-to-c"], input="9" * 5000 + "\n32\n")

    assert result.exit_code == 0, result.exception
    assert "Error: Invalid value" in result.output
    assert result.output.rstrip().endswith("32f is 0c")


def test_fibonacci_reprompts_on_oversized_number(runner: CliRunner) -> None:
    result = runner.invoke(app, ["fibonacci"], input="9" * 5000 + "\n10\n")

    assert result.exit_code == 0, result.exception
    assert "Error: Invalid number" in result.output
    assert result.output.rstrip().endswith("10 fibonacci number is 55")


def test_closed_input_is_fatal(runner: CliRunner) -> None:
    result = runner.invoke(app, ["f-to-c"], input="")

    assert result.exit_code == 1
    assert "Failed to read line" in result.output


def test_closed_input_after_invalid_line_is_fatal(runner: CliRunner) -> None:
    result = runner.invoke(app, ["fibonacci"], input="abc\n")

    assert result.exit_code == 1
    assert "Error: Invalid number" in result.output
    assert "Failed to read line" in result.output


def test_rectangles(runner: CliRunner) -> None:
    result = runner.invoke(app, ["rectangles"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0].startswith("rect is Rectangle(")
    assert "width=30" in result.output
    assert "height=50" in result.output
    assert lines[-1] == "The area of the rectangle is 1500 square pixels."


def test_rectangles_json(runner: CliRunner) -> None:
    result = runner.invoke(app, ["rectangles", "--json"])

    assert json.loads(result.output) == {"area": 1500, "rectangle": {"height": 50, "width": 30}}


def test_twelve_days_prints_every_verse(runner: CliRunner) -> None:
    result = runner.invoke(app, ["twelve-days"])

    assert result.exit_code == 0
    assert result.output.count("my true love gave to me") == 12
    assert result.output.startswith(
        "On the first of Christmas, my true love gave to me \na partridge in a pear tree\n\n"
    )
    assert result.output.endswith("and a partridge in a pear tree\n\n")


def test_twelve_days_single_day(runner: CliRunner) -> None:
    result = runner.invoke(app, ["twelve-days", "--day", "2"])

    assert result.output == (
        "On the second of Christmas, my true love gave to me \n"
        "two turtle doves\n"
        "and a partridge in a pear tree\n\n"
    )


def test_twelve_days_rejects_day_out_of_range(runner: CliRunner) -> None:
    result = runner.invoke(app, ["twelve-days", "--day", "13"])

    assert result.exit_code != 0


def test_twelve_days_json(runner: CliRunner) -> None:
    result = runner.invoke(app, ["twelve-days", "--json", "--day", "12"])

    payload = json.loads(result.output)
    assert payload[0]["day"] == 11
    assert payload[0]["ordinal"] == "twelfth"


def test_invalid_configuration_exits(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DRILLS_LOG_LEVEL", "chatty")

    result = runner.invoke(app, ["rectangles"])

    assert result.exit_code == 2
    assert "Invalid configuration" in result.output
