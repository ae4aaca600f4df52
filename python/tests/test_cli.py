from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from slidesearch.cli import app
from slidesearch.config import SearchConfig

runner = CliRunner()


def test_scramble_and_solve() -> None:
    result = runner.invoke(app, ["--seed", "3", "-m", "15"])

    assert result.exit_code == 0, result.output
    assert "solved" in result.output


def test_explicit_board_with_replay() -> None:
    result = runner.invoke(app, ["--board", "1,2,3,4,5,6,7,0,8", "--replay"])

    assert result.exit_code == 0, result.output
    assert "1/1" in result.output


def test_unsolvable_board_exits_1() -> None:
    result = runner.invoke(app, ["--board", "2 1 3 0"])

    assert result.exit_code == 1
    assert "exhausted" in result.output


def test_budget_exceeded_exits_1() -> None:
    result = runner.invoke(
        app, ["--board", "1,2,3,4,0,6,7,5,8", "--max-expansions", "1"]
    )

    assert result.exit_code == 1


@pytest.mark.parametrize(
    "board",
    ["1,1,2,0", "1,2,3", "a,b,c,d"],
    ids=["duplicate", "not-square", "not-numbers"],
)
def test_invalid_board_is_usage_error(board: str) -> None:
    result = runner.invoke(app, ["--board", board])

    assert result.exit_code == 2


def test_dot_output(tmp_path: Path) -> None:
    out = tmp_path / "trace.dot"

    result = runner.invoke(app, ["--board", "1,2,3,4,5,6,7,0,8", "--dot", str(out)])

    assert result.exit_code == 0, result.output
    assert out.read_text().startswith("digraph search {")


def test_seed_from_environment() -> None:
    env_result = runner.invoke(app, ["-m", "10"], env={"SLIDESEARCH_SEED": "5"})
    flag_result = runner.invoke(app, ["-m", "10", "--seed", "5"])

    assert env_result.exit_code == flag_result.exit_code == 0
    assert env_result.output == flag_result.output


# -- config -------------------------------------------------------------------


def test_config_infers_size_from_board() -> None:
    config = SearchConfig(size=3, board=list(range(16)))
    assert config.size == 4


@pytest.mark.parametrize(
    "kwargs",
    [{"size": 1}, {"size": 9}, {"moves": -1}, {"max_expansions": 0}],
)
def test_config_rejects_bad_values(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        SearchConfig(**kwargs)


def test_parse_board() -> None:
    assert SearchConfig.parse_board("1, 2,3 0") == [1, 2, 3, 0]


def test_board_and_dot_from_environment(tmp_path: Path) -> None:
    out = tmp_path / "env.dot"

    result = runner.invoke(
        app,
        [],
        env={"SLIDESEARCH_BOARD": "1,2,3,4,5,6,7,0,8", "SLIDESEARCH_DOT": str(out)},
    )

    assert result.exit_code == 0, result.output
    assert out.read_text().count("color=green") == 1
