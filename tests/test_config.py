import pytest
from pydantic import ValidationError

from knights_tour import build_config, main, parse_args
from knights_tour.solver.config import SolverConfig


def test_defaults():
    config = SolverConfig()
    assert config.board_size == 8
    assert (config.start_x, config.start_y) == (3, 2)
    assert config.require_closed
    assert config.max_attempts is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("KNIGHTS_TOUR_BOARD_SIZE", "6")
    monkeypatch.setenv("KNIGHTS_TOUR_REQUIRE_CLOSED", "false")
    config = SolverConfig()
    assert config.board_size == 6
    assert not config.require_closed


def test_unprefixed_environment_is_ignored(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "info")
    monkeypatch.setenv("SEED", "abc")
    monkeypatch.setenv("BOARD_SIZE", "0")
    monkeypatch.setenv("LOG_DIR", "/elsewhere")
    config = SolverConfig()
    assert config.log_level == "WARNING"
    assert config.seed is None
    assert config.board_size == 8
    assert config.log_dir == "logs"


@pytest.mark.parametrize("level", ["info", "Info", "INFO"])
def test_log_level_is_case_insensitive(monkeypatch, level):
    monkeypatch.setenv("KNIGHTS_TOUR_LOG_LEVEL", level)
    assert SolverConfig().log_level == "INFO"
    assert SolverConfig(log_level=level.lower()).log_level == "INFO"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"board_size": 0},
        {"start_x": 8},
        {"board_size": 5, "start_y": 5},
        {"max_attempts": 0},
        {"log_level": "VERBOSE"},
    ],
)
def test_invalid_settings_are_rejected(kwargs):
    with pytest.raises(ValidationError):
        SolverConfig(**kwargs)


def test_build_config_applies_command_line_overrides():
    args = parse_args(
        ["--board-size", "6", "--start", "1", "4", "--open", "--max-attempts", "50", "--seed", "9"]
    )
    config = build_config(args, SolverConfig())
    assert config.board_size == 6
    assert (config.start_x, config.start_y) == (1, 4)
    assert not config.require_closed
    assert config.max_attempts == 50
    assert config.seed == 9


def test_build_config_keeps_settings_without_overrides():
    base = SolverConfig(seed=5, rotation_range=10)
    config = build_config(parse_args([]), base)
    assert config == base


def test_build_config_validates_overrides():
    args = parse_args(["--board-size", "4", "--start", "5", "5"])
    with pytest.raises(ValidationError):
        build_config(args, SolverConfig())


def test_main_prints_solution(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    main(["--seed", "1", "--max-attempts", "10000"])
    out = capsys.readouterr().out
    assert "Puzzle solved in" in out
    assert (tmp_path / "logs" / "8x8").is_dir()


def test_main_rejects_invalid_arguments():
    with pytest.raises(SystemExit, match="Invalid configuration"):
        main(["--board-size", "0"])


def test_main_reports_invalid_environment(monkeypatch):
    monkeypatch.setenv("KNIGHTS_TOUR_SEED", "abc")
    with pytest.raises(SystemExit, match="Invalid configuration"):
        main(["--max-attempts", "10"])


def test_main_ignores_unrelated_environment(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_LEVEL", "info")
    monkeypatch.setenv("SEED", "abc")
    main(["--seed", "1", "--max-attempts", "10000"])
    assert "Puzzle solved in" in capsys.readouterr().out


def test_log_level_flag_is_case_insensitive():
    config = build_config(parse_args(["--log-level", "debug"]), SolverConfig())
    assert config.log_level == "DEBUG"
