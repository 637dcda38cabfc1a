"""Tests for the command line and game wiring in tilesnake.main."""

import pytest

from tilesnake.config import CFG
from tilesnake.engine import RunState
from tilesnake.main import build_game, parse_args


class TestParseArgs:

    def test_defaults(self):
        """No arguments gives the default config."""
        cfg = parse_args([])
        assert cfg == CFG

    def test_overrides(self):
        """Every flag lands in the matching Config field."""
        cfg = parse_args(["--grid-size", "12", "--tick-ms", "100", "--seed", "3", "--log-level", "DEBUG"])
        assert cfg.grid_size == 12
        assert cfg.tick_ms == 100
        assert cfg.seed == 3
        assert cfg.log_level == "DEBUG"
        assert cfg.score_per_food == CFG.score_per_food

    @pytest.mark.parametrize("argv", [
        ["--grid-size", "2"],
        ["--tick-ms", "0"],
        ["--log-level", "LOUD"],
    ])
    def test_invalid_arguments_exit(self, argv):
        """Bad values are argparse errors."""
        with pytest.raises(SystemExit):
            parse_args(argv)


class TestBuildGame:

    def test_wiring(self):
        """Engine, driver and controller share one engine and honor the config."""
        engine, driver, ui = build_game(parse_args(["--grid-size", "10", "--tick-ms", "50", "--seed", "1"]))
        assert engine.grid_size == 10
        assert driver.interval_ms == 50
        assert driver.engine is engine and ui.engine is engine
        assert engine.run_state is RunState.NOT_STARTED

    def test_seed_makes_food_reproducible(self):
        """Two games built from the same seed place the same first food."""
        cfg = parse_args(["--seed", "42"])
        a, _, _ = build_game(cfg)
        b, _, _ = build_game(cfg)
        a.reset()
        b.reset()
        assert a.food == b.food
