import logging
from unittest.mock import patch

import pytest

from aiutility import config
from aiutility.__main__ import build_parser, main


def test_parser_defaults_come_from_config() -> None:
    args = build_parser().parse_args([])
    assert args.ticks == config.DEFAULT_TICKS
    assert args.seed == config.RANDOM_SEED
    assert args.injury_chance == config.INJURY_CHANCE
    assert args.verbose is False


@pytest.mark.parametrize(
    "argv",
    [["--ticks", "-1"], ["--injury-chance", "1.5"], ["--ticks", "many"]],
)
def test_parser_rejects_bad_values(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(argv)
    assert exc_info.value.code == 2


def test_main_prints_summary(capsys: pytest.CaptureFixture[str]) -> None:
    with patch("logging.basicConfig") as basic_config:
        main(["--ticks", "20", "--seed", "cli", "--injury-chance", "0"])

    assert basic_config.call_args.kwargs["level"] == logging.INFO
    out = capsys.readouterr().out
    assert "Simulated 20 ticks" in out
    assert "idle:" in out
    assert "Chosen utility: p50=" in out
    assert "Final state: health: 100.0" in out


def test_verbose_flag_enables_debug_logging() -> None:
    with patch("logging.basicConfig") as basic_config:
        main(["--ticks", "0", "-v"])

    assert basic_config.call_args.kwargs["level"] == logging.DEBUG
