import argparse
import logging
import os
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

UI_CHOICES: tuple[str, ...] = ("terminal", "tk", "pygame")
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

LOG_LEVEL_ENV = "PY_TTT_LOG_LEVEL"
REPORT_INVALID_MOVES_ENV = "PY_TTT_REPORT_INVALID_MOVES"


@dataclass(frozen=True, slots=True)
class GameConfig:
    uis: tuple[str, ...] = ("terminal",)
    log_level: str = "WARNING"
    report_invalid_moves: bool = False


def parse_args(
    argv: Sequence[str] | None = None,
    env: Mapping[str, str] | None = None,
    ui_choices: Iterable[str] = UI_CHOICES,
) -> GameConfig:
    """Build a GameConfig from the command line, using the environment for defaults."""
    env = os.environ if env is None else env

    parser = argparse.ArgumentParser(prog="py_tic_tac_toe_history", description="Tic-tac-toe with move history.")
    parser.add_argument("--ui", nargs="+", choices=tuple(ui_choices), default=["terminal"])
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=env.get(LOG_LEVEL_ENV, "WARNING").upper(),
    )
    parser.add_argument(
        "--report-invalid-moves",
        action="store_true",
        default=_env_flag(env.get(REPORT_INVALID_MOVES_ENV)),
        help="show a message when a move is rejected instead of ignoring it",
    )

    args = parser.parse_args(argv)
    if args.log_level not in LOG_LEVELS:
        parser.error(f"Invalid {LOG_LEVEL_ENV}: {args.log_level}")

    # Keep order, drop duplicates.
    uis = tuple(dict.fromkeys(args.ui))
    return GameConfig(uis=uis, log_level=args.log_level, report_invalid_moves=args.report_invalid_moves)


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT)


def _env_flag(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in ("1", "true", "yes", "on")
