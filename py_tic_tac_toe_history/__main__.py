import threading
import time

from py_tic_tac_toe_history.config import configure_logging, parse_args
from py_tic_tac_toe_history.game_engine import GameEngine
from py_tic_tac_toe_history.ui import Ui
from py_tic_tac_toe_history.ui_pygame import PygameUi
from py_tic_tac_toe_history.ui_terminal import TerminalUi
from py_tic_tac_toe_history.ui_tk import TkUi


def main() -> None:
    ui_choices: dict[str, type[Ui]] = {"terminal": TerminalUi, "tk": TkUi, "pygame": PygameUi}

    config = parse_args(ui_choices=ui_choices.keys())
    configure_logging(config.log_level)

    # Build game components

    game_engine = GameEngine(report_invalid_moves=config.report_invalid_moves)
    uis: list[Ui] = [ui_choices[ui](game_engine) for ui in config.uis]

    # -----------------------------
    # UI
    # -----------------------------
    ui_threads = [threading.Thread(target=ui.run, daemon=True) for ui in uis]

    for ui_thread in ui_threads:
        ui_thread.start()

    while not all(ui.running for ui in uis):
        time.sleep(0.1)

    game_engine.start()

    for ui_thread in ui_threads:
        ui_thread.join()


if __name__ == "__main__":
    main()
