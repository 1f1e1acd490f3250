# ruff: noqa: T201

from py_tic_tac_toe_history.board import CELL_COUNT
from py_tic_tac_toe_history.game_engine import GameEngine
from py_tic_tac_toe_history.ui import Ui
from py_tic_tac_toe_history.view import ViewState

HELP = f"Commands: 1-{CELL_COUNT} play a cell, 'g N' go to step N, 'r' restart, 'exit' quit"


class TerminalUi(Ui):
    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)

    def run(self) -> None:
        super().run()
        print(HELP, flush=True)
        while self._running:
            self._get_input()
        print("Terminal UI stopped", flush=True)

    def _ask_for_command(self) -> None:
        print("> ", end="", flush=True)

    def _get_input(self) -> None:
        try:
            input_str = input()
        except (KeyboardInterrupt, EOFError):
            self._stop()
            return
        self.handle_command(input_str)

    def handle_command(self, input_str: str) -> None:
        command, _, argument = input_str.strip().partition(" ")
        match command.lower():
            case "":
                self._ask_for_command()
            case "exit" | "quit" | "q":
                self._stop()
            case "r" | "restart":
                self._restart()
            case "g" | "goto":
                self._goto(argument.strip())
            case "h" | "help":
                print(HELP, flush=True)
                self._ask_for_command()
            case _:
                self._play(command)

    def _goto(self, argument: str) -> None:
        try:
            step = int(argument)
        except ValueError:
            self._on_input_error(ValueError(f"Not a step number: {argument!r}"))
            return
        self._history_link_clicked(step)

    def _play(self, command: str) -> None:
        try:
            board_position = int(command)
        except ValueError:
            self._on_input_error(ValueError(f"Unknown command: {command!r}"))
            return

        if not (1 <= board_position <= CELL_COUNT):
            self._on_input_error(ValueError(f"Not between 1 and {CELL_COUNT}"))
            return

        self._cell_clicked(board_position - 1)

    def _render(self, view: ViewState) -> None:
        def _cell_value(index: int) -> str:
            value = view.board[index]
            return value if value is not None else str(index + 1)

        rows = []
        for r, cells in enumerate(view.board.rows()):
            start = r * len(cells)
            row = " | ".join(_cell_value(start + i) for i in range(len(cells)))
            rows.append(f" {row} ")

        separator = "\n-----------\n"
        output = separator.join(rows)
        print(f"\n{output}\n", flush=True)
        print(view.status, flush=True)
        if view.is_draw:
            print("It's a draw", flush=True)

        for link in view.move_list:
            marker = "*" if link.is_current else " "
            print(f"{marker} {link.step}. {link.label}", flush=True)
        self._ask_for_command()

    def _on_input_error(self, exception: Exception) -> None:
        print(str(exception), flush=True)
        self._ask_for_command()
