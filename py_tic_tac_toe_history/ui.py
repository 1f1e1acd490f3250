from abc import ABC, abstractmethod

from py_tic_tac_toe_history.exception import InvalidMoveError, InvalidStepError
from py_tic_tac_toe_history.game_engine import GameEngine
from py_tic_tac_toe_history.view import ViewState


class Ui(ABC):
    def __init__(self, game_engine: GameEngine) -> None:
        self._game_engine = game_engine
        self._running = False
        self._view: ViewState = game_engine.view
        game_engine.add_state_updated_cb(self.on_state_updated)
        game_engine.add_on_error_cb(self.on_error)

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        self._running = True

    def _stop(self) -> None:
        self._running = False

    # -----------------------------
    # Events forwarded to the engine
    # -----------------------------

    def _cell_clicked(self, index: int) -> None:
        try:
            self._game_engine.cell_clicked(index)
        except (InvalidMoveError, IndexError) as e:
            self._on_input_error(e)

    def _history_link_clicked(self, step: int) -> None:
        try:
            self._game_engine.history_link_clicked(step)
        except InvalidStepError as e:
            self._on_input_error(e)

    def _restart(self) -> None:
        self._game_engine.restart()

    # -----------------------------
    # Callbacks from the engine
    # -----------------------------

    def on_state_updated(self, view: ViewState) -> None:
        self._view = view
        if not self._running:
            return
        self._render(view)

    def on_error(self, exception: Exception) -> None:
        if not self._running:
            return
        self._on_input_error(exception)

    @abstractmethod
    def _render(self, view: ViewState) -> None:
        pass

    @abstractmethod
    def _on_input_error(self, exception: Exception) -> None:
        pass
