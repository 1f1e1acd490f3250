import logging
import threading
from collections.abc import Callable

from py_tic_tac_toe_history.exception import InvalidMoveError
from py_tic_tac_toe_history.game import GameState
from py_tic_tac_toe_history.view import ViewState

logger = logging.getLogger(__name__)


class GameEngine:
    """Owns the live GameState and turns UI events into state updates.

    Operations are serialized by a lock, so each event and the callbacks it
    triggers finish before the next event is handled.
    """

    def __init__(self, *, report_invalid_moves: bool = False) -> None:
        self._state = GameState.new()
        self._report_invalid_moves = report_invalid_moves
        self._state_updated_cbs: list[Callable[[ViewState], None]] = []
        self._on_error_cbs: list[Callable[[Exception], None]] = []
        self._lock = threading.RLock()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def view(self) -> ViewState:
        return ViewState.from_game_state(self._state)

    def add_state_updated_cb(self, callback: Callable[[ViewState], None]) -> None:
        self._state_updated_cbs.append(callback)

    def add_on_error_cb(self, callback: Callable[[Exception], None]) -> None:
        self._on_error_cbs.append(callback)

    def start(self) -> None:
        """Publish the current view to every subscriber."""
        with self._lock:
            self._notify_state_updated()

    def cell_clicked(self, index: int) -> bool:
        """Play ``index`` for the player to move. Illegal moves leave the state untouched."""
        with self._lock:
            try:
                new_state = self._state.apply_move(index)
            except InvalidMoveError as e:
                logger.debug("Ignoring move at cell %d: %s", index, e)
                if self._report_invalid_moves:
                    self._notify_on_error(e)
                return False

            logger.info("%s played cell %d (step %d)", self._state.next_player, index, new_state.step)
            self._set_state(new_state)
            return True

    def history_link_clicked(self, step: int) -> None:
        with self._lock:
            new_state = self._state.jump_to(step)
            logger.info("Jumped to step %d of %d", step, len(new_state.history) - 1)
            self._set_state(new_state)

    def restart(self) -> None:
        with self._lock:
            logger.info("Game restarted")
            self._set_state(self._state.restart())

    def _set_state(self, state: GameState) -> None:
        self._state = state
        self._notify_state_updated()

    def _notify_state_updated(self) -> None:
        view = self.view
        for callback in list(self._state_updated_cbs):
            callback(view)

    def _notify_on_error(self, exception: Exception) -> None:
        for callback in list(self._on_error_cbs):
            callback(exception)
