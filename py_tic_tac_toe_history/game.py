from collections.abc import Iterable
from dataclasses import dataclass

from py_tic_tac_toe_history.board import Board, PlayerSymbol
from py_tic_tac_toe_history.exception import InvalidMoveError, InvalidStepError


@dataclass(frozen=True, slots=True)
class GameState:
    """Move history plus the step currently displayed.

    Every update returns a new GameState. Winner, next player and status are
    derived from the snapshot at ``step`` on every access.
    """

    history: tuple[Board, ...] = (Board(),)
    step: int = 0

    def __post_init__(self) -> None:
        if not self.history:
            raise ValueError("History must contain at least the initial board.")
        for n, (previous, current) in enumerate(zip(self.history, self.history[1:], strict=False), start=1):
            changed = previous.diff(current)
            if len(changed) != 1:
                msg = f"History step {n} must differ from step {n - 1} in exactly one cell."
                raise ValueError(msg)
            index = changed[0]
            if previous[index] is not None:
                msg = f"History step {n} overwrites occupied cell {index}."
                raise ValueError(msg)
            # Step n holds the move made when step n - 1 was displayed.
            mover = "X" if n % 2 else "O"
            if current[index] != mover:
                msg = f"History step {n} must be played by {mover}, got {current[index]}."
                raise ValueError(msg)
        self._check_step(self.step)

    @classmethod
    def new(cls) -> "GameState":
        return cls()

    @classmethod
    def from_moves(cls, indices: Iterable[int]) -> "GameState":
        state = cls()
        for index in indices:
            state = state.apply_move(index)
        return state

    # -----------------------------
    # Derived reads
    # -----------------------------

    @property
    def board(self) -> Board:
        return self.history[self.step]

    @property
    def winner(self) -> PlayerSymbol | None:
        return self.board.get_winner()

    @property
    def next_player(self) -> PlayerSymbol:
        return "X" if self.step % 2 == 0 else "O"

    @property
    def status(self) -> str:
        winner = self.winner
        if winner:
            return f"Winner: {winner}"
        return f"Next player: {self.next_player}"

    @property
    def moves(self) -> list[int]:
        """Cell index played at each step from 1 to the end of history."""
        played = []
        for previous, current in zip(self.history, self.history[1:], strict=False):
            played.extend(previous.diff(current))
        return played

    def move_list(self) -> list[tuple[str, int]]:
        return [(move_label(i), i) for i in range(len(self.history))]

    # -----------------------------
    # Updates
    # -----------------------------

    def apply_move(self, index: int) -> "GameState":
        current = self.board
        if not (0 <= index < len(current)):
            raise IndexError("Move out of bounds.")

        if current.get_winner():
            raise InvalidMoveError("Game over.")

        if current[index] is not None:
            raise InvalidMoveError("Cell occupied.")

        # Moving after a jump back discards the snapshots past the pointer.
        history = self.history[: self.step + 1]
        history = (*history, current.with_move(index, self.next_player))
        return GameState(history, len(history) - 1)

    def jump_to(self, step: int) -> "GameState":
        self._check_step(step)
        return GameState(self.history, step)

    def restart(self) -> "GameState":
        return GameState()

    def _check_step(self, step: int) -> None:
        if isinstance(step, bool) or not isinstance(step, int):
            msg = f"Step must be an integer, got {step!r}."
            raise InvalidStepError(msg)
        if not (0 <= step < len(self.history)):
            msg = f"Step {step} out of range 0-{len(self.history) - 1}."
            raise InvalidStepError(msg)


def move_label(step: int) -> str:
    return f"Go to move #{step}" if step else "Go to game start"
