from dataclasses import dataclass

from py_tic_tac_toe_history.board import Board, PlayerSymbol
from py_tic_tac_toe_history.game import GameState


@dataclass(frozen=True, slots=True)
class MoveLink:
    label: str
    step: int
    cell: int | None = None  # Cell played at this step; None for the game start.
    is_current: bool = False


@dataclass(frozen=True, slots=True)
class ViewState:
    """Everything a UI needs to draw one frame."""

    board: Board
    status: str
    move_list: tuple[MoveLink, ...]
    step: int
    next_player: PlayerSymbol
    winner: PlayerSymbol | None
    winning_line: tuple[int, int, int] | None
    is_draw: bool

    @classmethod
    def from_game_state(cls, state: GameState) -> "ViewState":
        cells: list[int | None] = [None, *state.moves]
        move_list = tuple(
            MoveLink(label, step, cells[step], is_current=step == state.step) for label, step in state.move_list()
        )
        return cls(
            board=state.board,
            status=state.status,
            move_list=move_list,
            step=state.step,
            next_player=state.next_player,
            winner=state.winner,
            winning_line=state.board.get_winning_line(),
            is_draw=state.board.is_draw(),
        )
