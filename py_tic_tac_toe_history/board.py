from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, Literal, TypeAlias

BOARD_SIZE: Final = 3
CELL_COUNT: Final = BOARD_SIZE * BOARD_SIZE
PlayerSymbol: TypeAlias = Literal["X", "O"]
Cell: TypeAlias = PlayerSymbol | None

# Rows, columns, then both diagonals. Order matters: first match wins.
WIN_LINES: Final[tuple[tuple[int, int, int], ...]] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def get_winning_line(cells: Sequence[Cell]) -> tuple[int, int, int] | None:
    for line in WIN_LINES:
        a, b, c = line
        if cells[a] is not None and cells[a] == cells[b] == cells[c]:
            return line
    return None


def get_winner(cells: Sequence[Cell]) -> PlayerSymbol | None:
    """Return the symbol owning a complete line, or None.

    None covers both a game still in progress and a full board without a line.
    """
    line = get_winning_line(cells)
    if line is None:
        return None
    return cells[line[0]]


@dataclass(frozen=True, slots=True)
class Board:
    """Immutable snapshot of the nine cells, row-major."""

    cells: tuple[Cell, ...] = (None,) * CELL_COUNT

    def __post_init__(self) -> None:
        if len(self.cells) != CELL_COUNT:
            msg = f"Board must have {CELL_COUNT} cells, got {len(self.cells)}."
            raise ValueError(msg)
        for cell in self.cells:
            if cell not in (None, "X", "O"):
                msg = f"Invalid cell value: {cell!r}."
                raise ValueError(msg)

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def from_cells(cls, cells: Sequence[Cell]) -> "Board":
        return cls(tuple(cells))

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __len__(self) -> int:
        return len(self.cells)

    def rows(self) -> list[tuple[Cell, ...]]:
        return [self.cells[r * BOARD_SIZE : (r + 1) * BOARD_SIZE] for r in range(BOARD_SIZE)]

    def with_move(self, index: int, player: PlayerSymbol) -> "Board":
        if not (0 <= index < CELL_COUNT):
            raise IndexError("Move out of bounds.")
        cells = list(self.cells)
        cells[index] = player
        return Board(tuple(cells))

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def get_winner(self) -> PlayerSymbol | None:
        return get_winner(self.cells)

    def get_winning_line(self) -> tuple[int, int, int] | None:
        return get_winning_line(self.cells)

    def is_draw(self) -> bool:
        return self.is_full() and self.get_winner() is None

    def diff(self, other: "Board") -> list[int]:
        """Return the indices whose value differs between the two snapshots."""
        return [i for i, (a, b) in enumerate(zip(self.cells, other.cells, strict=True)) if a != b]
