from typing import Final

import pygame

from py_tic_tac_toe_history.board import BOARD_SIZE
from py_tic_tac_toe_history.game_engine import GameEngine
from py_tic_tac_toe_history.ui import Ui
from py_tic_tac_toe_history.view import ViewState


class PygameUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Pygame)"
    BOARD_PIXELS: Final = 480
    PANEL_WIDTH: Final = 280
    CELL_SIZE: Final = BOARD_PIXELS // BOARD_SIZE
    LINE_WIDTH: Final = 4
    MARGIN: Final = 16
    ROW_HEIGHT: Final = 30

    BG_COLOR: Final = (0, 0, 0)
    PANEL_COLOR: Final = (24, 24, 24)
    LINE_COLOR: Final = (127, 127, 127)
    WIN_COLOR: Final = (40, 90, 40)
    X_COLOR: Final = (191, 63, 63)
    O_COLOR: Final = (63, 63, 191)
    TEXT_COLOR: Final = (255, 255, 255)
    CURRENT_COLOR: Final = (255, 215, 0)
    ERROR_COLOR: Final = (255, 96, 96)

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self._error_message = ""
        self._restart_rect = pygame.Rect(0, 0, 0, 0)
        self._link_rects: list[tuple[pygame.Rect, int]] = []

    def run(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode((self.BOARD_PIXELS + self.PANEL_WIDTH, self.BOARD_PIXELS))
        pygame.display.set_caption(self.TITLE)

        self._font = pygame.font.SysFont(None, 96)
        self._status_font = pygame.font.SysFont(None, 32)
        self._small_font = pygame.font.SysFont(None, 24)

        super().run()
        self._main_loop()

    def _main_loop(self) -> None:
        clock = pygame.time.Clock()
        while self._running:
            clock.tick(30)
            self._handle_events()
            self._draw()
        pygame.quit()

    # -----------------------------
    # Event handling
    # -----------------------------

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            match event.type:
                case pygame.QUIT:
                    self._stop()
                case pygame.MOUSEBUTTONDOWN:
                    self._on_click(event.pos)

    def _on_click(self, pos: tuple[int, int]) -> None:
        self._error_message = ""
        x, y = pos
        if x < self.BOARD_PIXELS:
            col = x // self.CELL_SIZE
            row = y // self.CELL_SIZE
            if not (0 <= row < BOARD_SIZE) or not (0 <= col < BOARD_SIZE):
                return
            self._cell_clicked(row * BOARD_SIZE + col)
            return

        if self._restart_rect.collidepoint(pos):
            self._restart()
            return

        for rect, step in self._link_rects:
            if rect.collidepoint(pos):
                self._history_link_clicked(step)
                return

    def _render(self, view: ViewState) -> None:
        # Drawing happens on the pygame loop, which reads self._view every frame.
        self._view = view

    def _on_input_error(self, exception: Exception) -> None:
        self._error_message = str(exception)

    # -----------------------------
    # Drawing
    # -----------------------------

    def _draw(self) -> None:
        view = self._view
        pygame.display.set_caption(f"{self.TITLE} - {view.status}")
        self._screen.fill(self.BG_COLOR)
        self._draw_winning_line(view)
        self._draw_grid()
        self._draw_marks(view)
        self._draw_panel(view)
        pygame.display.flip()

    def _cell_rect(self, index: int) -> pygame.Rect:
        row, col = divmod(index, BOARD_SIZE)
        return pygame.Rect(col * self.CELL_SIZE, row * self.CELL_SIZE, self.CELL_SIZE, self.CELL_SIZE)

    def _draw_winning_line(self, view: ViewState) -> None:
        if view.winning_line is None:
            return
        for index in view.winning_line:
            pygame.draw.rect(self._screen, self.WIN_COLOR, self._cell_rect(index))

    def _draw_grid(self) -> None:
        for i in range(1, BOARD_SIZE):
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (0, i * self.CELL_SIZE),
                (self.BOARD_PIXELS, i * self.CELL_SIZE),
                self.LINE_WIDTH,
            )
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (i * self.CELL_SIZE, 0),
                (i * self.CELL_SIZE, self.BOARD_PIXELS),
                self.LINE_WIDTH,
            )

    def _draw_marks(self, view: ViewState) -> None:
        for index, value in enumerate(view.board.cells):
            if value is None:
                continue
            text = self._font.render(value, True, self.X_COLOR if value == "X" else self.O_COLOR)  # noqa: FBT003
            rect = text.get_rect(center=self._cell_rect(index).center)
            self._screen.blit(text, rect)

    def _draw_panel(self, view: ViewState) -> None:
        left = self.BOARD_PIXELS
        pygame.draw.rect(self._screen, self.PANEL_COLOR, pygame.Rect(left, 0, self.PANEL_WIDTH, self.BOARD_PIXELS))
        x = left + self.MARGIN
        y = self.MARGIN

        status = f"{view.status} (draw)" if view.is_draw else view.status
        self._screen.blit(self._status_font.render(status, True, self.TEXT_COLOR), (x, y))  # noqa: FBT003
        y += self.ROW_HEIGHT + 4

        restart_text = self._small_font.render("[ Restart ]", True, self.TEXT_COLOR)  # noqa: FBT003
        self._restart_rect = restart_text.get_rect(topleft=(x, y))
        self._screen.blit(restart_text, self._restart_rect)
        y += self.ROW_HEIGHT

        if self._error_message:
            error_text = self._small_font.render(self._error_message, True, self.ERROR_COLOR)  # noqa: FBT003
            self._screen.blit(error_text, (x, y))
        y += self.ROW_HEIGHT

        self._link_rects = []
        for link in view.move_list:
            color = self.CURRENT_COLOR if link.is_current else self.TEXT_COLOR
            text = self._small_font.render(f"{link.step}. {link.label}", True, color)  # noqa: FBT003
            rect = text.get_rect(topleft=(x, y))
            self._screen.blit(text, rect)
            self._link_rects.append((rect, link.step))
            y += self.ROW_HEIGHT
