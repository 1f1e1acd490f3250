import tkinter as tk
from functools import partial
from tkinter import font as tkfont
from typing import Final

from py_tic_tac_toe_history.board import BOARD_SIZE, CELL_COUNT
from py_tic_tac_toe_history.game_engine import GameEngine
from py_tic_tac_toe_history.ui import Ui
from py_tic_tac_toe_history.view import ViewState


class TkUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Tk)"
    WIN_COLOR: Final = "#bfe3bf"

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self._buttons: list[tk.Button] = []
        self._move_buttons: list[tk.Button] = []

    def run(self) -> None:
        self._root = tk.Tk()
        self._root.title(self.TITLE)
        self._root.protocol("WM_DELETE_WINDOW", self._stop)
        self._build_widgets()
        super().run()
        self._root.mainloop()

    def _stop(self) -> None:
        self._root.after(0, self._root.quit)
        super()._stop()

    # -----------------------------
    # UI construction
    # -----------------------------

    def _build_widgets(self) -> None:
        board_frame = tk.Frame(self._root)
        board_frame.grid(row=0, column=0, padx=8, pady=8, sticky="n")
        info_frame = tk.Frame(self._root)
        info_frame.grid(row=0, column=1, padx=8, pady=8, sticky="n")

        for i in range(CELL_COUNT):
            btn = tk.Button(
                board_frame,
                text="",
                width=4,
                height=2,
                font=("Helvetica", 32),
                command=partial(self._on_click, i),
            )
            row, col = divmod(i, BOARD_SIZE)
            btn.grid(row=row, column=col, padx=2, pady=2)
            self._buttons.append(btn)
        self._default_bg = self._buttons[0].cget("background")

        self._status_var = tk.StringVar(master=self._root)
        tk.Label(info_frame, textvariable=self._status_var, font=("Helvetica", 14)).pack(anchor="w")
        self._error_var = tk.StringVar(master=self._root)
        tk.Label(info_frame, textvariable=self._error_var, fg="red").pack(anchor="w")
        tk.Button(info_frame, text="Restart", command=self._restart).pack(anchor="w", pady=(0, 8))
        self._moves_frame = tk.Frame(info_frame)
        self._moves_frame.pack(anchor="w")

        self._normal_font = tkfont.Font(root=self._root, family="Helvetica", size=11)
        self._bold_font = tkfont.Font(root=self._root, family="Helvetica", size=11, weight="bold")

    # -----------------------------
    # Event handling
    # -----------------------------

    def _on_click(self, index: int) -> None:
        if not self._running:
            return
        self._error_var.set("")
        self._cell_clicked(index)

    def _on_history_click(self, step: int) -> None:
        if not self._running:
            return
        self._error_var.set("")
        self._history_link_clicked(step)

    def on_state_updated(self, view: ViewState) -> None:
        # The engine may call back from another UI's thread; redraw on the Tk loop.
        self._view = view
        if not self._running:
            return
        self._root.after(0, self._render, view)

    def _render(self, view: ViewState) -> None:
        for i, btn in enumerate(self._buttons):
            value = view.board[i]
            highlight = view.winning_line is not None and i in view.winning_line
            btn.config(
                text=value if value is not None else "",
                background=self.WIN_COLOR if highlight else self._default_bg,
            )

        status = view.status
        if view.is_draw:
            status = f"{status} (draw)"
        self._status_var.set(status)
        self._root.title(f"{self.TITLE} - {view.status}")

        for btn in self._move_buttons:
            btn.destroy()
        self._move_buttons = []
        for link in view.move_list:
            btn = tk.Button(
                self._moves_frame,
                text=f"{link.step}. {link.label}",
                font=self._bold_font if link.is_current else self._normal_font,
                anchor="w",
                command=partial(self._on_history_click, link.step),
            )
            btn.pack(fill="x")
            self._move_buttons.append(btn)

    def _on_input_error(self, exception: Exception) -> None:
        if not hasattr(self, "_error_var"):
            return
        # Error callbacks may arrive from another UI's thread.
        self._root.after(0, self._error_var.set, str(exception))
