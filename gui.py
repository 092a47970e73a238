from __future__ import annotations
import random
import tkinter as tk
from tkinter import ttk, messagebox

from minesweeper.engine import DisplayCategory, GameConfig, Minesweeper, new_game
from minesweeper.errors import ConfigurationError
from minesweeper.modes import GameMode


CELL_SIZE = 28
PADDING = 10
COLOR_MAP = {
    1: '#1976d2',
    2: '#388e3c',
    3: '#d32f2f',
    4: '#7b1fa2',
    5: '#5d4037',
    6: '#0097a7',
    7: '#455a64',
    8: '#9e9e9e',
}
STATUS_TEXT = {
    GameMode.SWEEP: 'Sweep mode: click a cell to reveal it',
    GameMode.FLAG: 'Flag mode: click a cell to mark or unmark it',
    GameMode.WON: 'You won!',
    GameMode.LOST: 'Boom. You lost.',
}


class MinesweeperGUI:
    def __init__(self, root: tk.Tk):
        self.root = root
        self.root.title('Minesweeper')

        # Controls
        control_frame = ttk.Frame(root)
        control_frame.pack(side=tk.TOP, fill=tk.X, padx=8, pady=6)

        ttk.Label(control_frame, text='Height').grid(row=0, column=0, sticky='w')
        self.height_var = tk.IntVar(value=10)
        ttk.Entry(control_frame, textvariable=self.height_var, width=4).grid(row=0, column=1)

        ttk.Label(control_frame, text='Width').grid(row=0, column=2, sticky='w')
        self.width_var = tk.IntVar(value=10)
        ttk.Entry(control_frame, textvariable=self.width_var, width=4).grid(row=0, column=3)

        ttk.Label(control_frame, text='Mines').grid(row=0, column=4, sticky='w')
        self.mines_var = tk.IntVar(value=10)
        ttk.Entry(control_frame, textvariable=self.mines_var, width=5).grid(row=0, column=5)

        self.btn_new = ttk.Button(control_frame, text='New Game', command=self.new_game)
        self.btn_new.grid(row=0, column=6, padx=4)
        self.btn_mode = ttk.Button(control_frame, text='Switch to Flag', command=self.toggle_mode)
        self.btn_mode.grid(row=0, column=7, padx=4)

        status_frame = ttk.Frame(root)
        status_frame.pack(side=tk.TOP, fill=tk.X, padx=8, pady=2)
        self.label_status = ttk.Label(status_frame, text='')
        self.label_status.pack(side=tk.LEFT)

        # Canvas for board
        self.canvas = tk.Canvas(root, bg='#eeeeee')
        self.canvas.pack(side=tk.TOP, padx=PADDING, pady=PADDING)
        self.canvas.bind('<Button-1>', self.on_click)

        self.rng = random.Random()
        self.game: Minesweeper | None = None
        self.new_game()

    def new_game(self):
        try:
            config = GameConfig(int(self.height_var.get()), int(self.width_var.get()), int(self.mines_var.get()))
        except (ConfigurationError, tk.TclError) as e:
            messagebox.showerror('Invalid board', str(e))
            return
        if self.game is not None and self.game.config == config:
            self.game.restart()
        else:
            self.game = new_game(config, rng=self.rng)
            print(f"[gui] New {config.height}x{config.width} game with {config.num_mines} mines")
        self._resize_canvas()
        self._render()

    def toggle_mode(self):
        assert self.game is not None
        self.game.dispatch_toggle_mode()
        self._render()

    def on_click(self, event):
        assert self.game is not None
        col = (event.x - PADDING) // CELL_SIZE
        row = (event.y - PADDING) // CELL_SIZE
        if not self.game.board.in_bounds(row, col):
            return
        if not self.game.get_cell_view(row, col).clickable:
            return
        if self.game.mode is GameMode.SWEEP:
            self.game.dispatch_reveal(row, col)
        else:
            self.game.dispatch_flag(row, col)
        self._render()

    def _resize_canvas(self):
        assert self.game is not None
        w = self.game.width * CELL_SIZE + PADDING * 2
        h = self.game.height * CELL_SIZE + PADDING * 2
        self.canvas.config(width=w, height=h)

    def _render(self):
        assert self.game is not None
        self.canvas.delete('all')
        for row in range(self.game.height):
            for col in range(self.game.width):
                px = PADDING + col * CELL_SIZE
                py = PADDING + row * CELL_SIZE
                view = self.game.get_cell_view(row, col)
                if view.category is DisplayCategory.FLAGGED:
                    self.canvas.create_rectangle(px, py, px+CELL_SIZE, py+CELL_SIZE, fill='#ffc107', outline='#999')
                    self.canvas.create_text(px+CELL_SIZE/2, py+CELL_SIZE/2, text='🚩', font=('Arial', 12))
                elif view.category is DisplayCategory.HIDDEN:
                    outline = '#616161' if view.clickable else '#9e9e9e'
                    self.canvas.create_rectangle(px, py, px+CELL_SIZE, py+CELL_SIZE, fill='#bdbdbd', outline=outline)
                elif view.category in (DisplayCategory.MINE_WON, DisplayCategory.MINE_LOST):
                    fill = '#66bb6a' if view.category is DisplayCategory.MINE_WON else '#ef5350'
                    self.canvas.create_rectangle(px, py, px+CELL_SIZE, py+CELL_SIZE, fill=fill, outline='#999')
                    self.canvas.create_text(px+CELL_SIZE/2, py+CELL_SIZE/2, text='💣', font=('Arial', 12))
                else:
                    self.canvas.create_rectangle(px, py, px+CELL_SIZE, py+CELL_SIZE, fill='#eeeeee', outline='#ccc')
                    if view.count:
                        color = COLOR_MAP.get(view.count, '#212121')
                        self.canvas.create_text(px+CELL_SIZE/2, py+CELL_SIZE/2, text=str(view.count), fill=color, font=('Helvetica', 12, 'bold'))
        self.label_status.config(text=f'{STATUS_TEXT[self.game.mode]} | Revealed: {self.game.num_visible}')
        if self.game.is_over:
            self.btn_mode.config(state='disabled')
        else:
            self.btn_mode.config(state='normal')
            next_mode = 'Sweep' if self.game.mode is GameMode.FLAG else 'Flag'
            self.btn_mode.config(text=f'Switch to {next_mode}')


def main():
    root = tk.Tk()
    app = MinesweeperGUI(root)
    root.mainloop()


if __name__ == '__main__':
    main()
