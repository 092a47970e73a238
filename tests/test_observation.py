import numpy as np

from minesweeper.observation import FLAGGED, HIDDEN, MINE, encode_view, status_line


def test_encode_view_hides_mines(walled_game):
    out = encode_view(walled_game)
    assert out.shape == (5, 5)
    assert out.dtype == np.int8
    assert (out == HIDDEN).all()


def test_encode_view_after_flood_and_flag(walled_game):
    walled_game.dispatch_reveal(0, 0)
    walled_game.dispatch_toggle_mode()
    walled_game.dispatch_flag(1, 3)
    out = encode_view(walled_game)
    assert out[:, :2].tolist() == [[0, 0]] * 5
    assert out[:, 2].tolist() == [2, 2, 2, 1, 1]
    assert out[1, 3] == FLAGGED
    assert out[0, 3] == HIDDEN
    assert (out >= 0).sum() == walled_game.num_visible


def test_encode_view_shows_mines_after_loss(walled_game):
    walled_game.dispatch_reveal(3, 3)
    out = encode_view(walled_game)
    assert (out == MINE).sum() == 3
    assert out[3, 3] == MINE
    assert (out >= 0).all()


def test_status_line(walled_game):
    walled_game.dispatch_reveal(0, 0)
    walled_game.dispatch_toggle_mode()
    walled_game.dispatch_flag(1, 3)
    assert status_line(walled_game) == 'mode: flag | flags: 1/3 | hidden: 9 | revealed: 15'
