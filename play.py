from __future__ import annotations
import argparse
import logging
import random
from typing import Optional, Tuple, Union

from minesweeper.engine import GameConfig, new_game
from minesweeper.errors import ConfigurationError
from minesweeper.modes import Action
from minesweeper.observation import status_line

HELP = 'Commands: r ROW COL (reveal), f ROW COL (flag), m (toggle mode), n (new game), q (quit)'

Command = Tuple[Union[Action, str], Optional[int], Optional[int]]


def parse_command(line: str) -> Command:
    parts = line.split()
    if not parts:
        raise ValueError('empty command')
    verb = parts[0].lower()
    if verb in ('q', 'quit'):
        return ('quit', None, None)
    if verb in ('n', 'new'):
        return ('new', None, None)
    if verb in ('m', 'mode'):
        return (Action.TOGGLE_MODE, None, None)
    if verb in ('r', 'reveal', 'f', 'flag'):
        if len(parts) != 3:
            raise ValueError(f'{verb} needs ROW and COL')
        row, col = int(parts[1]), int(parts[2])
        action = Action.REVEAL if verb.startswith('r') else Action.FLAG
        return (action, row, col)
    raise ValueError(f'unknown command {verb!r}')


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--height', type=int, default=10)
    parser.add_argument('--width', type=int, default=10)
    parser.add_argument('--mines', type=int, default=10)
    parser.add_argument('--seed', type=int, default=-1, help='RNG seed; <0 uses OS entropy (random every run)')
    parser.add_argument('--verbose', action='store_true', help='Log engine decisions at DEBUG level')
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    try:
        config = GameConfig(args.height, args.width, args.mines)
    except ConfigurationError as e:
        parser.error(str(e))
    rng = random.Random(None if args.seed < 0 else args.seed)
    game = new_game(config, rng=rng)
    print(f"[play] {config.height}x{config.width} board, {config.num_mines} mines")
    print(HELP)

    while True:
        print()
        print(game.render_ascii())
        print(status_line(game))
        if game.is_over:
            print('WIN' if game.won else 'LOSE')
            print("[play] 'n' starts a new game, 'q' quits")
        try:
            line = input(f'{game.mode.name.lower()}> ')
        except EOFError:
            break
        try:
            action, row, col = parse_command(line)
        except ValueError as e:
            print(f'[play] {e}. {HELP}')
            continue
        if action == 'quit':
            break
        if action == 'new':
            game.restart()
            continue
        game.dispatch(action, row, col)


if __name__ == '__main__':
    main()
