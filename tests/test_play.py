import pytest

from minesweeper.modes import Action
from play import parse_command


@pytest.mark.parametrize('line,expected', [
    ('r 1 2', (Action.REVEAL, 1, 2)),
    ('reveal 0 0', (Action.REVEAL, 0, 0)),
    ('F 3 4', (Action.FLAG, 3, 4)),
    ('m', (Action.TOGGLE_MODE, None, None)),
    ('n', ('new', None, None)),
    ('quit', ('quit', None, None)),
])
def test_parse_command(line, expected):
    assert parse_command(line) == expected


@pytest.mark.parametrize('line', ['', 'x', 'r 1', 'f a b', 'r 1 2 3'])
def test_parse_command_rejects_garbage(line):
    with pytest.raises(ValueError):
        parse_command(line)
