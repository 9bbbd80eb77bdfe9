import itertools
import random

import pytest

from dungeon_arcade.maze import Maze, MazeGame, MazePlayer


def test_create_guarantees_path():
    maze = Maze(10, 20, random.Random(4))
    maze.create()
    assert maze.has_path()
    assert maze.grid[1][1] == " "
    assert maze.grid[9][18] == "E"
    assert maze.is_exit(9, 18)


def test_border_stays_wall():
    maze = Maze(8, 12, random.Random(9))
    maze.create()
    assert all(maze.is_wall(0, c) for c in range(12))
    assert all(maze.is_wall(r, 0) for r in range(8))
    assert all(maze.is_wall(r, 11) for r in range(8))


def test_blocked_maze_has_no_path():
    maze = Maze(3, 4, random.Random(1))
    maze.create()
    maze.grid[1][2] = "#"
    assert not maze.has_path()


def test_render_has_one_line_per_row():
    maze = Maze(5, 7, random.Random(2))
    maze.create()
    lines = maze.render().splitlines()
    assert len(lines) == 5
    assert all(len(line) == 7 for line in lines)


def test_too_small_maze_rejected():
    with pytest.raises(ValueError):
        Maze(2, 5)


def test_player_moves_by_key():
    player = MazePlayer(1, 1)
    player.move("s")
    player.move("d")
    player.move("x")
    assert (player.row, player.col) == (2, 2)
    player.move("w")
    player.move("a")
    assert (player.row, player.col) == (1, 1)


def test_try_move_blocked_by_wall():
    game = MazeGame(3, 4, 10, out=lambda s: None, rng=random.Random(3))
    game.maze.create()
    assert game.try_move("w") is False
    assert game.try_move("q") is False
    assert (game.player.row, game.player.col) == (1, 1)
    assert game.try_move("d") is True
    assert (game.player.row, game.player.col) == (1, 2)


def test_escape_awards_coins():
    keys = iter(["d", "s"])
    game = MazeGame(3, 4, 60, clock=lambda: 0.0, sleep=lambda s: None,
                    out=lambda s: None, rng=random.Random(6), coins=1)
    assert game.start(lambda: next(keys, None)) is True
    assert game.coins - 1 == 3


def test_timeout_ends_game():
    ticks = itertools.count()
    shown = []
    game = MazeGame(10, 20, 5, clock=lambda: float(next(ticks)), sleep=lambda s: None,
                    out=shown.append, rng=random.Random(8))
    assert game.start(lambda: None) is False
    assert game.is_time_over()
    assert shown[-1] == "제한 시간 초과! 탈출 실패..."
    assert game.coins == 0