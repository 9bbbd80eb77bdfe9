"""Random maze escape against a time limit."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable

WALL = "#"
PATH = " "
EXIT = "E"
ESCAPE_REWARD = 3

_STEPS = {"w": (-1, 0), "s": (1, 0), "a": (0, -1), "d": (0, 1)}


class Maze:
    """A grid of walls and open cells with one exit on the bottom edge."""

    def __init__(self, rows: int, cols: int, rng: random.Random | None = None) -> None:
        if rows < 3 or cols < 3:
            raise ValueError("maze needs at least 3 rows and 3 columns")
        self.rows = rows
        self.cols = cols
        self.grid = [[WALL] * cols for _ in range(rows)]
        self.exit = (rows - 1, cols - 2)
        self._rng = rng or random.Random()

    def create(self) -> None:
        """Fill the interior at random until the exit is reachable from (1, 1)."""
        while True:
            for row in range(1, self.rows - 1):
                for col in range(1, self.cols - 1):
                    self.grid[row][col] = PATH if self._rng.randrange(3) else WALL
            self.grid[1][1] = PATH
            exit_row, exit_col = self.exit
            self.grid[exit_row][exit_col] = EXIT
            if self.has_path():
                return

    def render(self) -> str:
        return "\n".join("".join(row) for row in self.grid)

    def is_wall(self, row: int, col: int) -> bool:
        return self.grid[row][col] == WALL

    def is_exit(self, row: int, col: int) -> bool:
        return (row, col) == self.exit

    def has_path(self) -> bool:
        """True when the exit can be reached from the start cell."""
        seen: set[tuple[int, int]] = set()
        stack = [(1, 1)]
        while stack:
            row, col = stack.pop()
            if not (0 <= row < self.rows and 0 <= col < self.cols):
                continue
            if self.grid[row][col] == WALL or (row, col) in seen:
                continue
            if (row, col) == self.exit:
                return True
            seen.add((row, col))
            stack.extend(
                (row + dr, col + dc) for dr, dc in reversed(list(_STEPS.values()))
            )
        return False


@dataclass
class MazePlayer:
    """Position of the player in the maze, as row and column."""

    row: int
    col: int

    def move(self, direction: str) -> None:
        step = _STEPS.get(direction)
        if step is not None:
            self.row += step[0]
            self.col += step[1]


class MazeGame:
    """Escape a fresh maze before the time limit runs out."""

    def __init__(
        self,
        rows: int,
        cols: int,
        time_limit: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], object] = time.sleep,
        out: Callable[[str], object] = print,
        rng: random.Random | None = None,
        coins: int = 0,
    ) -> None:
        self.maze = Maze(rows, cols, rng)
        self.player = MazePlayer(1, 1)
        self.time_limit = time_limit
        self.coins = coins
        self._clock = clock
        self._sleep = sleep
        self._out = out
        self._start_time = clock()

    def remaining(self) -> int:
        return max(0, int(self.time_limit - (self._clock() - self._start_time)))

    def is_time_over(self) -> bool:
        return self._clock() - self._start_time >= self.time_limit

    def try_move(self, key: str) -> bool:
        """Move one step for a w/a/s/d key unless blocked; return whether it moved."""
        step = _STEPS.get(key)
        if step is None:
            return False
        row, col = self.player.row + step[0], self.player.col + step[1]
        if not (0 <= row < self.maze.rows and 0 <= col < self.maze.cols):
            return False
        if self.maze.is_wall(row, col):
            return False
        self.player.move(key)
        return True

    def _draw(self) -> str:
        lines = ["".join(row) for row in self.maze.grid]
        row, col = self.player.row, self.player.col
        line = lines[row]
        lines[row] = line[:col] + "P" + line[col + 1:]
        return "\n".join(lines)

    def start(self, read_key: Callable[[], str | None]) -> bool:
        """Play until escape or timeout; return True on escape.

        read_key returns the next pressed key, or None when no key is waiting.
        """
        self.maze.create()
        self.player = MazePlayer(1, 1)
        self._start_time = self._clock()
        self._out(self._draw())
        shown_remaining = None
        while True:
            remaining = self.remaining()
            if remaining != shown_remaining:
                self._out(f"남은시간 : {remaining}초")
                shown_remaining = remaining

            key = read_key()
            if key and self.try_move(key):
                self._out(self._draw())

            if self.maze.is_exit(self.player.row, self.player.col):
                self.coins += ESCAPE_REWARD
                self._out("★ 탈출 성공!! ★\n코인 3개를 드립니다!!")
                self._out(f"현재 코인: {self.coins}")
                return True

            if self.is_time_over():
                self._out("제한 시간 초과! 탈출 실패...")
                return False

            self._sleep(0.03)