"""Side-view platform game over five fixed levels."""

from __future__ import annotations

import time
from typing import Callable, Collection

from dungeon_arcade.economy import PlayerStats

WIDTH = 30
HEIGHT = 10
MAX_JUMP = 3
START_HEARTS = 3
START_RESETS = 3
WIN_BONUS = 10
WALL_JUMPER_PRICE = 5
TOUGH_PRICE = 1

LEVELS = (
    (
        "##############################",
        "#                            #",
        "#     C             E        #",
        "#     C    X       ###       #",
        "#     C          X           #",
        "#             ####           #",
        "#         ##                 #",
        "#      X                     #",
        "#C                       J   #",
        "##############################",
    ),
    (
        "##############################",
        "#    H   X      C   X        #",
        "#   ###        ##    E       #",
        "# X           X    ###       #",
        "#  X                        X#",
        "#    X        ####           #",
        "#       ####   X             #",
        "#   X                        #",
        "#                            #",
        "##############################",
    ),
    (
        "##############################",
        "# X C           X       E X #",
        "#   ###   ###   ###   ###   #",
        "#   X   X   X       X   X   #",
        "# #### #### #### #### ####  #",
        "#      X     X     X     X  #",
        "#   ###   ###   ###   ###   #",
        "# X                        X#",
        "#                           #",
        "##############################",
    ),
    (
        "##############################",
        "#   C X       X       X J   #",
        "#  ### ### ### ### ### ###  #",
        "# X   X   X  X    X   X   X #",
        "#   ######     ######       #",
        "#X   H    X X       X X     #",
        "#   ###     ###     ###     #",
        "# X      X       X       X  #",
        "#        X         X      E #",
        "#############################",
    ),
    (
        "##############################",
        "#                         E  #",
        "#                          X #",
        "#                        X   #",
        "#                      X     #",
        "#                  XX        #",
        "#               XX           #",
        "#            XX              #",
        "#         XX               C #",
        "##############################",
    ),
)
MAX_LEVEL = len(LEVELS)

_CHARACTER_MENU = "1. @ 능력없음\n2. & 벽점프 가능 (5코인)\n3. # 기본체력 4칸 (1코인)"


class JumpGame:
    """Jump across platforms, bouncing off X blocks, to reach the E exit."""

    MAX_JUMP = MAX_JUMP
    MAX_LEVEL = MAX_LEVEL

    def __init__(
        self,
        stats: PlayerStats | None = None,
        out: Callable[[str], object] = print,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self.stats = stats if stats is not None else PlayerStats()
        self._out = out
        self._sleep = sleep
        self.player_char = "@"
        self.heart = START_HEARTS
        self.reset_count = START_RESETS
        self.current_level = 0
        self.game_win = False
        self.restart_level = False
        self.double_jump_available = False
        self.grid: list[list[str]] = []
        self.load_level(0)

    @property
    def coins(self) -> int:
        return self.stats.coins

    def load_level(self, level: int) -> None:
        """Reset the map to the given level and put the player at the start."""
        if not 0 <= level < MAX_LEVEL:
            raise ValueError(f"level must be between 0 and {MAX_LEVEL - 1}")
        self.grid = [list(row[:WIDTH].ljust(WIDTH)) for row in LEVELS[level]]
        self.player_x = 1
        self.player_y = HEIGHT - 2
        self.jumping = False
        self.jump_height = 0

    def _tile(self, dx: int = 0, dy: int = 0) -> str:
        return self.grid[self.player_y + dy][self.player_x + dx]

    def _clear_tile(self, dy: int = 0) -> None:
        self.grid[self.player_y + dy][self.player_x] = " "

    def is_on_ground(self) -> bool:
        return self._tile(dy=1) == "#"

    def render(self) -> str:
        lines = []
        for y, row in enumerate(self.grid):
            cells = list(row)
            if y == self.player_y:
                cells[self.player_x] = self.player_char
            lines.append("".join(cells))
        lines.append(f"체력: {self.heart}   레벨: {self.current_level + 1}/{MAX_LEVEL}")
        lines.append(f"현재 코인: {self.coins}        다시하기 가능 기회: {self.reset_count}")
        lines.append("게임 중 R을 눌러 재시작 가능")
        return "\n".join(lines)

    def apply_input(
        self,
        left: bool = False,
        right: bool = False,
        jump: bool = False,
        restart: bool = False,
    ) -> None:
        """Apply the keys held during one frame."""
        if left and self._tile(dx=-1) != "#":
            self.player_x -= 1
        if right and self._tile(dx=1) != "#":
            self.player_x += 1
        if jump and not self.jumping and self.is_on_ground():
            self.jumping = True
            self.jump_height = MAX_JUMP
        if restart and self.reset_count > 0:
            self.restart_level = True
            self.reset_count -= 1

    def jump(self) -> None:
        """Rise one row while a jump lasts and nothing is overhead."""
        if not self.jumping:
            return
        if self.jump_height > 0 and self._tile(dy=-1) != "#":
            self.player_y -= 1
            self.jump_height -= 1
        else:
            self.jumping = False

    def update(self) -> None:
        """Advance one frame: jumping, falling, blocks, pickups and the exit."""
        self.jump()

        if self._tile(dy=1) == "X":
            self._clear_tile(dy=1)
            self.jumping = True
            self.jump_height = MAX_JUMP
        elif self._tile() == "X":
            self.heart -= 1
            self._clear_tile()
        if not self.jumping and not self.is_on_ground():
            self.player_y += 1

        if self._tile() == "E":
            self.current_level += 1
            if self.current_level >= MAX_LEVEL:
                self.game_win = True
            else:
                self.load_level(self.current_level)
        tile = self._tile()
        if tile == "H":
            self.heart += 1
            self._clear_tile()
        elif tile == "J":
            self.double_jump_available = True
            self._clear_tile()
        elif tile == "C":
            self.stats.coins += 1
            self._clear_tile()

    def choose_character(self, choice: str) -> bool:
        """Pick a character by menu key; return False if unknown or unaffordable."""
        if choice == "1":
            self.player_char = "@"
            return True
        if choice == "2" and self.coins >= WALL_JUMPER_PRICE:
            self.player_char = "&"
            self.stats.coins -= WALL_JUMPER_PRICE
            return True
        if choice == "3" and self.coins >= TOUGH_PRICE:
            self.player_char = "#"
            self.stats.coins -= TOUGH_PRICE
            self.heart = 4
            return True
        return False

    def end_message(self) -> str:
        """Return the closing message; a win also pays the bonus coins."""
        if self.game_win:
            self.stats.coins += WIN_BONUS
            return "모든 레벨 클리어!\n추가코인 10개 증정!!"
        return "게임 오버!"

    def start(
        self,
        read_keys: Callable[[], Collection[str]],
        read_key: Callable[[], str],
    ) -> bool:
        """Play rounds until the player declines a replay; return whether the last was won.

        read_keys returns the keys held this frame; read_key waits for one key press.
        """
        while True:
            self.current_level = 0
            self.heart = START_HEARTS
            self.reset_count = START_RESETS
            self.game_win = False
            self.restart_level = False

            self._out(
                "==============================\n"
                "        Game Start!\n"
                "  아무 키나 누르면 시작합니다.\n"
                "=============================="
            )
            read_key()

            self._out(f"캐릭터를 선택하세요:\n현재코인: {self.coins}\n{_CHARACTER_MENU}")
            while not self.choose_character(read_key()):
                pass
            self.load_level(self.current_level)

            while True:
                self._out(self.render())
                held = {key.lower() for key in read_keys()}
                self.apply_input(
                    left="a" in held,
                    right="d" in held,
                    jump=" " in held,
                    restart="r" in held,
                )
                self.update()
                self._sleep(0.05)
                if self.heart <= 0 or self.game_win:
                    break
                if self.restart_level:
                    self.load_level(self.current_level)
                    self.restart_level = False

            self._out(self.end_message())
            self._out("\nR을 눌러 다시 시작, 아무 키나 누르면 종료합니다.")
            if read_key() not in ("r", "R"):
                return self.game_win