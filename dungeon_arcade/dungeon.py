"""Linear dungeon of rooms joined by corridors, with monsters guarding mini games."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

ROOM_W = 12
ROOM_H = 9
SPACING = 4
BOSS_W = 18
BOSS_H = 11
START_X = 3
BOSS_MINIGAME_ID = 999
HELP_LINE = "W,A,S,D 이동, Q or ESC 종료"

_QUIT_KEYS = {"\x1b", "q", "Q"}
_STEPS = {"w": (0, -1), "s": (0, 1), "a": (-1, 0), "d": (1, 0)}


@dataclass
class Tile:
    """One map cell: '#' wall, '.' floor, '+' door, ' ' empty space."""

    glyph: str = "#"
    walkable: bool = False


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    w: int
    h: int

    @property
    def center(self) -> tuple[int, int]:
        return self.x + self.w // 2, self.y + self.h // 2


class RoomKind(Enum):
    START = "start"
    MINI_GAME = "minigame"
    BOSS = "boss"


@dataclass(frozen=True)
class Room:
    """A room's area and purpose; mini_game_id is 1..N for mini game rooms, else -1."""

    area: Rect = Rect(0, 0, 0, 0)
    kind: RoomKind = RoomKind.START
    mini_game_id: int = -1


class DungeonMap:
    """A grid of tiles holding a row of rooms that ends in a boss room."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Map size must be positive")
        self.width = width
        self.height = height
        self._tiles = [[Tile() for _ in range(width)] for _ in range(height)]
        self.rooms: list[Room] = []

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the map")
        return self._tiles[y][x]

    def _clear(self) -> None:
        for row in self._tiles:
            for tile in row:
                tile.glyph = " "
                tile.walkable = False

    def _carve_room(self, r: Rect) -> None:
        for y in range(r.y, r.y + r.h):
            for x in range(r.x, r.x + r.w):
                if not self.in_bounds(x, y):
                    continue
                tile = self._tiles[y][x]
                border = y in (r.y, r.y + r.h - 1) or x in (r.x, r.x + r.w - 1)
                tile.glyph = "#" if border else "."
                tile.walkable = not border

    def _carve_h_corridor(self, x1: int, x2: int, y: int) -> None:
        x1, x2 = sorted((x1, x2))
        for x in range(x1, x2 + 1):
            if not self.in_bounds(x, y):
                continue
            tile = self._tiles[y][x]
            tile.glyph = "."
            tile.walkable = True
            for side in (y - 1, y + 1):
                if self.in_bounds(x, side):
                    edge = self._tiles[side][x]
                    if edge.glyph == " ":
                        edge.glyph = "#"
                        edge.walkable = False

    def _place_door(self, room: Rect) -> None:
        x, y = room.x - SPACING // 2, room.y + room.h // 2
        if self.in_bounds(x, y):
            door = self._tiles[y][x]
            door.glyph = "+"
            door.walkable = True

    def generate_linear_dungeon(self, num_mini_rooms: int = 5) -> None:
        """Lay out a start room, num_mini_rooms mini game rooms and a boss room in a row."""
        if num_mini_rooms < 0:
            raise ValueError("numMiniRooms must be >= 0")
        needed_width = (
            2 + ROOM_W * (1 + num_mini_rooms) + BOSS_W + SPACING * (num_mini_rooms + 2)
        )
        if self.width < needed_width or self.height < max(ROOM_H, BOSS_H) + 4:
            raise ValueError("Map is too small for the requested linear dungeon.")

        self._clear()
        self.rooms = []

        start_y = self.height // 2 - ROOM_H // 2
        start = Rect(START_X, start_y, ROOM_W, ROOM_H)
        self._carve_room(start)
        self.rooms.append(Room(start, RoomKind.START))
        prev_cx, prev_cy = start.center

        for number in range(1, num_mini_rooms + 1):
            room = Rect(START_X + (ROOM_W + SPACING) * number, start_y, ROOM_W, ROOM_H)
            self._carve_room(room)
            self.rooms.append(Room(room, RoomKind.MINI_GAME, number))
            cur_cx, cur_cy = room.center
            self._carve_h_corridor(prev_cx, cur_cx, prev_cy)
            self._place_door(room)
            prev_cx, prev_cy = cur_cx, cur_cy

        boss = Rect(
            START_X + (ROOM_W + SPACING) * (num_mini_rooms + 1),
            self.height // 2 - BOSS_H // 2,
            BOSS_W,
            BOSS_H,
        )
        self._carve_room(boss)
        self.rooms.append(Room(boss, RoomKind.BOSS))
        self._carve_h_corridor(prev_cx, boss.center[0], prev_cy)
        self._place_door(boss)

    def _rows(self) -> list[list[str]]:
        return [[tile.glyph for tile in row] for row in self._tiles]

    def render(self) -> str:
        """Return the whole map followed by the controls line."""
        lines = ["".join(row) for row in self._rows()]
        lines.append(HELP_LINE)
        return "\n".join(lines)


@dataclass
class Monster:
    """A monster standing in a room; talking to it starts its mini game once."""

    x: int
    y: int
    room_id: int
    minigame_id: int
    symbol: str = "○"
    active: bool = True
    mini_game: Callable[[], object] | None = field(default=None, repr=False)

    def is_near_player(self, px: int, py: int) -> bool:
        return abs(px - self.x) + abs(py - self.y) == 1

    def interact(self, dungeon: DungeonMap) -> bool:
        """Start the mini game if not done yet and free the tile; return whether it ran."""
        if not self.active:
            return False
        if self.mini_game is not None:
            self.mini_game()
        self.active = False
        dungeon.at(self.x, self.y).walkable = True
        return True


def place_monsters(dungeon: DungeonMap) -> list[Monster]:
    """Put a monster in the centre of every mini game and boss room.

    Every room centre, the start room's included, is made unwalkable.
    """
    monsters = []
    for index, room in enumerate(dungeon.rooms):
        cx, cy = room.area.center
        if room.kind is RoomKind.MINI_GAME:
            monsters.append(Monster(cx, cy, index, index + 1, "●"))
        elif room.kind is RoomKind.BOSS:
            monsters.append(Monster(cx, cy, index, BOSS_MINIGAME_ID, "★"))
        dungeon.at(cx, cy).walkable = False
    return monsters


def _frame(dungeon: DungeonMap, monsters: list[Monster], px: int, py: int) -> str:
    rows = dungeon._rows()
    for monster in monsters:
        if monster.active:
            rows[monster.y][monster.x] = monster.symbol
    rows[py][px] = "@"
    lines = ["".join(row) for row in rows]
    lines.append(HELP_LINE)
    return "\n".join(lines)


def run_dungeon(
    read_key: Callable[[], str | None],
    out: Callable[[str], object] = print,
) -> int:
    """Walk the dungeon with w/a/s/d, space talks to a monster next to the player.

    Stops on q, Q, ESC or when read_key returns None. Returns the exit status.
    """
    dungeon = DungeonMap(120, 30)
    dungeon.generate_linear_dungeon(5)
    px, py = dungeon.rooms[0].area.center
    monsters = place_monsters(dungeon)
    out(_frame(dungeon, monsters, px, py))

    while True:
        key = read_key()
        if key is None or key in _QUIT_KEYS:
            break
        if key == " ":
            for monster in monsters:
                if monster.is_near_player(px, py):
                    monster.interact(dungeon)
        step = _STEPS.get(key)
        if step is not None:
            nx, ny = px + step[0], py + step[1]
            if dungeon.in_bounds(nx, ny) and dungeon.at(nx, ny).walkable:
                px, py = nx, ny
        out(_frame(dungeon, monsters, px, py))
    return 0


def _read_key() -> str | None:
    try:
        import msvcrt
    except ImportError:
        msvcrt = None
    if msvcrt is not None:
        return msvcrt.getwch()
    if not sys.stdin.isatty():
        return sys.stdin.read(1) or None
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return sys.stdin.read(1) or None
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def main(argv: list[str] | None = None) -> int:
    """Run the dungeon on the terminal."""
    return run_dungeon(_read_key, print)


if __name__ == "__main__":
    raise SystemExit(main())