from collections import deque

import pytest

from dungeon_arcade.dungeon import (
    HELP_LINE,
    DungeonMap,
    Monster,
    RoomKind,
    Tile,
    place_monsters,
    run_dungeon,
)


@pytest.fixture
def dungeon():
    m = DungeonMap(120, 30)
    m.generate_linear_dungeon(5)
    return m


def _reachable_cells(m, start):
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, ny = x + dx, y + dy
            if m.in_bounds(nx, ny) and (nx, ny) not in seen and m.at(nx, ny).walkable:
                seen.add((nx, ny))
                queue.append((nx, ny))
    return seen


def _player_pos(frame):
    for row, line in enumerate(frame.split("\n")):
        col = line.find("@")
        if col >= 0:
            return col, row
    raise AssertionError("no player in frame")


def test_map_rejects_non_positive_size():
    with pytest.raises(ValueError):
        DungeonMap(0, 10)
    with pytest.raises(ValueError):
        DungeonMap(10, -1)


def test_new_map_is_all_walls():
    m = DungeonMap(4, 3)
    assert m.at(0, 0) == Tile("#", False)
    assert m.at(3, 2) == Tile("#", False)


def test_in_bounds():
    m = DungeonMap(4, 3)
    assert m.in_bounds(3, 2)
    assert not m.in_bounds(4, 0)
    assert not m.in_bounds(-1, 0)


def test_at_outside_raises():
    with pytest.raises(IndexError):
        DungeonMap(4, 3).at(4, 0)


def test_room_sequence(dungeon):
    kinds = [room.kind for room in dungeon.rooms]
    assert kinds == [RoomKind.START] + [RoomKind.MINI_GAME] * 5 + [RoomKind.BOSS]
    assert [room.mini_game_id for room in dungeon.rooms] == [-1, 1, 2, 3, 4, 5, -1]


def test_room_sizes(dungeon):
    start, boss = dungeon.rooms[0].area, dungeon.rooms[-1].area
    assert (start.x, start.w, start.h) == (3, 12, 9)
    assert (boss.w, boss.h) == (18, 11)


def test_room_border_and_floor(dungeon):
    boss = dungeon.rooms[-1].area
    assert dungeon.at(boss.x, boss.y).glyph == "#"
    assert dungeon.at(boss.x + boss.w - 1, boss.y + boss.h - 1).glyph == "#"
    cx, cy = boss.center
    assert dungeon.at(cx, cy).glyph == "."
    assert dungeon.at(cx, cy).walkable


def test_doors_before_each_room(dungeon):
    for room in dungeon.rooms[1:]:
        _, cy = room.area.center
        door = dungeon.at(room.area.x - 2, cy)
        assert door.glyph == "+"
        assert door.walkable


def test_start_connected_to_boss(dungeon):
    start_center = dungeon.rooms[0].area.center
    boss_center = dungeon.rooms[-1].area.center
    reachable = _reachable_cells(dungeon, start_center)
    assert boss_center in reachable
    assert dungeon.at(*boss_center).glyph == "."
    for room in dungeon.rooms[1:]:
        door = (room.area.x - 2, room.area.center[1])
        assert door in reachable
        assert dungeon.at(*door).glyph == "+"


def test_no_mini_rooms_still_connected():
    m = DungeonMap(60, 20)
    m.generate_linear_dungeon(0)
    assert [room.kind for room in m.rooms] == [RoomKind.START, RoomKind.BOSS]
    boss_center = m.rooms[1].area.center
    assert boss_center in _reachable_cells(m, m.rooms[0].area.center)
    assert m.at(*boss_center).walkable


def test_negative_room_count_rejected():
    with pytest.raises(ValueError):
        DungeonMap(120, 30).generate_linear_dungeon(-1)


def test_map_too_small_rejected():
    with pytest.raises(ValueError):
        DungeonMap(50, 30).generate_linear_dungeon(5)


def test_regenerate_replaces_rooms(dungeon):
    dungeon.generate_linear_dungeon(5)
    assert len(dungeon.rooms) == 7


def test_render(dungeon):
    lines = dungeon.render().split("\n")
    assert len(lines) == dungeon.height + 1
    assert lines[-1] == HELP_LINE
    assert all(len(line) == dungeon.width for line in lines[:-1])


def test_monster_is_near_player():
    m = Monster(5, 5, 0, 1)
    assert m.is_near_player(5, 6)
    assert m.is_near_player(4, 5)
    assert not m.is_near_player(6, 6)
    assert not m.is_near_player(5, 5)


def test_interact_runs_mini_game_once(dungeon):
    calls = []
    x, y = dungeon.rooms[1].area.center
    dungeon.at(x, y).walkable = False
    monster = Monster(x, y, 1, 1, mini_game=lambda: calls.append(1))
    assert monster.interact(dungeon) is True
    assert dungeon.at(x, y).walkable
    assert not monster.active
    assert monster.interact(dungeon) is False
    assert calls == [1]


def test_run_dungeon_quits_on_q():
    frames = []
    keys = iter(["q"])
    assert run_dungeon(lambda: next(keys), frames.append) == 0
    assert len(frames) == 1
    assert "@" in frames[0]


def test_run_dungeon_stops_when_input_ends():
    frames = []
    assert run_dungeon(lambda: None, frames.append) == 0
    assert len(frames) == 1


def test_run_dungeon_moves_player_right():
    frames = []
    keys = iter(["d", "\x1b"])
    run_dungeon(lambda: next(keys), frames.append)
    first_x, first_y = _player_pos(frames[0])
    last_x, last_y = _player_pos(frames[-1])
    assert (last_x, last_y) == (first_x + 1, first_y)


def test_run_dungeon_walls_block_movement():
    reference = DungeonMap(120, 30)
    reference.generate_linear_dungeon(5)
    top_floor = reference.rooms[0].area.y + 1
    frames = []
    keys = iter(["w"] * 10 + ["q"])
    run_dungeon(lambda: next(keys), frames.append)
    assert _player_pos(frames[-1])[1] == top_floor