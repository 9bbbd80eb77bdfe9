"""Endless runner: jump over cacti and duck under birds while the score climbs."""

from __future__ import annotations

import math
import random
import time
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable

ESCAPE = "\x1b"
OFFSCREEN_X = -4.0

_TITLE = (
    "         ====================================================\n"
    "         ★★★★★★★  D I N O   R U N N E R ★★★★★★★\n"
    "         ====================================================\n"
)

_MENU = (
    " \t\t\t 1) 시작\n"
    " \t\t\t 2) 조작법 보기\n"
    " \t\t\t 3) 종료\n\n"
    "번호를 선택하세요: "
)

_HELP = (
    "\n\n[조작법]\n"
    " - 점프: Space 또는 ↑ (선인장 넘기)\n"
    " - 웅크리기(홀드): S 또는 ↓ (새 피하기)\n"
    " - 일시정지: P\n"
    " - 종료: Q\n\n"
    "[룰]\n"
    " - ★ 코인: 점수 400마다 1코인 획득.\n\n"
    "아무 키나 누르면 메뉴로 돌아갑니다..."
)

_JUMP_KEYS = {" ", "up"}


def _round(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class DinoConfig:
    """Board size, physics and spawn settings."""

    width: int = 70
    height: int = 26
    ground_y: int = 22
    base_delay: int = 18
    base_speed: float = 1.1
    gravity: float = 0.9
    jump_v: float = -4.5
    player_x: int = 10
    cactus_spawn_prob: float = 0.10
    bird_spawn_prob: float = 0.06
    bird_width: int = 3
    min_gap_tiles: int = 22
    max_gap_tiles: int = 34
    cactus_height: int = 2
    score_per_coin: int = 400


class ObstacleType(Enum):
    CACTUS_LOW = "cactus"
    BIRD_HIGH = "bird"


@dataclass
class Obstacle:
    """An obstacle at horizontal position x with height h."""

    type: ObstacleType
    x: float
    h: int


@dataclass
class DinoState:
    """Everything that changes while a run is in progress."""

    y: float = 0.0
    vy: float = 0.0
    on_ground: bool = True
    duck: bool = False
    obstacles: list[Obstacle] = field(default_factory=list)
    score: int = 0
    best_score: int = 0
    coins: int = 0
    running: bool = True
    paused: bool = False
    gap_remain: float = 0.0


class DinoRunner:
    """The runner game: physics, obstacles, collisions and the text display."""

    def __init__(
        self,
        config: DinoConfig | None = None,
        rng: random.Random | None = None,
        out: Callable[[str], object] = print,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        cfg = config if config is not None else DinoConfig()
        ground = max(cfg.ground_y, 2)
        ground = min(ground, cfg.height - 2)
        self.config = replace(cfg, ground_y=ground)
        self.rng = rng or random.Random()
        self.state = DinoState()
        self._out = out
        self._sleep = sleep
        self.init_game()

    def init_game(self) -> None:
        """Reset for a new run, keeping the best score."""
        st = self.state
        st.y = float(self.config.ground_y)
        st.vy = 0.0
        st.on_ground = True
        st.duck = False
        st.obstacles = []
        st.score = 0
        st.coins = 0
        st.running = True
        st.paused = False
        st.gap_remain = 0.0

    def handle_key(self, key: str) -> None:
        """React to one key press: space or 'up' jumps, p pauses, q quits."""
        st = self.state
        key = key.lower()
        if key in _JUMP_KEYS:
            if st.on_ground:
                st.on_ground = False
                st.vy = self.config.jump_v
                st.duck = False
        elif key == "p":
            st.paused = not st.paused
        elif key == "q":
            st.running = False

    def set_duck(self, held: bool) -> None:
        """Duck while the duck key is held, but only when on the ground."""
        self.state.duck = self.state.on_ground and held

    def _new_gap(self) -> float:
        cfg = self.config
        return float(cfg.min_gap_tiles + self.rng.randrange(cfg.max_gap_tiles - cfg.min_gap_tiles + 1))

    def _spawn_cactus(self) -> bool:
        cfg = self.config
        if self.rng.random() < cfg.cactus_spawn_prob:
            self.state.obstacles.append(
                Obstacle(ObstacleType.CACTUS_LOW, float(cfg.width - 2), cfg.cactus_height)
            )
            self.state.gap_remain = self._new_gap()
            return True
        return False

    def _spawn_bird(self) -> bool:
        cfg = self.config
        if self.rng.random() < cfg.bird_spawn_prob:
            self.state.obstacles.append(Obstacle(ObstacleType.BIRD_HIGH, float(cfg.width), 1))
            self.state.gap_remain = self._new_gap()
            return True
        return False

    def maybe_spawn_obstacle(self) -> None:
        """Perhaps add a cactus or a bird, unless the gap since the last is still open."""
        if self.state.gap_remain > 0.0:
            return
        if self.rng.randrange(2) == 0:
            if not self._spawn_bird():
                self._spawn_cactus()
        elif not self._spawn_cactus():
            self._spawn_bird()

    def _collides(self) -> bool:
        cfg, st = self.config, self.state
        px = cfg.player_x
        foot_y = _round(st.y)
        head_y = foot_y if st.duck else foot_y - 1
        for obstacle in st.obstacles:
            ox = _round(obstacle.x)
            if obstacle.type is ObstacleType.CACTUS_LOW:
                top_y = cfg.ground_y - (obstacle.h - 1)
                x_hit = px - 1 <= ox <= px + 1
                y_hit = not (foot_y < top_y or head_y > cfg.ground_y)
                if x_hit and y_hit:
                    return True
            else:
                bird_y = cfg.ground_y - 1
                y_hit = bird_y in (head_y, foot_y)
                x_hit = px - 2 <= ox <= px + 2
                if x_hit and y_hit and not st.duck:
                    return True
        return False

    def tick(self) -> None:
        """Advance one frame: spawn, physics, scroll, collisions and score."""
        cfg, st = self.config, self.state
        speed = cfg.base_speed
        self.maybe_spawn_obstacle()

        st.vy += cfg.gravity
        st.y += st.vy
        if st.y >= cfg.ground_y:
            st.y = float(cfg.ground_y)
            st.vy = 0.0
            st.on_ground = True
        else:
            st.on_ground = False
        if not st.on_ground:
            st.duck = False

        for obstacle in st.obstacles:
            obstacle.x -= speed
        st.obstacles = [o for o in st.obstacles if o.x >= OFFSCREEN_X]

        if st.gap_remain > 0.0:
            st.gap_remain = max(0.0, st.gap_remain - speed)

        if self._collides():
            st.running = False

        st.score += 1
        st.coins = max(st.coins, st.score // cfg.score_per_coin)

    def render(self) -> str:
        """Return the current frame as text."""
        cfg, st = self.config, self.state
        width, height = cfg.width, cfg.height
        disp = [[" "] * width for _ in range(height)]

        def put(x: int, y: int, glyph: str) -> None:
            if 0 <= x < width and 0 <= y < height:
                disp[y][x] = glyph

        for x in range(width):
            put(x, cfg.ground_y, "_")

        for obstacle in st.obstacles:
            ox = _round(obstacle.x)
            if obstacle.type is ObstacleType.CACTUS_LOW:
                for k in range(obstacle.h):
                    put(ox, cfg.ground_y - k, "|")
            else:
                y = cfg.ground_y - 1
                put(ox - 1, y, "<")
                put(ox, y, "^")
                put(ox + 1, y, ">")

        px = cfg.player_x
        foot_y = _round(st.y)
        if st.duck:
            put(px - 1, foot_y, "[")
            put(px, foot_y, "d")
            put(px + 1, foot_y, "]")
        else:
            put(px, foot_y - 1, "O")
            put(px, foot_y, "#")
            put(px - 1, foot_y, "/")
            put(px + 1, foot_y, "\\")

        border = "+" + "-" * width + "+"
        lines = [
            f"[DINO RUNNER]  점수: {st.score}   코인: {st.coins}   최고점: {st.best_score}",
            "  (Space/↑ 점프, S/↓ 숙이기, P 일시정지, Q 종료)",
            border,
        ]
        lines.extend("|" + "".join(row) + "|" for row in disp)
        lines.append(border)
        if st.paused:
            lines.append("")
            lines.append("=== 일시정지 (P: 해제) ===")
        return "\n".join(lines)

    def _pick_menu(self, read_key: Callable[[], str | None]) -> str:
        self._out(_TITLE + "\n" + _MENU)
        while True:
            key = read_key()
            if key is None or key in ("3", ESCAPE):
                return "3"
            if key in ("1", "2"):
                return key

    def _play(
        self,
        read_key: Callable[[], str | None],
        duck_held: Callable[[], bool],
    ) -> int:
        self.init_game()
        st = self.state
        while st.running:
            key = read_key()
            if key:
                self.handle_key(key)
            self.set_duck(duck_held())
            if not st.paused:
                self.tick()
            self._out(self.render())
            self._sleep(max(1, self.config.base_delay) / 1000)
        st.best_score = max(st.best_score, st.score)
        self._out("게임이 종료되었습니다....")
        self._sleep(3)
        return st.coins

    def run(
        self,
        read_key: Callable[[], str | None],
        duck_held: Callable[[], bool] = lambda: False,
    ) -> int:
        """Show the menu and act on the choice; return the coins earned.

        read_key returns the next key pressed, or None when none is waiting;
        duck_held tells whether the duck key is held down this frame.
        """
        pick = self._pick_menu(read_key)
        if pick == "1":
            return self._play(read_key, duck_held)
        if pick == "2":
            self._out(_HELP)
            read_key()
            return 0
        self._out("게임을 종료합니다.")
        return 0