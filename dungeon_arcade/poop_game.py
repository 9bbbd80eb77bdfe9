"""Dodge the falling droppings: move left and right while they rain from the top."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Callable

MAX_SPAWN_PROB = 0.9
MIN_DELAY_MS = 20
SPAWN_ATTEMPTS = 2
ESCAPE = "\x1b"

_TITLE = (
    "=====================================\n"
    "           똥   피   하   기         \n"
    "=====================================\n"
)

_HELP = (
    "[조작법]\n"
    " - 이동: A/D 또는 ←/→\n"
    " - 일시정지: P\n"
    " - 게임 중 메뉴로: Q (게임 종료)\n\n"
    "[코인 규칙]\n"
    " - 점수 500 이하 → 1코인\n"
    " - 점수 500~1000 → 3코인\n"
    " - 점수 1000 이상 → 5코인\n"
    "아무 키나 누르면 메뉴로 돌아갑니다..."
)

_MENU = "  1) 시작\n  2) 조작법 보기\n  3) 종료\n\n번호를 선택하세요: "

_LEFT_KEYS = {"a", "left"}
_RIGHT_KEYS = {"d", "right"}


@dataclass(frozen=True)
class PoopConfig:
    """Board size, pacing and spawn rates."""

    width: int = 55
    height: int = 31
    player_y: int = 30
    base_delay: int = 80
    speed_gain_per_level: int = 5
    level_up_every: int = 150
    base_spawn_prob: float = 0.18
    spawn_inc_per_level: float = 0.03


@dataclass
class Poop:
    """One falling dropping at column x, row y."""

    x: int
    y: int


def coins_for_score(score: int) -> int:
    """Coins paid out for a finished game with the given score."""
    if score < 500:
        return 1
    if score <= 1000:
        return 3
    return 5


@dataclass
class PoopGame:
    """State and rules of one dodging session."""

    config: PoopConfig = field(default_factory=PoopConfig)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    out: Callable[[str], object] = field(default=print, repr=False)
    sleep: Callable[[float], object] = field(default=time.sleep, repr=False)
    best_score: int = 0

    def __post_init__(self) -> None:
        self.init_board()

    def init_board(self) -> None:
        """Start a fresh board with the player in the middle."""
        self.poops: list[Poop] = []
        self.score = 0
        self.level = 1
        self.running = True
        self.paused = False
        self.player_x = self.config.width // 2

    def handle_key(self, key: str) -> None:
        """React to one key: a/d or left/right move, p pauses, q quits."""
        key = key.lower()
        if key in _LEFT_KEYS:
            self.player_x = max(0, self.player_x - 1)
        elif key in _RIGHT_KEYS:
            self.player_x = min(self.config.width - 1, self.player_x + 1)
        elif key == "p":
            self.paused = not self.paused
        elif key == "q":
            self.running = False

    def spawn_probability(self) -> float:
        cfg = self.config
        prob = cfg.base_spawn_prob + (self.level - 1) * cfg.spawn_inc_per_level
        return min(prob, MAX_SPAWN_PROB)

    def maybe_spawn(self) -> None:
        """Drop up to two new droppings on the top row, by chance."""
        prob = self.spawn_probability()
        for _ in range(SPAWN_ATTEMPTS):
            if self.rng.random() < prob:
                self.poops.append(Poop(self.rng.randrange(self.config.width), 0))

    def tick(self) -> None:
        """Advance one frame: level, spawning, falling, collision and score."""
        cfg = self.config
        self.level = max(1, self.score // cfg.level_up_every + 1)
        self.maybe_spawn()
        for poop in self.poops:
            poop.y += 1
        self.poops = [poop for poop in self.poops if poop.y < cfg.height]
        if any(p.y == cfg.player_y and p.x == self.player_x for p in self.poops):
            self.running = False
        self.score += 1

    def delay_for_level(self) -> int:
        """Frame delay in milliseconds; shorter at higher levels."""
        cfg = self.config
        return max(MIN_DELAY_MS, cfg.base_delay - (self.level - 1) * cfg.speed_gain_per_level)

    def render(self) -> str:
        """Return the current frame as text."""
        cfg = self.config
        rows = [[" "] * cfg.width for _ in range(cfg.height)]
        for poop in self.poops:
            if 0 <= poop.y < cfg.height and 0 <= poop.x < cfg.width:
                rows[poop.y][poop.x] = "$"
        if 0 <= cfg.player_y < cfg.height:
            rows[cfg.player_y][self.player_x] = "@"
        lines = [
            f"[똥피하기]  점수: {self.score}   레벨: {self.level}   최고점: {self.best_score}",
            "   (A/D 또는 ←/→ 이동, P 일시정지, Q 종료)",
            "",
        ]
        lines.extend("".join(row) for row in rows)
        return "\n".join(lines)

    def _pick_menu(self, read_key: Callable[[], str | None]) -> str:
        self.out(_TITLE + "\n" + _MENU)
        while True:
            key = read_key()
            if key is None or key in ("3", ESCAPE):
                return "3"
            if key in ("1", "2"):
                return key

    def _play(self, read_key: Callable[[], str | None]) -> int:
        self.init_board()
        while self.running:
            key = read_key()
            if key:
                self.handle_key(key)
            if not self.paused:
                self.tick()
            self.out(self.render())
            self.sleep(self.delay_for_level() / 1000)

        self.best_score = max(self.best_score, self.score)
        coins = coins_for_score(self.score)
        self.out("\n\n================ GAME OVER ================")
        self.out(f" 점수: {self.score}  최고점수: {self.best_score}  현재 코인: {coins}")
        self.sleep(3)
        return coins

    def run(self, read_key: Callable[[], str | None]) -> int:
        """Show the menu and act on the choice; return the coins earned.

        read_key returns the next key pressed, or None when none is waiting.
        """
        pick = self._pick_menu(read_key)
        if pick == "1":
            return self._play(read_key)
        if pick == "2":
            self.out(_TITLE + "\n" + _HELP)
            read_key()
        return 0