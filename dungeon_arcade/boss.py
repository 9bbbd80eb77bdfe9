"""Real-time boss fight: hit the boss with space while it and your pets strike on a timer."""

from __future__ import annotations

import time
from typing import Callable

from dungeon_arcade.economy import PlayerStats

BOSS_MAX_HP = 1000
BOSS_ATTACK = 50
PET_DAMAGE = 30
ATTACK_INTERVAL = 3.0
REDRAW_INTERVAL = 0.2
FRAME_DELAY = 0.01
BAR_WIDTH = 30

_BOSS_ART = r"""
       /^^^^^^^^^^^\
      /             \
     |   (o)   (o)   |
     |       ^       |
     |     '-'       |
      \   \___/     /
       \___________/
"""


def hp_bar(name: str, hp: int, max_hp: int, bar_width: int = BAR_WIDTH) -> str:
    """Return a health bar line such as 'name [■■■   ] hp/max_hp'."""
    if max_hp <= 0:
        raise ValueError("max_hp must be positive")
    if bar_width < 0:
        raise ValueError("bar_width must not be negative")
    filled = int(hp / max_hp * bar_width)
    cells = "".join("■" if i < filled else " " for i in range(bar_width))
    return f"{name} [{cells}] {hp}/{max_hp}"


class BossBattle:
    """The fight between the player, the player's pets and the boss."""

    def __init__(
        self,
        stats: PlayerStats | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], object] = time.sleep,
        out: Callable[[str], object] = print,
        boss_hp: int = BOSS_MAX_HP,
        boss_attack: int = BOSS_ATTACK,
    ) -> None:
        self.stats = stats if stats is not None else PlayerStats()
        self._clock = clock
        self._sleep = sleep
        self._out = out
        self.boss_max_hp = boss_hp
        self.boss_hp = boss_hp
        self.boss_attack = boss_attack
        self.now_hp = self.stats.hp
        start = clock()
        self.last_boss_attack = start
        self.last_pet_attack = start

    @property
    def finished(self) -> bool:
        return self.now_hp <= 0 or self.boss_hp <= 0

    @property
    def won(self) -> bool:
        return self.boss_hp <= 0

    def attack(self) -> str:
        """Strike the boss with the player's attack; return the message."""
        damage = self.stats.attack
        self.boss_hp = max(0, self.boss_hp - damage)
        return f">> 당신이 공격하여 보스에게 {damage} 데미지를 입혔습니다!"

    def step(self, now: float) -> list[str]:
        """Let the boss and the pets strike if their timers are due; return the messages."""
        messages = []
        if now - self.last_boss_attack >= ATTACK_INTERVAL:
            self.now_hp = max(0, self.now_hp - self.boss_attack)
            messages.append(f"🔥 보스가 강력한 공격을 가해 {self.boss_attack} 피해를 입었습니다!")
            self.last_boss_attack = now
        pets = self.stats.pet_count
        if pets > 0 and now - self.last_pet_attack >= ATTACK_INTERVAL:
            damage = pets * PET_DAMAGE
            self.boss_hp = max(0, self.boss_hp - damage)
            messages.append(f"🐾 펫들이 달려들어 보스에게 {damage} 피해를 입혔습니다!")
            self.last_pet_attack = now
        return messages

    def render(self) -> str:
        """Return the battle screen as text."""
        s = self.stats
        lines = [
            "=================== ⚔ 보스 전투 ⚔ ===================",
            "",
            _BOSS_ART,
            hp_bar("보스 HP", self.boss_hp, self.boss_max_hp),
            "",
            hp_bar("플레이어 HP", self.now_hp, s.hp),
            f"플레이어 공격력: {s.attack}",
            f"펫 수: {s.pet_count} (3초마다 {s.pet_count * PET_DAMAGE} 데미지)",
            "-" * 53,
            "스페이스바: 공격   |   보스는 3초마다 공격합니다!",
            "=" * 53,
        ]
        return "\n".join(lines)

    def run(self, space_pressed: Callable[[], bool]) -> bool:
        """Fight until one side falls; return True when the boss is beaten.

        space_pressed tells whether the attack key is down this frame; each
        new press counts as one attack.
        """
        pressed_before = False
        last_draw: float | None = None
        while not self.finished:
            pressed_now = bool(space_pressed())
            if pressed_now and not pressed_before:
                self._out(self.attack())
            pressed_before = pressed_now

            now = self._clock()
            for message in self.step(now):
                self._out(message)

            now = self._clock()
            if last_draw is None or now - last_draw >= REDRAW_INTERVAL:
                self._out(self.render())
                last_draw = now

            self._sleep(FRAME_DELAY)

        self._out(self.render())
        if self.won:
            self._out("\n🎉 승리했습니다! 보스를 쓰러뜨렸습니다!")
        else:
            self._out("\n💀 패배했습니다... 플레이어가 쓰러졌습니다...")
        self._sleep(3)
        return self.won