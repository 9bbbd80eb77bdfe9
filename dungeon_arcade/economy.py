"""Player stats shared between mini games, and the shop that spends coins on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

ATTACK_PRICE = 1
HP_PRICE = 1
PET_PRICE = 2
HP_PER_ITEM = 10

_SHOPKEEPER = r"""
        (\_ _/)   어서오게, 여행자!
        ( •w•)    좋은 물건들이 있지~
        / >🍗
"""

_PET_GREETINGS = {
    1: "🐶 귀여운 펫이 당신을 따라다니기 시작합니다!",
    2: "🐱 두 번째 펫도 합류했어요! 시끌벅적~",
    3: "🐰 세 번째 펫이 뒤뚱뒤뚱 따라옵니다! 귀여움 +100",
}


@dataclass
class PlayerStats:
    """Coins and combat stats carried from game to game."""

    coins: int = 0
    attack: int = 10
    hp: int = 100
    pet_count: int = 0


class NotEnoughCoins(Exception):
    """Raised when a purchase costs more coins than the player has."""

    def __init__(self, message: str = "코인이 부족합니다!") -> None:
        super().__init__(message)


class Shop:
    """Sells attack, health and pets in exchange for coins."""

    def __init__(
        self,
        stats: PlayerStats | None = None,
        out: Callable[[str], object] = print,
    ) -> None:
        self.stats = stats if stats is not None else PlayerStats()
        self._out = out

    def render(self) -> str:
        """Return the shop screen as text."""
        s = self.stats
        rule = "-" * 41
        lines = [
            "=" * 41,
            "                 🏪 상점 🏪",
            "=" * 41,
            _SHOPKEEPER,
            rule,
            f"1. 🗡 공격력 증가 아이템 ({ATTACK_PRICE} 코인)",
            f"2. ❤ 체력 증가 아이템 ({HP_PRICE} 코인)",
            f"3. 🐾 귀여운 펫 ({PET_PRICE} 코인, 3초마다 10의 데미지)",
            rule,
            f"당신의 코인: {s.coins}",
            f"현재 공격력: {s.attack} / 체력: {s.hp} / 펫: {s.pet_count} 마리",
            rule,
        ]
        return "\n".join(lines)

    def _pay(self, price: int) -> None:
        if self.stats.coins < price:
            raise NotEnoughCoins()
        self.stats.coins -= price

    def buy_attack(self) -> str:
        """Raise attack by one; return the message shown to the player."""
        self._pay(ATTACK_PRICE)
        self.stats.attack += 1
        return f"🗡 공격력이 1 증가했습니다! 현재 공격력: {self.stats.attack}"

    def buy_hp(self) -> str:
        """Raise health by ten; return the message shown to the player."""
        self._pay(HP_PRICE)
        self.stats.hp += HP_PER_ITEM
        return f"❤ 체력이 10 증가했습니다! 현재 체력: {self.stats.hp}"

    def buy_pet(self) -> str:
        """Add a pet; return the message shown to the player."""
        self._pay(PET_PRICE)
        self.stats.pet_count += 1
        count = self.stats.pet_count
        greeting = _PET_GREETINGS.get(
            count,
            f"🐾 새로운 펫이 무리를 이루어 당신을 따라다닙니다! (총 {count} 마리)",
        )
        return f"🐾 펫을 샀습니다! 현재 펫 수: {count} 마리\n{greeting}"

    def enter(self, ask: Callable[[str], str]) -> None:
        """Run the shop loop until the player chooses 0."""
        purchases = {"1": self.buy_attack, "2": self.buy_hp, "3": self.buy_pet}
        while True:
            self._out(self.render())
            choice = ask("구매할 아이템 번호를 입력하세요 (0: 종료): ").strip()
            if choice == "0":
                self._out("상점을 떠납니다...")
                return
            action = purchases.get(choice)
            if action is None:
                self._out("잘못된 입력입니다.")
                continue
            try:
                self._out(action())
            except NotEnoughCoins as exc:
                self._out(str(exc))