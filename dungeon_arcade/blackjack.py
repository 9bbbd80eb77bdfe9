"""A round of blackjack against the computer, and coin betting on it."""

from __future__ import annotations

import random
from typing import Callable, Iterable

from dungeon_arcade.cards import Card, Hand

DEALER_STANDS_AT = 17

_MARKS = ("♠", "◆", "♥", "♣")
_RANKS = (
    ("A", 11), ("2", 2), ("3", 3), ("4", 4), ("5", 5), ("6", 6), ("7", 7),
    ("8", 8), ("9", 9), ("10", 10), ("J", 10), ("Q", 10), ("K", 10),
)


class _Deck:
    def __init__(self, cards: Iterable[Card] | None, rng: random.Random) -> None:
        if cards is None:
            deck = [Card(mark, rank, value) for mark in _MARKS for rank, value in _RANKS]
            rng.shuffle(deck)
        else:
            deck = list(cards)
        self._cards = iter(deck)

    def draw(self) -> Card:
        try:
            return next(self._cards)
        except StopIteration:
            raise RuntimeError("deck is empty") from None


class Blackjack:
    """One game of blackjack: the player against the computer dealer."""

    def __init__(
        self,
        ask: Callable[[str], str] = input,
        out: Callable[[str], object] = print,
        cards: Iterable[Card] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._ask = ask
        self._out = out
        self._deck = _Deck(cards, rng or random.Random())
        self.player = Hand()
        self.com = Hand()

    def play(self) -> bool:
        """Play one hand; return True when the player wins."""
        self.player.clear()
        self.com.clear()
        for _ in range(2):
            self.player.add_card(self._deck.draw())
            self.com.add_card(self._deck.draw())

        self._out("컴퓨터 핸드: ")
        self._out(self.com.render(hide=True))
        self._out("플레이어 핸드: ")
        self._out(self.player.render())

        while True:
            if self.player.is_bust():
                self._out("플레이어 버스트! 패배했습니다.")
                return False
            answer = self._ask("Hit (h) or Stand (s)?").strip().lower()[:1]
            if answer == "h":
                self.player.add_card(self._deck.draw())
                self._out("\n 플레이어 핸드 : ")
                self._out(self.player.render())
            elif answer == "s":
                break

        self._out("\nCOM 턴 : ")
        self._out(self.com.render())
        while self.com.score() < DEALER_STANDS_AT:
            self.com.add_card(self._deck.draw())
            self._out(self.com.render())

        if self.com.is_bust():
            self._out("COM 버스트! 승리하셨습니다. ^~^")
            return True
        player_score, com_score = self.player.score(), self.com.score()
        if player_score > com_score:
            self._out("플레이어 승리!")
            return True
        if player_score < com_score:
            self._out("COM 승리!")
        else:
            self._out("비겼습니다!")
        return False


class GameManager:
    """Keeps the player's coins and settles bets on blackjack rounds."""

    def __init__(
        self,
        coins: int,
        ask: Callable[[str], str] = input,
        out: Callable[[str], object] = print,
        game_factory: Callable[[], Blackjack] | None = None,
    ) -> None:
        self.coins = coins
        self._out = out
        self._game_factory = game_factory or (lambda: Blackjack(ask=ask, out=out))

    def play_round(self, bet: int) -> bool:
        """Bet on one game; a win pays double the bet. Returns True on a win."""
        if bet > self.coins:
            self._out("코인이 부족합니다!")
            return False
        self.coins -= bet
        won = self._game_factory().play()
        if won:
            self.coins += bet * 2
            self._out(f"승리! 코인이 {bet * 2} 만큼 증가했습니다.")
        else:
            self._out("패배.")
        self._out(f"현재 코인 : {self.coins}")
        return won