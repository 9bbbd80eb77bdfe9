"""Card matching game: turn over pairs of cards until every pair is found."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable

DEFAULT_SIZE = 4


class CardState(Enum):
    HIDDEN = "hidden"
    REVEALED = "revealed"
    MATCHED = "matched"


@dataclass
class MemoryCard:
    symbol: str = "*"
    state: CardState = CardState.HIDDEN


class MemoryBoard:
    """A square grid of face-down card pairs."""

    def __init__(self, size: int = DEFAULT_SIZE, rng: random.Random | None = None) -> None:
        if size <= 0 or (size * size) % 2:
            raise ValueError("board size must be positive with an even number of cells")
        self.size = size
        self._rng = rng or random.Random()
        self.cards: list[list[MemoryCard]] = []
        self.setup()

    def setup(self) -> None:
        """Deal a fresh shuffled set of pairs, all face down."""
        pairs = (self.size * self.size) // 2
        symbols = [chr(ord("A") + n) for n in range(pairs) for _ in range(2)]
        self._rng.shuffle(symbols)
        cells = iter(symbols)
        self.cards = [
            [MemoryCard(next(cells)) for _ in range(self.size)] for _ in range(self.size)
        ]

    def render(self) -> str:
        lines = ["  " + " " * self.size]
        for row in self.cards:
            lines.append(
                " " + "".join(
                    "* " if card.state is CardState.HIDDEN else f"{card.symbol} "
                    for card in row
                )
            )
        return "\n".join(lines)

    def all_matched(self) -> bool:
        return all(card.state is CardState.MATCHED for row in self.cards for card in row)

    def is_hidden(self, row: int, col: int) -> bool:
        return self.cards[row][col].state is CardState.HIDDEN

    def reveal(self, row: int, col: int) -> None:
        self.cards[row][col].state = CardState.REVEALED

    def hide(self, row: int, col: int) -> None:
        self.cards[row][col].state = CardState.HIDDEN

    def match(self, row: int, col: int) -> None:
        self.cards[row][col].state = CardState.MATCHED

    def symbol(self, row: int, col: int) -> str:
        return self.cards[row][col].symbol


def coins_for_turns(turns: int) -> int:
    """Coins earned for finishing the board in the given number of turns."""
    if turns <= 15:
        return 8
    if turns <= 20:
        return 5
    if turns <= 30:
        return 2
    return 0


class MemoryGame:
    """Turn-based play on a MemoryBoard, counting turns taken."""

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        out: Callable[[str], object] = print,
        rng: random.Random | None = None,
    ) -> None:
        self.board = MemoryBoard(size, rng)
        self.turn_count = 0
        self._out = out

    def coins(self) -> int:
        return coins_for_turns(self.turn_count)

    def _pick(self, ask: Callable[[str], str], label: str) -> tuple[int, int] | None:
        size = self.board.size
        answer = ask(f"{label} 카드 번호 입력 (1 ~ {size * size}) : ").strip()
        try:
            position = int(answer)
        except ValueError:
            position = 0
        if not 1 <= position <= size * size:
            self._out("잘못된 번호입니다. 다시 시도하세요.")
            return None
        row, col = divmod(position - 1, size)
        if not self.board.is_hidden(row, col):
            self._out("이미 뒤집혔습니다. 다시 시도하세요.")
            return None
        return row, col

    def run(self, ask: Callable[[str], str]) -> int:
        """Play until every pair is matched; return the coins earned."""
        board = self.board
        self._out("카드 맞추기 게임을 시작합니다!")
        while not board.all_matched():
            self._out(board.render())
            first = self._pick(ask, "첫 번째")
            if first is None:
                continue
            board.reveal(*first)
            self._out(board.render())

            second = self._pick(ask, "두 번째")
            if second is None:
                board.hide(*first)
                continue
            board.reveal(*second)
            self._out(board.render())

            if board.symbol(*first) == board.symbol(*second):
                self._out("정답입니다.")
                board.match(*first)
                board.match(*second)
            else:
                self._out("틀렸습니다.")
                board.hide(*first)
                board.hide(*second)
            self.turn_count += 1
        self._out("모든 카드를 맞췄습니다! 게임을 종료합니다!")
        self._out(f"총 {self.turn_count} 턴 걸렸습니다. 획득 코인 : {self.coins()}개")
        ask("엔터를 누르면 종료됩니다...")
        return self.coins()