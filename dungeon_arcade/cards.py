"""Playing cards and a blackjack hand."""

from __future__ import annotations

from dataclasses import dataclass, field

BLACKJACK = 21
ACE_REDUCTION = 10


@dataclass(frozen=True)
class Card:
    """A playing card with a suit mark, a rank and a point value."""

    mark: str
    rank: str
    value: int

    def __str__(self) -> str:
        return f"{self.mark} {self.rank}"


@dataclass
class Hand:
    """The cards held by one blackjack participant."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        self.cards.append(card)

    def score(self) -> int:
        """Total value, counting aces as 1 where 11 would bust."""
        total = sum(card.value for card in self.cards)
        aces = sum(1 for card in self.cards if card.rank == "A")
        while total > BLACKJACK and aces > 0:
            total -= ACE_REDUCTION
            aces -= 1
        return total

    def render(self, hide: bool = False) -> str:
        """Return the hand as text; with hide the first card is face down."""
        lines = [
            "[Card]" if hide and position == 0 else str(card)
            for position, card in enumerate(self.cards)
        ]
        if not hide:
            lines.append(f"Score : {self.score()}")
        return "\n".join(lines)

    def is_bust(self) -> bool:
        return self.score() > BLACKJACK

    def clear(self) -> None:
        self.cards.clear()

    def __len__(self) -> int:
        return len(self.cards)