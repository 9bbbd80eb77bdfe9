from dungeon_arcade.cards import Card, Hand


def test_card_string():
    assert str(Card("♠", "A", 11)) == "♠ A"


def test_score_sums_values():
    hand = Hand()
    hand.add_card(Card("♥", "10", 10))
    hand.add_card(Card("♥", "7", 7))
    assert hand.score() == 17
    assert not hand.is_bust()


def test_aces_drop_to_one_when_needed():
    hand = Hand([Card("♠", "A", 11), Card("♣", "A", 11), Card("♥", "9", 9)])
    assert hand.score() == 21
    assert not hand.is_bust()


def test_bust_over_twenty_one():
    hand = Hand([Card("♠", "K", 10), Card("♣", "Q", 10), Card("♥", "5", 5)])
    assert hand.is_bust()


def test_render_hidden_first_card_has_no_score():
    hand = Hand([Card("♠", "K", 10), Card("♣", "3", 3)])
    text = hand.render(hide=True)
    assert text.splitlines() == ["[Card]", "♣ 3"]
    assert "Score" not in text


def test_render_visible_includes_score():
    hand = Hand([Card("♠", "K", 10), Card("♣", "3", 3)])
    lines = hand.render().splitlines()
    assert lines[0] == "♠ K"
    assert lines[-1] == f"Score : {hand.score()}"


def test_clear_empties_hand():
    hand = Hand([Card("♠", "K", 10)])
    hand.clear()
    assert len(hand) == 0
    assert hand.score() == 0