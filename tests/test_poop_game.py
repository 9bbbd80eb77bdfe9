import pytest

from dungeon_arcade.poop_game import (
    Poop,
    PoopConfig,
    PoopGame,
    coins_for_score,
)


class _FixedRng:
    """Returns the same draw every time, and always picks column `column`."""

    def __init__(self, draw, column=0):
        self.draw = draw
        self.column = column

    def random(self):
        return self.draw

    def randrange(self, stop):
        return self.column % stop


def _game(draw=0.99, column=0, config=None):
    output = []
    game = PoopGame(
        config=config or PoopConfig(),
        rng=_FixedRng(draw, column),
        out=output.append,
        sleep=lambda seconds: None,
    )
    return game, output


def _keys(*keys):
    it = iter(keys)
    return lambda: next(it, None)


@pytest.mark.parametrize(
    "score, coins",
    [(0, 1), (499, 1), (500, 3), (1000, 3), (1001, 5)],
)
def test_coins_for_score(score, coins):
    assert coins_for_score(score) == coins


def test_init_board_centres_player():
    game, _ = _game()
    assert game.player_x == game.config.width // 2
    assert (game.score, game.level, game.running, game.paused) == (0, 1, True, False)
    assert game.poops == []


def test_moving_left_stops_at_edge():
    game, _ = _game()
    for _ in range(game.config.width + 5):
        game.handle_key("a")
    assert game.player_x == 0


def test_moving_right_stops_at_edge():
    game, _ = _game()
    for _ in range(game.config.width + 5):
        game.handle_key("right")
    assert game.player_x == game.config.width - 1


def test_uppercase_keys_move_too():
    game, _ = _game()
    start = game.player_x
    game.handle_key("D")
    game.handle_key("D")
    game.handle_key("A")
    assert game.player_x == start + 1


def test_pause_toggles_and_quit_stops():
    game, _ = _game()
    game.handle_key("p")
    assert game.paused
    game.handle_key("P")
    assert not game.paused
    game.handle_key("q")
    assert not game.running


def test_spawn_adds_two_on_top_row_when_lucky():
    game, _ = _game(draw=0.0, column=7)
    game.maybe_spawn()
    assert game.poops == [Poop(7, 0), Poop(7, 0)]


def test_spawn_adds_nothing_when_unlucky():
    game, _ = _game(draw=0.99)
    game.maybe_spawn()
    assert game.poops == []


def test_spawn_probability_is_capped():
    game, _ = _game(draw=0.95)
    game.level = 1000
    game.maybe_spawn()
    assert game.poops == []
    game.rng = _FixedRng(0.89)
    game.maybe_spawn()
    assert len(game.poops) == 2


def test_tick_moves_poops_down_and_scores():
    game, _ = _game()
    game.poops = [Poop(0, 3)]
    game.player_x = 10
    game.tick()
    assert game.poops == [Poop(0, 4)]
    assert game.score == 1
    assert game.running


def test_tick_drops_poops_leaving_the_board():
    game, _ = _game()
    game.poops = [Poop(0, game.config.height - 1), Poop(1, 0)]
    game.player_x = 10
    game.tick()
    assert game.poops == [Poop(1, 1)]


def test_tick_hit_ends_game():
    game, _ = _game()
    game.poops = [Poop(game.player_x, game.config.player_y - 1)]
    game.tick()
    assert not game.running


def test_level_follows_score():
    game, _ = _game()
    game.score = game.config.level_up_every
    game.tick()
    assert game.level == 2


def test_delay_for_level():
    game, _ = _game()
    assert game.delay_for_level() == game.config.base_delay
    game.level = 2
    assert game.delay_for_level() == game.config.base_delay - game.config.speed_gain_per_level
    game.level = 1000
    assert game.delay_for_level() == 20


def test_render_places_player_and_poops():
    game, _ = _game()
    game.poops = [Poop(3, 5)]
    lines = game.render().split("\n")
    assert len(lines) == game.config.height + 3
    assert lines[game.config.player_y + 3][game.player_x] == "@"
    assert lines[5 + 3][3] == "$"
    assert all(len(line) == game.config.width for line in lines[3:])


def test_run_plays_until_quit():
    game, output = _game()
    coins = game.run(_keys("1", "q"))
    assert coins == 1
    assert game.best_score == game.score
    assert not game.running
    assert any("GAME OVER" in line for line in output)


def test_run_exit_choice_plays_nothing():
    game, _ = _game()
    assert game.run(_keys("3")) == 0
    assert game.score == 0


def test_run_help_choice_shows_controls():
    game, output = _game()
    assert game.run(_keys("x", "2", "z")) == 0
    assert any("[조작법]" in line for line in output)
    assert game.score == 0