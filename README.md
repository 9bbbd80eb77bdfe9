# dungeon-arcade

A small set of terminal games. The dungeon is a straight run of rooms that
are joined by corridors, with a monster in each mini-game room and a boss
room at the end. The package also holds a shop, a boss fight and six
mini-games: blackjack, a memory card game, a timed maze, a jumping
platformer, a falling-object dodger and an endless runner.

All in-game text is in Korean.

## Installing

```
pip install .
```

The tests run with pytest:

```
pip install ".[test]"
pytest
```

## The dungeon command

```
dungeon-arcade
```

This command builds a 120×30 map with five mini-game rooms and draws it again
after every key press. Keys:

- `w`, `a`, `s`, `d` move the player (`@`) one tile.
- `Space` talks to a monster right next to the player. After that the monster
  is gone and its tile becomes walkable.
- `q`, `Q` or `Esc` quits.

On Windows, keys are read with `msvcrt`. Elsewhere they are read from the
terminal in raw mode, or one character at a time from standard input when
that is not a terminal.

## What the command does not do

The `dungeon-arcade` command only walks the map. Talking to a monster does
not start a mini-game, the shop or the boss fight, and no coins are kept
from one game to the next. Each game below is a separate piece. You start it
from your own code and give it its input, and the games share coins and stats
only if you pass them the same `PlayerStats`. No other games have a command,
and nothing is saved to disk.

## Modules

Each game lives in its own module. The games take their input and output as
callables, so you can drive them from a terminal or from a script.

| Module | What it holds |
| --- | --- |
| `dungeon_arcade.dungeon` | `DungeonMap`, `Tile`, `Rect`, `Room`, `RoomKind`, `Monster`, `place_monsters`, `run_dungeon`, `main` |
| `dungeon_arcade.economy` | `PlayerStats`, `Shop`, `NotEnoughCoins` |
| `dungeon_arcade.boss` | `BossBattle`, `hp_bar` |
| `dungeon_arcade.cards` | `Card`, `Hand` (blackjack scoring, where an ace counts 11 or 1) |
| `dungeon_arcade.blackjack` | `Blackjack`, `GameManager` (bets coins on a round) |
| `dungeon_arcade.memory` | `MemoryBoard`, `MemoryCard`, `CardState`, `MemoryGame`, `coins_for_turns` |
| `dungeon_arcade.maze` | `Maze`, `MazePlayer`, `MazeGame` |
| `dungeon_arcade.jump_game` | `JumpGame` (five fixed platform levels) |
| `dungeon_arcade.poop_game` | `PoopGame`, `PoopConfig`, `Poop`, `coins_for_score` |
| `dungeon_arcade.dino_runner` | `DinoRunner`, `DinoConfig`, `DinoState`, `Obstacle`, `ObstacleType` |

### The dungeon map

```python
from dungeon_arcade.dungeon import DungeonMap, place_monsters

dungeon = DungeonMap(120, 30)
dungeon.generate_linear_dungeon(5)
print(dungeon.render())
monsters = place_monsters(dungeon)
```

The layout is a start room, then the requested number of mini-game rooms,
then a boss room. Corridors and doors join the rooms. If the map is too small
for the layout, or the room count is negative, `ValueError` is raised.
`place_monsters` puts a monster at the centre of every mini-game room and of
the boss room. You can set a callable as a monster's `mini_game`, and
`Monster.interact` calls it the first time.

### The shop and the boss

```python
from dungeon_arcade.economy import PlayerStats, Shop, NotEnoughCoins
from dungeon_arcade.boss import BossBattle

stats = PlayerStats(coins=3)
shop = Shop(stats)
shop.buy_attack()   # attack +1 for 1 coin
shop.buy_pet()      # a pet for 2 coins
try:
    shop.buy_hp()   # health +10 for 1 coin
except NotEnoughCoins:
    pass

battle = BossBattle(stats)
battle.attack()     # the boss loses stats.attack HP
```

`Shop.enter(ask)` runs the shop menu until the player answers `0`. The boss
has 1000 HP and hits for 50 every three seconds. Every pet deals 30 damage
every three seconds. `BossBattle.step(now)` lets any attack fall that is due
at time `now`, and `BossBattle.run(space_pressed)` plays the fight in real
time.

### Rewards

Several games pay out coins on fixed scales:

```python
from dungeon_arcade.memory import coins_for_turns
from dungeon_arcade.poop_game import coins_for_score

coins_for_turns(15)    # 8: all pairs found within 15 turns
coins_for_score(1200)  # 5: the dodger's top tier
```

`GameManager.play_round(bet)` takes the bet away first and pays back double
the bet on a blackjack win. `MazeGame` pays 3 coins for an escape.
`JumpGame` pays 1 coin for each coin tile it picks up and a bonus of 10
coins for clearing all five levels.

### Stepping a game without a terminal

The real-time games have step methods, so you can run them without a
terminal. `PoopGame.tick`, `DinoRunner.tick`, `JumpGame.update` and
`MazeGame.try_move` each move a game forward by one step, and their `render`
methods return the frame as text.