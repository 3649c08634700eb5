# fantasia

A fantasy clicker role-playing game built on pygame. You click enemies to
damage them. They drop coins, which fly into your inventory, and they give you
experience, which raises your level and your rank. After five kills on a level
you can challenge a boss. Beating the boss unlocks the next level. There are
eight stages, from the Green Forest to the Inferno, and every tenth level moves
you on to the next stage.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
fantasia
fantasia --resources path/to/res
```

The command opens a full-screen 1920×1080 window and runs at 60 frames per
second. Close the window to quit.

- **Attack:** click the enemy. Each click deals 50 damage multiplied by a
  random factor between 0.8 and 1.2. A damage bubble shows how much damage the
  click did.
- **Enemy attacks:** the enemy hits the player once a second. A player who
  dies plays a death animation and then comes back at full health.
- **Boss fight:** after five kills, a "Fight boss?" button appears. Click it to
  fight the stage boss. Clicking it again ("Quit fight?") returns you to an
  ordinary enemy.
- **Next level:** defeating the boss unlocks the next level square. Click that
  square to move on.

Images and fonts are read from the directory given by `--resources`. The
default is `../res`, which is relative to the working directory. A missing
image gives an empty texture, and a missing font falls back to pygame's
built-in font, so the game still starts without the resource files.

## Using the pieces

The game logic works without a window:

```python
from fantasia.number_formatter import abbreviate
from fantasia.enemy_generator import EnemyGenerator
from fantasia.enums import StageName, PlayerRank

abbreviate(123456)                         # "123.45k"
abbreviate(999_999_999)                    # "999.99m"
EnemyGenerator().random_boss(StageName.INFERNO)
PlayerRank().rank_for(50)                  # "Mercenary"
```

The modules are:

- `fantasia.enums`: `EnemyName`, `StageName`, `ResourceName`,
  `StageLevelStatus`, and `PlayerRank` with its level thresholds.
- `fantasia.number_formatter`: `abbreviate`. It gives amounts with the
  suffixes k, m, b, t and Qa, rounded down to two decimals.
- `fantasia.enemy_generator`: `EnemyGenerator`, which returns random enemies and
  bosses for each stage.
- `fantasia.shapes`: `Vector2`, `FloatRect`, `Color`, `Texture`, `Font`,
  `Sprite`, `Text`, `RoundedRect` and `ProgressBar`.
- `fantasia.resources`: `Resources`, which looks up textures, fonts and display
  names.
- `fantasia.widgets`: `DamageBubble`, `Money`, `EnemyGUI`, `PlayerGUI`,
  `InventoryGUI` and `StaticGUI`.
- `fantasia.stage_gui`: `StageGUI`, the stage panel. It holds the level
  squares (`StageLevel`), the enemy counter (`StageEnemyCounter`) and the boss
  button (`StageBossButton`).
- `fantasia.entities`: `Enemy`, `Player`, `Inventory` and `Stage`.
- `fantasia.animator`: `Animator`, which runs the hover, click and death
  animations, the damage bubbles and the coin drops.
- `fantasia.game`: `Game`, with the game loop, and `main`, the command's entry
  point.

## What it does not do

- Progress is not saved. Each run starts again at level 1 with no money.
- Coins only add to a money total. Nothing in the game spends them.
- The fever bar is drawn, but nothing ever fills it.
- The stages end with the Inferno. Reaching the next tenth level after it goes
  past the last stage and raises an error.