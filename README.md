# zubswat

A small arcade game. A creature wanders the window and runs from your
cursor. Click on it to land a hit. When its health runs out it keels over,
an ambulance drives in to carry it away, and you are back at the menu.

## Installing

```
pip install .
```

The game draws and plays sound with pygame.

## Assets

The package ships no images or sounds. You supply them in a directory laid
out like this:

```
assets/
  creature/    creature animation frames (at least four images)
  ambulance/   ambulance animation frames (at least one image)
  cursor/      cursor click animation frames (scaled to 50 pixels high)
  sounds/      hit.wav, miss.wav, scream.wav, ambulance.wav,
               menusound3.wav, mainmenu.wav,
               mainTheme0.wav, mainTheme1.wav, mainTheme2.wav
```

Images in each folder are used in file-name order. Any sound file that is
missing is silently skipped.

## Playing

```
zubswat --assets path/to/assets
```

Options:

- `--assets DIR`: the asset directory (default: `assets` in the current
  directory).
- `--seed N`: seed for the random choice of background theme.

The program opens on the menu. Keys:

- `D`: cycle the difficulty
- `V`: switch the force-vector overlay on or off
- `S`: switch sound on or off
- `F`: switch fullscreen on or off
- `Enter`: start a game
- `Esc`: quit

Difficulties:

- **Easy**: a light creature with 3 hit points.
- **Medium**: a heavier, more skittish creature with 6 hit points.
- **Hard**: a heavy, fast creature with 10 hit points that is strongly pushed
  away from the edges.
- **Nightmare**: no creature is placed; see below.

A click within 25 pixels of the creature is a hit; anything else is a miss.
When a creature strays past an edge it comes back in on the opposite side.
During a game one of three themes plays, and another is picked at random
when it ends.

With the vector overlay on, each force acting on the creature is drawn as a
line from its centre: cursor repulsion (red), drag (dark red), border push
(yellow), the resulting force (cyan), acceleration (blue) and speed (green).

## What it does not do

- Nightmare difficulty has no gameplay: no creature appears and the round
  never ends on its own; close the window to leave it.
- During a game there is no key to return to the menu; the round ends only
  when the ambulance has carried the creature off, or when the window is
  closed.
- There are no scores, timers or saved settings.

## Using the pieces

The game logic does not depend on a window, so it can be run headless:

- `zubswat.vector2.Vector2`: a small immutable 2-D vector with `+`, `-`,
  scaling, dot product (`v * w`), `length()` and `normalized(length)`.
- `zubswat.creature.Creature`: the creature's physics, health, death and
  ambulance animation. `physics_process(cursor, time_delta_ms)` advances the
  simulation, `animate(cursor)` returns the `DrawCommand`s for one frame,
  `take_hit(fatal)` starts the dying sequence on a fatal hit,
  `change_limits(width, height)` resizes the field and `vectors()` returns
  the last step's `ForceVectors`.
- `zubswat.game.Game`: one round at a given `Difficulty`, with `update`,
  `click` (returning a `ClickResult`), `resize`, `draw_commands`,
  `advance_cursor` and `next_theme`. Sounds are reported as `Sound` values
  through an optional `play(sound, volume)` callback. `preset_for` gives the
  creature's `Preset` for each difficulty, or `None` for nightmare.
- `zubswat.menu.Menu`: the menu's settings and the `Game` it starts.
- `zubswat.app`: loads the `Assets`, renders with `draw_scene` and runs the
  pygame loop from `main`.

## Running the tests

```
pip install .[test]
pytest
```