# asadvision

The game rules of a small side-scrolling boss-fight arena, as plain Python
with no engine attached. Every function takes the current state and returns
or updates the next one, so a host loop can call them once per frame.

## Modules

- `asadvision.animation`: `Timer` (one-shot or repeating, with `tick`,
  `reset` and `just_finished`), `Animation` (a normal and a fast frame clock)
  and `reversible_animation`, which returns the next `(reverse, frame)` pair
  of a frame counter that runs forwards and then backwards.
- `asadvision.collision_layers`: `GameLayer` bit flags, `CollisionLayers` with
  `interacts_with`, and the presets `player_hit_boxes`, `player_hurt_boxes`,
  `enemy_hit_boxes` and `enemy_hurt_boxes`.
- `asadvision.asset_tracking`: `ResourceHandles`, a queue of resources. Each
  one is given an `is_loaded` check and an `insert` callback. `process` checks
  every waiting entry once and `is_all_done` reports when none are left.
- `asadvision.audio`: `AudioPlayer`, `music` (looping) and `sound_effect`
  (removed when done), and `apply_global_volume`, which rescales sounds that
  are already running.
- `asadvision.camera`: `Vec2` and `Vec3`, `smooth_nudge` (frame-rate
  independent easing), `camera_target`, which clamps the player's position to
  the arena bounds, and `update_camera`.
- `asadvision.physics`: `GRAVITY_ACCELERATION`, `is_grounded` (hit normals
  checked against a maximum slope angle) and `CreaturePhysics` with
  `update_grounded` and `apply_movement_damping`.
- `asadvision.states`: `GAME_NAME`, `AppSystems` and `system_order`, `Pause`
  with `allows_pausable`, and the `Menu` enum.
- `asadvision.health`: `Health`, `HurtBox`, `HitBox`, `ChangeHp` and `Hit`.
  `get_hurt` resolves contacts, and each hurt box that is not immune takes at
  most one hit. `change_hp` sums the changes per entity, caps the result at
  the maximum and returns the entities left at or below zero.
  `health_bar_ratio` gives how full the health bar is drawn.
- `asadvision.enemy_configs`: the enemy tuning values and `reposition_path`,
  the boss's elliptical arc between its two positions.
- `asadvision.eye`: `EyeAnimation`, with the wing frame stepping and the
  ring's rocking target, plus `pupil_target`, `update_pupil` and `update_ring`.
- `asadvision.slime`: `slime` spawns a red or black `Slime`.
  `SlimeController.decide` returns the slime's new velocity, jump attacks
  included. It also provides `slime_fall_recovery` and
  `kill_everything_that_dies`.
- `asadvision.boss`: `BossController.update` runs one frame of the boss. It
  returns the new position and a list of `LazerSpawn`s to create, covering
  repositioning, the beam attack and the sky attack. `Lazer` and
  `tick_lazers` expire lazers once their time runs out.
- `asadvision.level`: `Platform` with `surface_height`, `platform_small`,
  `platform_medium` and `arena_platforms`, which gives the floor and three
  floating platforms.
- `asadvision.menus`: `MenuNavigator` works out where each menu action
  leads and returns a `Navigation`. The actions are `start`, `open_settings`,
  `open_credits`, `back`, `close`, `quit_to_title` and `exit_app`. The module
  also has `lower_global_volume`, `raise_global_volume` and `volume_label`,
  plus the page text from `main_menu_lines`, `credits_lines` and
  `results_lines`.

Randomness (slime start cooldowns, boss attack rolls, lazer placement) comes
from an optional `random.Random` argument, so runs can be made repeatable.

## Example

```python
from asadvision.health import ChangeHp, Health, change_hp
from asadvision.menus import volume_label

healths = {"slime": Health(25.0)}
deaths = change_hp([ChangeHp(target="slime", amount=-30.0)], healths)
print(deaths)             # ['slime']
print(volume_label(0.5))  # ' 50%'
```

## What it does not do

This package holds rules and state only. It does not provide:

- a window, drawing or sprites
- sound playback
- keyboard or mouse input
- a rigid-body physics simulation; collisions and ground hits are inputs
- asset loading from disk
- a game loop or a command to start a game

A host application supplies all of these and calls into the modules above.

## Tests

```
pip install -e .[test]
pytest
```