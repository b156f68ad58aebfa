"""Health, hit boxes, hurt boxes and the damage they deal each other."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Iterable, Mapping

Entity = Hashable


@dataclass
class Health:
    """Current and maximum hit points; a new health starts full."""

    max: float
    current: float | None = None

    def __post_init__(self) -> None:
        if self.current is None:
            self.current = self.max


@dataclass(frozen=True)
class ChangeHp:
    """A request to change ``target``'s health by ``amount``."""

    target: Entity
    amount: float


@dataclass
class HurtBox:
    """An area that takes damage for its ``owner``, then stays immune for a while."""

    full_immunity_duration: float
    remaining_immunity_duration: float = 0.0
    owner: Entity | None = None
    colliding: list[Entity] = field(default_factory=list)

    def tick(self, delta: float) -> None:
        """Count the immunity down by ``delta`` seconds."""
        self.remaining_immunity_duration -= delta


@dataclass
class HitBox:
    """An area that deals ``damage`` to the hurt boxes it touches."""

    full_rehit_delay: float
    damage: float
    remaining_rehit_delays: dict[Entity, float] = field(default_factory=dict)
    is_weapon: bool = False

    def tick(self, delta: float) -> None:
        """Count every per-target rehit delay down by ``delta`` seconds."""
        for target in self.remaining_rehit_delays:
            self.remaining_rehit_delays[target] -= delta


@dataclass(frozen=True)
class Hit:
    """One hit box landing on one hurt box."""

    hurt_box: Entity
    hit_box: Entity
    change: ChangeHp
    by_weapon: bool


def get_hurt(
    hurt_boxes: Mapping[Entity, HurtBox], hit_boxes: Mapping[Entity, HitBox]
) -> list[Hit]:
    """Resolve contacts: each hurt box not immune takes at most one hit."""
    hits: list[Hit] = []
    for hurt_id, hurt_box in hurt_boxes.items():
        if hurt_box.remaining_immunity_duration > 0.0:
            continue
        for hit_id in hurt_box.colliding:
            hit_box = hit_boxes.get(hit_id)
            if hit_box is None or hurt_box.owner is None:
                continue
            if hit_box.remaining_rehit_delays.get(hurt_id, -1.0) > 0.0:
                continue
            hits.append(
                Hit(
                    hurt_box=hurt_id,
                    hit_box=hit_id,
                    change=ChangeHp(hurt_box.owner, -hit_box.damage),
                    by_weapon=hit_box.is_weapon,
                )
            )
            hit_box.remaining_rehit_delays[hurt_id] = hurt_box.full_immunity_duration
            hurt_box.remaining_immunity_duration = hurt_box.full_immunity_duration
            break
    return hits


def change_hp(changes: Iterable[ChangeHp], healths: Mapping[Entity, Health]) -> list[Entity]:
    """Apply summed health changes; return the entities left at or below zero."""
    deltas: dict[Entity, float] = {}
    for change in changes:
        deltas[change.target] = deltas.get(change.target, 0.0) + change.amount

    deaths: list[Entity] = []
    for entity, delta in deltas.items():
        health = healths.get(entity)
        if health is None:
            continue
        health.current = min(health.current + delta, health.max)
        if health.current <= 0.0:
            deaths.append(entity)
    return deaths


def health_bar_ratio(health: Health) -> float:
    """How full the health bar is drawn."""
    return health.current / health.max