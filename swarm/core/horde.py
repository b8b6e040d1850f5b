"""
Swarm Core Horde - Broker chain of responsibility for creature stats

A creature's attack/defense is never stored as a final number. Reading it
raises a Query on the game's query channel; every CreatureModifier that is
still subscribed gets a chance to adjust the value.

Modifiers are plain tagged values (Modifier(kind, amount)). One dispatch
table maps each ModifierKind to the rule that applies it, so adding a rule
means adding a function, not a subclass.

Goblin rules:
- A Goblin is 1/1, a GoblinKing is 3/3
- Every GoblinKing in play gives each ordinary Goblin +1 attack
- Every creature's defense equals the number of creatures in play
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, List

from ..config import CREATURE_STATS
from .events import EventChannel


class WhatToQuery(Enum):
    ATTACK = auto()
    DEFENSE = auto()


class CreatureKind(Enum):
    CREATURE = "Creature"
    GOBLIN = "Goblin"
    GOBLIN_KING = "Goblin King"


class ModifierKind(Enum):
    DOUBLE_ATTACK = auto()
    INCREASE_DEFENSE = auto()
    KING_ATTACK_BONUS = auto()
    HEADCOUNT_DEFENSE = auto()
    NO_BONUSES = auto()


@dataclass
class Query:
    """Mutable message passed through the modifiers."""
    creature: "Creature"
    what: WhatToQuery
    value: int


@dataclass(frozen=True)
class Modifier:
    """A stat rule. amount is used by the additive kinds."""
    kind: ModifierKind
    amount: int = 1


# === Rules ===
# Each rule gets the modifier, the creature owning it and the query.

def _double_attack(modifier: Modifier, owner: "Creature", query: Query) -> None:
    if query.creature is owner and query.what == WhatToQuery.ATTACK:
        query.value *= 2


def _increase_defense(modifier: Modifier, owner: "Creature", query: Query) -> None:
    if query.creature is owner and query.what == WhatToQuery.DEFENSE:
        query.value += modifier.amount


def _king_attack_bonus(modifier: Modifier, owner: "Creature", query: Query) -> None:
    # The king buffs ordinary goblins only, never itself or other kings
    if (query.what == WhatToQuery.ATTACK
            and query.creature is not owner
            and query.creature.kind == CreatureKind.GOBLIN):
        query.value += modifier.amount


def _headcount_defense(modifier: Modifier, owner: "Creature", query: Query) -> None:
    if query.creature is owner and query.what == WhatToQuery.DEFENSE:
        query.value = len(owner.game.creatures)


def _no_bonuses(modifier: Modifier, owner: "Creature", query: Query) -> None:
    pass  # Only meaningful in a ModifierChain, where it stops the chain


RULES: Dict[ModifierKind, Callable[[Modifier, "Creature", Query], None]] = {
    ModifierKind.DOUBLE_ATTACK: _double_attack,
    ModifierKind.INCREASE_DEFENSE: _increase_defense,
    ModifierKind.KING_ATTACK_BONUS: _king_attack_bonus,
    ModifierKind.HEADCOUNT_DEFENSE: _headcount_defense,
    ModifierKind.NO_BONUSES: _no_bonuses,
}


def apply_modifier(modifier: Modifier, owner: "Creature", query: Query) -> None:
    """Apply one modifier to a query on behalf of its owner."""
    rule = RULES.get(modifier.kind)
    if rule is None:
        raise ValueError(f"Unknown modifier kind: {modifier.kind}")
    rule(modifier, owner, query)


# === Game (query broker) ===

class Game:
    """Creatures in play plus the query channel their modifiers listen on."""

    def __init__(self):
        self.queries: EventChannel[Query] = EventChannel()
        self.creatures: List["Creature"] = []

    def perform_query(self, query: Query) -> None:
        self.queries.publish(query)

    def add(self, creature: "Creature") -> None:
        if not any(c is creature for c in self.creatures):
            self.creatures.append(creature)

    def remove(self, creature: "Creature") -> None:
        """Remove a creature from play. Unknown creatures are ignored."""
        self.creatures = [c for c in self.creatures if c is not creature]

    def count(self, kind: CreatureKind) -> int:
        return sum(1 for c in self.creatures if c.kind == kind)


class CreatureModifier:
    """Subscribes one Modifier to the game's queries for its owner.

    The channel only holds the modifier weakly, so whoever creates it must
    keep a reference (Creature.modify does this).
    """

    def __init__(self, game: Game, creature: "Creature", modifier: Modifier):
        self.game = game
        self.creature = creature
        self.modifier = modifier
        self._subscription = game.queries.subscribe(self, CreatureModifier.handle)

    def handle(self, query: Query) -> None:
        apply_modifier(self.modifier, self.creature, query)

    def dispose(self) -> None:
        self._subscription.dispose()

    def __enter__(self) -> "CreatureModifier":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()


# === Creatures ===

class Creature:
    """Base creature. Stats are resolved through the game's queries."""

    def __init__(self, game: Game, name: str, attack: int, defense: int,
                 kind: CreatureKind = CreatureKind.CREATURE):
        self.game = game
        self.name = name
        self.base_attack = attack
        self.base_defense = defense
        self.kind = kind
        self.modifiers: List[CreatureModifier] = []
        game.add(self)

    @property
    def attack(self) -> int:
        query = Query(self, WhatToQuery.ATTACK, self.base_attack)
        self.game.perform_query(query)
        return query.value

    @property
    def defense(self) -> int:
        query = Query(self, WhatToQuery.DEFENSE, self.base_defense)
        self.game.perform_query(query)
        return query.value

    def modify(self, modifier: Modifier) -> CreatureModifier:
        """Attach a modifier owned by this creature."""
        creature_modifier = CreatureModifier(self.game, self, modifier)
        self.modifiers.append(creature_modifier)
        return creature_modifier

    def leave(self) -> None:
        """Drop all own modifiers and leave play."""
        for creature_modifier in self.modifiers:
            creature_modifier.dispose()
        self.modifiers.clear()
        self.game.remove(self)

    def __repr__(self) -> str:
        return f"{self.name} ({self.attack}/{self.defense})"


class Goblin(Creature):
    """Ordinary goblin. Defense grows with the horde."""

    def __init__(self, game: Game, name: str = "Goblin"):
        stats = CREATURE_STATS["Goblin"]
        super().__init__(game, name, stats["attack"], stats["defense"], CreatureKind.GOBLIN)
        self.modify(Modifier(ModifierKind.HEADCOUNT_DEFENSE))


class GoblinKing(Goblin):
    """Counts as a goblin for headcount and buffs every ordinary goblin."""

    def __init__(self, game: Game, name: str = "Goblin King"):
        super().__init__(game, name)
        stats = CREATURE_STATS["GoblinKing"]
        self.base_attack = stats["attack"]
        self.base_defense = stats["defense"]
        self.kind = CreatureKind.GOBLIN_KING
        self.modify(Modifier(ModifierKind.KING_ATTACK_BONUS))


# === Permanent chain ===

class ModifierChain:
    """Classic chain: applies modifiers in order to the creature's base stats.

    Unlike CreatureModifier the result is written back permanently.
    A NO_BONUSES modifier ends the chain.
    """

    def __init__(self, creature: Creature):
        self.creature = creature
        self.modifiers: List[Modifier] = []

    def add(self, modifier: Modifier) -> "ModifierChain":
        self.modifiers.append(modifier)
        return self

    def handle(self) -> None:
        attack = Query(self.creature, WhatToQuery.ATTACK, self.creature.base_attack)
        defense = Query(self.creature, WhatToQuery.DEFENSE, self.creature.base_defense)
        for modifier in self.modifiers:
            if modifier.kind == ModifierKind.NO_BONUSES:
                break
            apply_modifier(modifier, self.creature, attack)
            apply_modifier(modifier, self.creature, defense)
        self.creature.base_attack = attack.value
        self.creature.base_defense = defense.value
