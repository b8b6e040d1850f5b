"""Test the goblin horde and the modifier chains."""
import pytest

from swarm.core.horde import (
    Creature,
    CreatureKind,
    Goblin,
    GoblinKing,
    Modifier,
    ModifierChain,
    ModifierKind,
    Query,
    WhatToQuery,
    apply_modifier,
)


class TestGoblinRules:
    """Goblin and GoblinKing stat rules."""

    def test_lone_goblin(self, game):
        goblin = Goblin(game)
        assert goblin.attack == 1
        assert goblin.defense == 1

    def test_three_goblins(self, game):
        goblins = [Goblin(game) for _ in range(3)]
        for goblin in goblins:
            assert goblin.attack == 1
            assert goblin.defense == 3

    def test_king_then_three_goblins(self, game):
        king = GoblinKing(game)
        goblins = [Goblin(game) for _ in range(3)]
        for goblin in goblins:
            assert goblin.attack == 2
            assert goblin.defense == 4
        assert king.defense == 4
        assert king.attack == 3

    def test_king_joins_existing_horde(self, game):
        goblins = [Goblin(game) for _ in range(3)]
        GoblinKing(game)
        for goblin in goblins:
            assert goblin.attack == 2
            assert goblin.defense == 4

    def test_two_kings(self, game):
        GoblinKing(game)
        GoblinKing(game)
        goblin = Goblin(game)
        assert goblin.attack == 3
        assert goblin.defense == 3

    def test_king_leaving_removes_bonus(self, game):
        king = GoblinKing(game)
        goblin = Goblin(game)
        assert goblin.attack == 2
        king.leave()
        assert goblin.attack == 1
        assert goblin.defense == 1
        assert game.count(CreatureKind.GOBLIN_KING) == 0

    def test_games_do_not_interfere(self, game):
        from swarm.core.horde import Game
        other = Game()
        GoblinKing(other)
        goblin = Goblin(game)
        assert goblin.attack == 1

    def test_count(self, game):
        GoblinKing(game)
        Goblin(game)
        Goblin(game)
        assert game.count(CreatureKind.GOBLIN) == 2
        assert game.count(CreatureKind.GOBLIN_KING) == 1


class TestBrokerChain:
    """Query-time modifiers on arbitrary creatures."""

    def test_modifiers_apply_and_dispose(self, game):
        goblin = Creature(game, "Strong Goblin", 3, 3)
        assert (goblin.attack, goblin.defense) == (3, 3)

        double = goblin.modify(Modifier(ModifierKind.DOUBLE_ATTACK))
        assert goblin.attack == 6

        defense = goblin.modify(Modifier(ModifierKind.INCREASE_DEFENSE, 2))
        assert goblin.defense == 5

        defense.dispose()
        assert goblin.defense == 3
        double.dispose()
        assert goblin.attack == 3

    def test_modifier_only_affects_owner(self, game):
        strong = Creature(game, "Strong Goblin", 3, 3)
        weak = Creature(game, "Weak Goblin", 1, 1)
        strong.modify(Modifier(ModifierKind.DOUBLE_ATTACK))
        assert weak.attack == 1

    def test_modifier_as_context_manager(self, game):
        from swarm.core.horde import CreatureModifier
        goblin = Creature(game, "Goblin", 2, 2)
        with CreatureModifier(game, goblin, Modifier(ModifierKind.DOUBLE_ATTACK)):
            assert goblin.attack == 4
        assert goblin.attack == 2

    def test_no_bonuses_is_inert_at_query_time(self, game):
        goblin = Creature(game, "Goblin", 2, 2)
        goblin.modify(Modifier(ModifierKind.NO_BONUSES))
        goblin.modify(Modifier(ModifierKind.DOUBLE_ATTACK))
        assert goblin.attack == 4

    def test_leave_disposes_modifiers(self, game):
        goblin = Creature(game, "Goblin", 2, 2)
        goblin.modify(Modifier(ModifierKind.DOUBLE_ATTACK))
        goblin.leave()
        assert len(game.queries) == 0
        assert goblin not in game.creatures

    def test_unknown_modifier_kind(self, game):
        goblin = Creature(game, "Goblin", 2, 2)
        query = Query(goblin, WhatToQuery.ATTACK, 2)
        with pytest.raises(ValueError):
            apply_modifier(Modifier("sideways"), goblin, query)

    def test_repr(self, game):
        goblin = Creature(game, "Goblin", 2, 2)
        assert repr(goblin) == "Goblin (2/2)"


class TestModifierChain:
    """Permanent modifiers applied in order."""

    def test_chain_applies_in_order(self, game):
        goblin = Creature(game, "Goblin", 2, 2)
        chain = ModifierChain(goblin)
        chain.add(Modifier(ModifierKind.DOUBLE_ATTACK)).add(Modifier(ModifierKind.INCREASE_DEFENSE, 3))
        chain.handle()
        assert goblin.base_attack == 4
        assert goblin.base_defense == 5
        assert goblin.attack == 4

    def test_no_bonuses_stops_chain(self, game):
        goblin = Creature(game, "Goblin", 2, 2)
        chain = ModifierChain(goblin)
        chain.add(Modifier(ModifierKind.NO_BONUSES))
        chain.add(Modifier(ModifierKind.DOUBLE_ATTACK))
        chain.add(Modifier(ModifierKind.INCREASE_DEFENSE, 3))
        chain.handle()
        assert goblin.base_attack == 2
        assert goblin.base_defense == 2
