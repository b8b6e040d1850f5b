"""Swarm Core - Eventing and pack logic"""
from .events import (
    EventBus,
    EventChannel,
    Subscription,
    MemberJoinedEvent,
    MemberLeftEvent,
    PackResizedEvent,
)
from .pack import PackCoordinator
from .members import PackMember, Rat
from .horde import (
    Game,
    Query,
    Modifier,
    ModifierKind,
    CreatureModifier,
    ModifierChain,
    Creature,
    Goblin,
    GoblinKing,
)
from .properties import Person, PropertyChanging, PropertyChanged
from .handlers import LoggerHandler
