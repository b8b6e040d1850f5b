"""
Swarm Core Pack - Membership and the shared attack broadcast

The PackCoordinator owns, per group, the live list of members and one
EventChannel[int] carrying the pack's shared attack. Every join and every
leave does exactly one recompute + broadcast pass, so after it returns each
active member's attack equals attack_formula(len(pack)).

A coordinator is created explicitly and handed to its members; two
coordinators never share state.
"""
from typing import TYPE_CHECKING, Callable, Dict, Hashable, List, Optional, Tuple

from .events import (
    EventBus,
    EventChannel,
    MemberJoinedEvent,
    MemberLeftEvent,
    PackResizedEvent,
)

if TYPE_CHECKING:
    from .members import PackMember


def headcount(size: int) -> int:
    """Default rule: every member attacks with the pack size."""
    return size


class PackCoordinator:
    """Registry of groups, their members and their attack channels."""

    def __init__(self, bus: Optional[EventBus] = None,
                 attack_formula: Callable[[int], int] = headcount):
        self.bus = bus
        self.attack_formula = attack_formula
        self._packs: Dict[Hashable, List["PackMember"]] = {}
        self._channels: Dict[Hashable, EventChannel[int]] = {}
        self._next_ids: Dict[Hashable, int] = {}
        # Raised with the member itself right after it was removed
        self.member_left: EventChannel["PackMember"] = EventChannel()

    def attack_channel(self, group_id: Hashable) -> EventChannel[int]:
        """Get (or lazily create) the shared-attack channel of a group."""
        if group_id not in self._channels:
            self._channels[group_id] = EventChannel()
        return self._channels[group_id]

    def join(self, group_id: Hashable, member: "PackMember") -> None:
        """Add member to the group and broadcast the new attack to all of it."""
        pack = self._packs.setdefault(group_id, [])
        member.id = self._next_ids.get(group_id, 0)
        self._next_ids[group_id] = member.id + 1
        pack.append(member)

        if self.bus:
            self.bus.publish(MemberJoinedEvent(
                group_id=group_id,
                member_id=member.id,
                kind=member.kind,
                pack_size=len(pack),
            ))
        self._broadcast(group_id)

    def leave(self, group_id: Hashable, member: "PackMember") -> None:
        """Remove member, reset it through member_left, rebroadcast the rest.

        Removing a member that is not in the group does nothing.
        """
        pack = self._packs.get(group_id, [])
        index = self._index_of(pack, member)
        if index is None:
            return
        del pack[index]

        self.member_left.publish(member)
        if self.bus:
            self.bus.publish(MemberLeftEvent(
                group_id=group_id,
                member_id=member.id,
                kind=member.kind,
                pack_size=len(pack),
            ))
        self._broadcast(group_id)

    def current_size(self, group_id: Hashable) -> int:
        return len(self._packs.get(group_id, []))

    def members(self, group_id: Hashable) -> Tuple["PackMember", ...]:
        """Snapshot of a group's members in join order."""
        return tuple(self._packs.get(group_id, []))

    def groups(self) -> List[Hashable]:
        """All groups that have ever had a member."""
        return list(self._packs.keys())

    def _broadcast(self, group_id: Hashable) -> None:
        size = self.current_size(group_id)
        attack = self.attack_formula(size)
        self.attack_channel(group_id).publish(attack)
        if self.bus:
            self.bus.publish(PackResizedEvent(group_id=group_id, pack_size=size, attack=attack))

    @staticmethod
    def _index_of(pack: List["PackMember"], member: "PackMember") -> Optional[int]:
        for i, candidate in enumerate(pack):
            if candidate is member:
                return i
        return None
