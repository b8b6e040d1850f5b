"""
Swarm Core Members - Participants whose attack tracks their pack

A member subscribes itself to its group's attack channel and to the
coordinator's member_left channel, then joins. Its attack is only ever
written by those two handlers.

States: unjoined -> active -> left (one-way, no re-join)
"""
from typing import Hashable, Optional

from ..config import BASELINE_ATTACK, CREATURE_STATS, DEFAULT_GROUP
from .pack import PackCoordinator


class PackMember:
    """Base class for anything that fights as part of a pack."""

    base_attack = BASELINE_ATTACK

    def __init__(self, coordinator: PackCoordinator, group_id: Hashable = DEFAULT_GROUP):
        self.coordinator = coordinator
        self.group_id = group_id
        self.id: Optional[int] = None  # Assigned by the coordinator on join
        self.state = "unjoined"  # unjoined, active, left
        self._attack = self.base_attack

        self._attack_subscription = coordinator.attack_channel(group_id).subscribe(
            self, type(self).on_attack_changed
        )
        self._left_subscription = coordinator.member_left.subscribe(
            self, type(self).on_member_left
        )
        self.state = "active"
        coordinator.join(group_id, self)

    @property
    def attack(self) -> int:
        return self._attack

    @property
    def kind(self) -> str:
        return self.__class__.__name__

    @property
    def active(self) -> bool:
        return self.state == "active"

    def leave_group(self) -> None:
        """Leave the pack for good. Calling it again does nothing."""
        if not self.active:
            return
        self.coordinator.leave(self.group_id, self)

    def on_attack_changed(self, attack: int) -> None:
        self._attack = attack

    def on_member_left(self, member: "PackMember") -> None:
        if member is not self:
            return
        self._attack_subscription.dispose()
        self._left_subscription.dispose()
        self._attack = self.base_attack
        self.state = "left"

    def __repr__(self) -> str:
        return f"{self.kind}(id={self.id}, group={self.group_id!r}, attack={self.attack}, state={self.state})"


class Rat(PackMember):
    """Rats attack as a swarm: attack equals the number of rats in play."""

    base_attack = CREATURE_STATS["Rat"]["attack"]

    def kill(self) -> None:
        """A killed rat leaves its pack and drops back to its base attack."""
        self.leave_group()
