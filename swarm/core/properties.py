"""
Swarm Core Properties - Observing plain attribute changes

Person shows the two observer flavours built on EventChannel:

- a domain event (falls_ill) raised with a payload
- property notifications: property_changing may veto a new value,
  property_changed reports the new value and any dependent property
  (can_vote) that flipped as a result
"""
from dataclasses import dataclass
from typing import Any

from ..config import VOTING_AGE
from .events import EventChannel


@dataclass
class PropertyChanging:
    """Raised before a change. Handlers set cancel=True to veto it."""
    name: str
    value: Any
    cancel: bool = False


@dataclass
class PropertyChanged:
    """Raised after a change was applied."""
    name: str
    value: Any


class Person:
    def __init__(self, age: int = 0):
        self._age = age
        self.falls_ill: EventChannel[str] = EventChannel()
        self.property_changing: EventChannel[PropertyChanging] = EventChannel()
        self.property_changed: EventChannel[PropertyChanged] = EventChannel()

    def catch_cold(self, address: str) -> None:
        self.falls_ill.publish(address)

    @property
    def age(self) -> int:
        return self._age

    @age.setter
    def age(self, value: int) -> None:
        if value == self._age:
            return

        old_can_vote = self.can_vote
        changing = PropertyChanging("age", value)
        self.property_changing.publish(changing)
        if changing.cancel:
            return

        self._age = value
        self.property_changed.publish(PropertyChanged("age", value))
        if self.can_vote != old_can_vote:
            self.property_changed.publish(PropertyChanged("can_vote", self.can_vote))

    @property
    def can_vote(self) -> bool:
        return self._age >= VOTING_AGE
