"""
Swarm Core Events - Channels, Subscriptions and the EventBus

An EventChannel is a typed publish/subscribe list. Subscribers register a
target object plus an unbound handler; the channel only keeps a weak
reference to the target, so a collected target is skipped and pruned
instead of being kept alive by the channel.

    channel = EventChannel()
    sub = channel.subscribe(rat, Rat.on_attack_changed)
    channel.publish(3)      # calls Rat.on_attack_changed(rat, 3)
    sub.dispose()           # idempotent

The EventBus groups one channel per event dataclass type, the same way the
game's systems publish SpawnEvent/DeathEvent to handler objects.
"""
import weakref
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Hashable, List, Optional, TypeVar

T = TypeVar("T")


# === Event Dataclasses ===

@dataclass
class MemberJoinedEvent:
    """Fired after a member has been added to a pack."""
    group_id: Hashable
    member_id: int
    kind: str
    pack_size: int


@dataclass
class MemberLeftEvent:
    """Fired after a member has been removed from a pack."""
    group_id: Hashable
    member_id: int
    kind: str
    pack_size: int


@dataclass
class PackResizedEvent:
    """Fired once per join/leave with the recomputed shared attack."""
    group_id: Hashable
    pack_size: int
    attack: int


# === Subscription ===

class Subscription(Generic[T]):
    """Disposable registration of one handler on one EventChannel.

    Holds a weak reference to its target and a strong reference to the
    handler. Usable as a context manager; leaving the block disposes it.
    """

    def __init__(self, channel: "EventChannel[T]", target: Any, handler: Callable[[Any, T], None]):
        self._channel = channel
        self._target = weakref.ref(target)
        self.handler = handler
        self.disposed = False

    @property
    def target(self) -> Optional[Any]:
        """The subscribed object, or None once it has been collected."""
        return self._target()

    @property
    def alive(self) -> bool:
        return not self.disposed and self._target() is not None

    def invoke(self, value: T) -> bool:
        """Call the handler with the live target. Returns False if skipped."""
        if self.disposed:
            return False
        target = self._target()
        if target is None:
            return False
        self.handler(target, value)
        return True

    def dispose(self) -> None:
        self._channel.dispose(self)

    def __enter__(self) -> "Subscription[T]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()


# === EventChannel ===

class EventChannel(Generic[T]):
    """Ordered list of subscriptions raised with a payload of type T."""

    def __init__(self):
        self._subscriptions: List[Subscription[T]] = []

    def subscribe(self, target: Any, handler: Callable[[Any, T], None]) -> Subscription[T]:
        """Register handler(target, value); returns a disposable handle.

        The target must support weak references. Plain class instances do;
        dict, None and __slots__ classes without __weakref__ raise TypeError.
        """
        if not callable(handler):
            raise TypeError(f"Handler must be callable, got {type(handler).__name__}")
        try:
            weakref.ref(target)
        except TypeError:
            raise TypeError(
                f"Cannot subscribe {type(target).__name__}: target must support weak references"
            ) from None
        subscription = Subscription(self, target, handler)
        self._subscriptions.append(subscription)
        return subscription

    def publish(self, value: T) -> None:
        """Invoke every live subscription in registration order.

        Handler exceptions propagate to the caller.
        """
        stale = False
        for subscription in list(self._subscriptions):
            if subscription.disposed:
                continue
            if not subscription.invoke(value):
                stale = True
        if stale:
            self._prune()

    def dispose(self, subscription: Subscription[T]) -> None:
        """Remove a subscription. Disposing twice is a no-op.

        A subscription belonging to another channel is disposed there.
        """
        if subscription._channel is not self:
            subscription._channel.dispose(subscription)
            return
        if subscription.disposed:
            return
        subscription.disposed = True
        # Identity match; Subscription does not define __eq__.
        self._subscriptions = [s for s in self._subscriptions if s is not subscription]

    def _prune(self) -> None:
        for subscription in self._subscriptions:
            if subscription.target is None:
                subscription.disposed = True
        self._subscriptions = [s for s in self._subscriptions if not s.disposed]

    def clear(self) -> None:
        for subscription in self._subscriptions:
            subscription.disposed = True
        self._subscriptions.clear()

    def __len__(self) -> int:
        return len(self._subscriptions)


# === EventBus ===

class EventBus:
    """One EventChannel per event type, with optional recording."""

    def __init__(self):
        self._channels: Dict[type, EventChannel] = {}
        self._event_history: List[Any] = []  # For debugging/replay
        self._recording = False

    def channel(self, event_type: type) -> EventChannel:
        """Get (or lazily create) the channel for an event type."""
        if event_type not in self._channels:
            self._channels[event_type] = EventChannel()
        return self._channels[event_type]

    def subscribe(self, event_type: type, target: Any, handler: Callable) -> Subscription:
        """Register handler(target, event) for an event type."""
        return self.channel(event_type).subscribe(target, handler)

    def publish(self, event: Any) -> None:
        """Notify all handlers subscribed to this event's type."""
        if self._recording:
            self._event_history.append(event)

        channel = self._channels.get(type(event))
        if channel is not None:
            channel.publish(event)

    def clear(self) -> None:
        """Dispose all subscriptions on every channel."""
        for channel in self._channels.values():
            channel.clear()
        self._channels.clear()

    def start_recording(self) -> None:
        """Start recording events for replay/debugging."""
        self._recording = True
        self._event_history.clear()

    def stop_recording(self) -> List[Any]:
        """Stop recording and return event history."""
        self._recording = False
        return self._event_history.copy()
