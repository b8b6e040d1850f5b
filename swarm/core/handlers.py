"""
Swarm Core Handlers - Event-driven logging

Nothing in the core prints. Anything that wants a trace subscribes a
handler to the EventBus instead.
"""
from typing import List, Optional

from .events import EventBus, MemberJoinedEvent, MemberLeftEvent, PackResizedEvent


class LoggerHandler:
    """Logs pack membership events to console and optionally to a file.

    The bus only holds the handler weakly, so whoever creates it must keep
    a reference for as long as it should log.
    """

    def __init__(self, bus: EventBus, verbose: bool = False, log_file: Optional[str] = None):
        self.verbose = verbose
        self.log_file = log_file
        self.logs: List[str] = []
        self._subscriptions = [
            bus.subscribe(MemberJoinedEvent, self, LoggerHandler.on_join),
            bus.subscribe(MemberLeftEvent, self, LoggerHandler.on_leave),
        ]
        if verbose:
            self._subscriptions.append(
                bus.subscribe(PackResizedEvent, self, LoggerHandler.on_resize)
            )

    def on_join(self, event: MemberJoinedEvent) -> None:
        self._log(f"[JOIN] {event.kind} #{event.member_id} joined {event.group_id} (size {event.pack_size})")

    def on_leave(self, event: MemberLeftEvent) -> None:
        self._log(f"[LEAVE] {event.kind} #{event.member_id} left {event.group_id} (size {event.pack_size})")

    def on_resize(self, event: PackResizedEvent) -> None:
        self._log(f"[PACK] {event.group_id}: {event.pack_size} members, attack {event.attack}")

    def _log(self, line: str) -> None:
        self.logs.append(line)
        print(line)

        # Write to file if specified
        if self.log_file:
            with open(self.log_file, 'a') as f:
                f.write(line + '\n')

    def get_recent_logs(self, count: int = 10) -> List[str]:
        """Get most recent log entries."""
        return self.logs[-count:]

    def save_logs(self, filename: str) -> None:
        """Save all logs to a file."""
        with open(filename, 'w') as f:
            for line in self.logs:
                f.write(line + '\n')

    def detach(self) -> None:
        """Stop listening on the bus."""
        for subscription in self._subscriptions:
            subscription.dispose()
        self._subscriptions.clear()
