from typing import Any, Callable, List

__all__ = ["Event"]


class Event:
    """Ordered set of callbacks, called with the object that emitted the event.

    >>> changed = Event()
    >>> changed.add(print)
    >>> changed("sender")
    sender
    """

    __slots__ = ["targets"]

    def __init__(self) -> None:
        self.targets: List[Callable] = []

    def add(self, target: Callable) -> None:
        if target not in self.targets:
            self.targets.append(target)

    def remove(self, target: Callable) -> None:
        if target in self.targets:
            self.targets.remove(target)

    def clear(self) -> None:
        self.targets.clear()

    def copy(self) -> "Event":
        event = type(self)()
        event.targets.extend(self.targets)
        return event

    def __len__(self) -> int:
        return len(self.targets)

    def __call__(self, sender: Any) -> None:
        # Targets may detach themselves while being notified.
        for target in list(self.targets):
            target(sender)
