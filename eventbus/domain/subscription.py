"""Handler type and subscription token handed out by the event bus."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

E = TypeVar("E")

EventHandler = Callable[[E], None]


@dataclass(frozen=True, eq=False)
class Subscription(Generic[E]):
    """One registered interest in events of ``event_type``.

    Tokens compare and hash by identity: two subscriptions wrapping the
    same handler are distinct, and each is cancelled on its own.
    """

    event_type: type[E]
    handler: EventHandler[E]

    def __repr__(self) -> str:
        name = getattr(self.handler, "__qualname__", repr(self.handler))
        return f"<Subscription {self.event_type.__name__} -> {name} at {id(self):#x}>"
