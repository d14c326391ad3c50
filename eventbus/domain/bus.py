"""Thread-safe, type-keyed in-process event bus."""

from __future__ import annotations

import logging
import threading
from typing import Any, TypeVar

from eventbus.domain.subscription import EventHandler, Subscription

logger = logging.getLogger(__name__)

E = TypeVar("E")


class EventBus:
    """Publish/subscribe registry keyed by event class.

    Handlers are called synchronously in registration order. ``publish``
    copies the subscriber list under the lock and invokes it outside the
    lock, so handlers may subscribe, unsubscribe or publish on the same bus.
    If a handler raises, the exception reaches the publisher and the rest of
    that snapshot is skipped.
    """

    def __init__(self, name: str = "default") -> None:
        self.name = name
        self._lock = threading.Lock()
        self._subscriptions: dict[type, list[Subscription[Any]]] = {}

    def __repr__(self) -> str:
        return f"<EventBus {self.name!r}>"

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------

    def subscribe(self, event_type: type[E], handler: EventHandler[E]) -> Subscription[E]:
        """Register *handler* for events of exactly *event_type*.

        Raises ``TypeError`` before touching any state if *event_type* is not
        a class or *handler* is not callable.
        """
        if not isinstance(event_type, type):
            raise TypeError(f"event_type must be a class, got {event_type!r}")
        if not callable(handler):
            raise TypeError("event handler must be callable")

        subscription = Subscription(event_type=event_type, handler=handler)
        with self._lock:
            self._subscriptions.setdefault(event_type, []).append(subscription)

        logger.debug("%r: subscribed %r", self, subscription)
        return subscription

    def unsubscribe(
        self, subscription: Subscription[Any], event_type: type | None = None
    ) -> None:
        """Cancel *subscription*. Unknown or already-cancelled tokens are ignored.

        Without *event_type* the token's own type is used. Passing it looks
        only in that type's bucket, so a token of another type is not found.
        """
        key = subscription.event_type if event_type is None else event_type

        with self._lock:
            removed = self._remove(key, subscription)

        if removed:
            logger.debug("%r: unsubscribed %r", self, subscription)
        else:
            logger.debug("%r: %r was not subscribed", self, subscription)

    def _remove(self, event_type: type, subscription: Subscription[Any]) -> bool:
        # Caller holds the lock. Compare by identity, never by handler.
        bucket = self._subscriptions.get(event_type)
        if not bucket:
            return False
        for index, existing in enumerate(bucket):
            if existing is subscription:
                del bucket[index]
                return True
        return False

    # ------------------------------------------------------------------
    # Publishing
    # ------------------------------------------------------------------

    def publish(self, event: Any, event_type: type | None = None) -> None:
        """Invoke every handler subscribed to the event's type.

        The dispatch key is *event_type* when given, otherwise
        ``type(event)``. Publishing with no subscribers does nothing.
        """
        key = type(event) if event_type is None else event_type
        snapshot = self.subscriptions(key)

        logger.debug("%r: publishing %s to %d handler(s)", self, key.__name__, len(snapshot))
        for subscription in snapshot:
            subscription.handler(event)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def subscriptions(self, event_type: type[E]) -> tuple[Subscription[E], ...]:
        """Return a snapshot of the active subscriptions for *event_type*."""
        with self._lock:
            return tuple(self._subscriptions.get(event_type, ()))

    def subscriber_count(self, event_type: type) -> int:
        with self._lock:
            return len(self._subscriptions.get(event_type, ()))

    def is_subscribed(self, subscription: Subscription[Any]) -> bool:
        with self._lock:
            bucket = self._subscriptions.get(subscription.event_type, ())
            return any(existing is subscription for existing in bucket)

    def event_types(self) -> tuple[type, ...]:
        with self._lock:
            return tuple(self._subscriptions)


__all__ = ["EventBus"]
