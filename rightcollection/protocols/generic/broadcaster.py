# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import inspect
import logging
import weakref
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar
from uuid import UUID, uuid4

from rightcollection import config

if TYPE_CHECKING:
    from collections.abc import Callable

    from rightcollection.config import ObserverErrorPolicy

__all__ = (
    "EventChannel",
    "Subscription",
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Subscription:
    """Token returned by :meth:`EventChannel.subscribe`."""

    channel: str
    id: UUID = field(default_factory=uuid4)


class EventChannel(Generic[T]):
    """Named pub/sub registry owned by a single observable.

    Unlike a process-wide broadcaster, every channel instance keeps its
    own subscriber list. Delivery is synchronous and follows registration
    order. Subscribers are held strongly until their token is
    unsubscribed; ``subscribe(..., weak=True)`` stores a bound method as
    a ``WeakMethod`` instead, dropped once its owner is collected.

    Example::

        added = EventChannel("added", event_type=PersonEvent)
        token = added.subscribe(print)
        added.emit(PersonEvent(...))
        added.unsubscribe(token)
    """

    def __init__(
        self,
        name: str,
        *,
        event_type: type[T] | None = None,
        on_error: ObserverErrorPolicy | None = None,
    ):
        self.name = name
        self._event_type = event_type
        self._on_error = on_error
        self._subscribers: list[tuple[Subscription, Callable[[], Any]]] = []

    @property
    def on_error(self) -> ObserverErrorPolicy:
        return self._on_error or config.settings.RIGHTCOLLECTION_OBSERVER_ERRORS

    def subscribe(
        self, callback: Callable[[T], Any], *, weak: bool = False
    ) -> Subscription:
        """Register ``callback`` and return a token for removing it.

        The callback is held strongly and stays registered until its
        token is unsubscribed. Registering the same callback twice yields
        two independent subscriptions, and the callback then runs once
        per subscription.

        Args:
            callback: Callable receiving the emitted event.
            weak: Hold a bound method through ``WeakMethod`` so the
                subscription lapses when its owner is garbage collected.
                Ignored for plain functions and for owners that do not
                support weak references.

        Raises:
            TypeError: If ``callback`` is not callable.
        """
        if not callable(callback):
            raise TypeError(f"Subscriber must be callable, not {type(callback).__name__}")

        ref: Callable[[], Any]
        if weak and inspect.ismethod(callback):
            try:
                ref = weakref.WeakMethod(callback)
            except TypeError:
                # owner does not support weak references
                ref = lambda cb=callback: cb
        else:
            ref = lambda cb=callback: cb

        token = Subscription(channel=self.name)
        self._subscribers.append((token, ref))
        logger.debug(f"Subscribed {callback!r} to channel '{self.name}'")
        return token

    def unsubscribe(self, subscription: Subscription | Callable[[T], Any]) -> bool:
        """Remove a subscription by token, or the first one for a callback.

        Returns:
            bool: True if a subscription was removed.
        """
        for entry in list(self._subscribers):
            token, ref = entry
            if isinstance(subscription, Subscription):
                matched = token == subscription
            else:
                matched = ref() == subscription
            if matched:
                self._subscribers.remove(entry)
                logger.debug(f"Unsubscribed {token.id} from channel '{self.name}'")
                return True
        return False

    def clear(self) -> None:
        self._subscribers.clear()

    def _cleanup_dead_refs(self) -> list[Callable[[T], Any]]:
        """Prune dead weakrefs, return live callbacks in registration order."""
        callbacks, alive = [], []
        for token, ref in self._subscribers:
            if (cb := ref()) is not None:
                callbacks.append(cb)
                alive.append((token, ref))
        self._subscribers[:] = alive
        return callbacks

    @property
    def subscriber_count(self) -> int:
        """Count live subscribers (triggers dead ref cleanup)."""
        return len(self._cleanup_dead_refs())

    def emit(self, event: T) -> None:
        """Deliver ``event`` to every live subscriber, in order.

        The subscriber list is snapshotted before delivery starts, so
        callbacks subscribed or removed during delivery only affect
        later emissions.

        Raises:
            ValueError: If ``event`` doesn't match the channel's event type.
        """
        if self._event_type is not None and not isinstance(event, self._event_type):
            raise ValueError(f"Event must be of type {self._event_type.__name__}")
        for callback in self._cleanup_dead_refs():
            try:
                callback(event)
            except Exception as e:
                if self.on_error == "raise":
                    raise
                logger.error(
                    f"Error in subscriber callback on channel '{self.name}': {e}",
                    exc_info=True,
                )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, subscribers={len(self._subscribers)})"
