from __future__ import annotations
import logging

from typing import Callable, TypeVar


Handler = Callable[..., None]
F = TypeVar('F', bound=Handler)


logger = logging.getLogger(__name__)


class Event:
    """A list of handlers which get called in subscription order.

    ``+=`` and ``-=`` are aliases for `subscribe` and `unsubscribe`, so an
    event reads like a field of handlers::

        sample.some_event += on_changed
        sample.some_event.broadcast(sample, 'payload')

    """

    def __init__(self, name: str = 'event') -> None:
        self.name = name
        self._handlers: list[Handler] = []

    def subscribe(self, fn: Handler) -> None:
        if fn not in self._handlers:
            self._handlers.append(fn)

    def unsubscribe(self, fn: Handler) -> None:
        try:
            self._handlers.remove(fn)
        except ValueError:
            pass

    def broadcast(self, *args, **kwargs) -> None:
        for fn in self._handlers.copy():
            try:
                fn(*args, **kwargs)
            except Exception:
                logger.exception(
                    "Handler {!r} of '{}' failed".format(fn, self.name))

    def on(self, fn: F) -> F:
        self.subscribe(fn)
        return fn

    off = unsubscribe

    def __iadd__(self, fn: Handler) -> Event:
        self.subscribe(fn)
        return self

    def __isub__(self, fn: Handler) -> Event:
        self.unsubscribe(fn)
        return self

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, fn: object) -> bool:
        return fn in self._handlers

    def __repr__(self) -> str:
        return "<Event {!r} handlers={}>".format(self.name, len(self._handlers))
