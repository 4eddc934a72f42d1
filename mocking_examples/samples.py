"""The types the examples stub, mock and spy on.

`SampleInterface` is the interface flavor, `SampleClass` the concrete one.
Python has no out/ref parameters, `Ref` boxes a value instead.

Python also has no non-virtual members: every attribute lookup is dynamic and
every method can be replaced at runtime.  Members which would be non-virtual
in a statically dispatched language are marked `typing.final`, which only a
type checker looks at.
"""
from __future__ import annotations
from abc import ABCMeta, abstractmethod
import logging

from typing import Any, final

from .events import Event, Handler


logger = logging.getLogger(__name__)


class Ref:
    """A mutable box, standing in for an ``out`` or ``ref`` parameter."""

    __slots__ = ('value',)

    def __init__(self, value: Any = None) -> None:
        self.value = value

    def set(self, value: Any) -> None:
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, Ref):
            return NotImplemented
        return self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "Ref({!r})".format(self.value)


class SampleInterface(metaclass=ABCMeta):
    @property
    @abstractmethod
    def sample_property(self) -> str:
        ...

    @sample_property.setter
    @abstractmethod
    def sample_property(self, value: str) -> None:
        ...

    @abstractmethod
    def void_method(self) -> None:
        ...

    @abstractmethod
    def method_that_returns_integer(self, s: str) -> int:
        ...

    @abstractmethod
    def method_that_returns_object(self, i: int) -> object:
        ...

    @abstractmethod
    def method_with_out_parameter(self, out: Ref) -> None:
        """Store the result in ``out.value``."""

    @abstractmethod
    def method_with_ref_parameter(self, ref: Ref) -> None:
        """Read ``ref.value`` and possibly replace it."""

    @abstractmethod
    def subscribe(self, handler: Handler) -> None:
        """Subscribe to 'some event'; handlers get ``(sender, payload)``."""

    @abstractmethod
    def unsubscribe(self, handler: Handler) -> None:
        ...


class SampleClass(SampleInterface):
    """A concrete class which records which of its members ran.

    Every ``*_was_*`` flag starts out ``False`` and flips when the real
    implementation of the corresponding member runs.  The members marked
    `final` stand in for non-virtual members.
    """

    def __init__(self, value: Any = None) -> None:
        self._value = value
        self._sample_property: str | None = None
        self._virtual_property: str | None = None

        self.property_was_set = False
        self.virtual_property_was_set = False
        self.void_method_was_called = False
        self.integer_method_was_called = False
        self.object_method_was_called = False
        self.handler_was_subscribed = False

        self.some_event = Event('some_event')
        self._virtual_event = Event('virtual_event')

    @property
    def value(self) -> Any:
        """Only the constructor can set this."""
        return self._value

    @property
    @final
    def sample_property(self) -> str | None:
        return self._sample_property

    @sample_property.setter
    @final
    def sample_property(self, value: str) -> None:
        logger.debug("sample_property set to {!r}".format(value))
        self._sample_property = value
        self.property_was_set = True

    @property
    def virtual_property(self) -> str | None:
        return self._virtual_property

    @virtual_property.setter
    def virtual_property(self, value: str) -> None:
        logger.debug("virtual_property set to {!r}".format(value))
        self._virtual_property = value
        self.virtual_property_was_set = True

    @final
    def void_method(self) -> None:
        logger.debug("void_method called")
        self.void_method_was_called = True

    def method_that_returns_integer(self, s: str) -> int:
        logger.debug("method_that_returns_integer called with {!r}".format(s))
        self.integer_method_was_called = True
        return len(s)

    @final
    def method_that_returns_object(self, i: int) -> object:
        logger.debug("method_that_returns_object called with {!r}".format(i))
        self.object_method_was_called = True
        return [i]

    def method_with_out_parameter(self, out: Ref) -> None:
        out.value = 42

    def method_with_ref_parameter(self, ref: Ref) -> None:
        if ref.value is not None:
            ref.value = ref.value.upper()

    def subscribe(self, handler: Handler) -> None:
        logger.debug("subscribe called with {!r}".format(handler))
        self.handler_was_subscribed = True
        self._virtual_event.subscribe(handler)

    def unsubscribe(self, handler: Handler) -> None:
        self._virtual_event.unsubscribe(handler)

    @final
    def raise_some_event(self, payload: Any = None) -> None:
        self.some_event.broadcast(self, payload)

    def raise_virtual_event(self, payload: Any = None) -> None:
        self._virtual_event.broadcast(self, payload)
