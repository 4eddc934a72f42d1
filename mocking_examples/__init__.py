"""Fixture types for the stubbing, mocking and spying examples in `tests/`."""

from .events import Event
from .samples import Ref, SampleClass, SampleInterface
from .settings import Settings


__all__ = ['Event', 'Ref', 'SampleClass', 'SampleInterface', 'Settings']
