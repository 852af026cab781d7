"""Concrete temperature sources."""

from .polling import PollingSource
from .sequence import SequenceSource

__all__ = [
    "PollingSource",
    "SequenceSource",
]
