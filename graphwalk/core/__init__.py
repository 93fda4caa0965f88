"""Core abstractions for GraphWalk.

This module contains the traversal engine: node trackers, the single-use
Traversal session and the reusable Walker that starts sessions.
"""

from .tracker import (
    Tracker,
    SetTracker,
    KeyedTracker,
    LockingTracker,
    always_visit,
    as_tracker,
)
from .traversal import Traversal
from .walker import Walker

__all__ = [
    "Tracker",
    "SetTracker",
    "KeyedTracker",
    "LockingTracker",
    "always_visit",
    "as_tracker",
    "Traversal",
    "Walker",
]
