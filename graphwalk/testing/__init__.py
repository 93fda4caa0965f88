"""Testing utilities for GraphWalk consumers."""

from .fixtures import GraphFixture, RecordingSuccessors, naturals

__all__ = ['GraphFixture', 'RecordingSuccessors', 'naturals']
