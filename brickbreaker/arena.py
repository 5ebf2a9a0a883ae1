"""Capability interfaces entities hold instead of the whole session.

Entities query arena bounds and report events through these protocols;
the session satisfies them, but so does any small test double.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class ArenaBounds(Protocol):
    """Fixed-size play field bounding all entities."""

    @property
    def width(self) -> float:
        ...

    @property
    def height(self) -> float:
        ...


@runtime_checkable
class BallEventSink(Protocol):
    """Receives events the ball cannot resolve on its own."""

    def ball_lost(self) -> None:
        ...


@runtime_checkable
class BallArena(ArenaBounds, BallEventSink, Protocol):
    """What a ball needs from its owner: bounds plus an event sink."""


@runtime_checkable
class Rect(Protocol):
    """Axis-aligned rectangle with left/top origin."""

    @property
    def x(self) -> float:
        ...

    @property
    def y(self) -> float:
        ...

    @property
    def width(self) -> float:
        ...

    @property
    def height(self) -> float:
        ...
