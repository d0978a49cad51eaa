"""Boundary Protocols — contract between the engine and the audio collaborator.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - The engine calls the port and discards whatever it returns

Design Decisions:
    - Protocol over ABC: any callable taking the event name satisfies the port
"""

from typing import Protocol


class FeedbackPort(Protocol):
    """Fire-and-forget signal emitted once per accepted key event."""
    def __call__(self, event: str) -> object: ...
