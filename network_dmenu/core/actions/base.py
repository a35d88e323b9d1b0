"""Base class for menu actions."""
from __future__ import annotations


class Action:
    """Interface for all concrete actions.

    An action knows how to render the single line the launcher shows. The
    dispatcher matches on the concrete type to decide what to run.
    """

    category: str = "action"

    @property
    def display(self) -> str:  # pragma: no cover - interface
        raise NotImplementedError

    def __str__(self) -> str:
        return self.display
