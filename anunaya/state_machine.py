"""Interfaces for rollup application state and state transitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class AppState(ABC):
    """State of a rollup application, identified by a 32-byte root."""

    @abstractmethod
    def state_root(self) -> bytes:
        """Return the current 32-byte state root."""

    @abstractmethod
    def previous_state_root(self) -> bytes | None:
        """Return the previous state root, if any."""


class StateTransitionFunction(ABC):
    """Validates blocks and applies them to an application state.

    Both methods raise an exception describing the failure.
    """

    @abstractmethod
    def validate_block(self, state: AppState, block: Any) -> None:
        """Check that ``block`` may be applied to ``state``."""

    @abstractmethod
    def apply_block(self, state: AppState, block: Any) -> None:
        """Apply ``block`` to ``state`` in place."""